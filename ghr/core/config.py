"""Typed loading of the check request.

The orchestrator sends one JSON document on stdin::

    {
      "source": {"owner": "concourse", "repository": "concourse", "pre_release": true},
      "version": {"tag": "v7.1.0", "id": "123", "timestamp": "2021-03-01T10:00:00Z"}
    }

``source`` is parsed into :class:`Source`, ``version`` into a
:class:`~ghr.core.model.Cursor` (absent or null means first run).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field

from .model import Cursor, FilterConfig, OrderBy, parse_timestamp
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_raw_str, get_str, get_table

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "ConfigError",
    "Source",
    "CheckRequest",
    "load_check_request",
    "parse_cursor",
]

DEFAULT_GITHUB_API_URL = "https://api.github.com"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the request or one of its settings is invalid."""

    message: str
    field: str | None = None
    hint: str | None = None


_STR_KEYS = (
    "owner",
    "user",
    "repository",
    "github_api_url",
    "tag_filter",
    "semver_constraint",
    "order_by",
)
_BOOL_KEYS = ("drafts", "pre_release", "release")


def _require_type(data: Mapping[str, object], key: str, expected: type, label: str) -> None:
    """Reject a present, non-null value of the wrong JSON type."""
    value = data.get(key)
    if value is None or isinstance(value, expected):
        return
    raise ValueError(f"source.{key} must be {label}, got {type(value).__name__} {value!r}")


@dataclass(frozen=True, slots=True)
class Source:
    """Resource configuration (the ``source`` object)."""

    owner: str
    repository: str
    github_api_url: str = DEFAULT_GITHUB_API_URL
    drafts: bool = False
    pre_release: bool = False
    release: bool = True
    tag_filter: str | None = None
    semver_constraint: str | None = None
    order_by: OrderBy = OrderBy.VERSION

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repository}"

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Source:
        """Create Source from the parsed ``source`` object.

        Raises:
            ValueError: when a required key is missing or a value is invalid.
        """
        for key in _STR_KEYS:
            _require_type(data, key, str, "a string")
        for key in _BOOL_KEYS:
            _require_type(data, key, bool, "a boolean")

        # `user` is the deprecated spelling of `owner` and still wins when set.
        owner = get_str(data, "user") or get_str(data, "owner")
        if owner is None:
            raise ValueError("source.owner is required")
        repository = get_str(data, "repository")
        if repository is None:
            raise ValueError("source.repository is required")

        order_by_raw = get_str(data, "order_by") or OrderBy.VERSION.value
        try:
            order_by = OrderBy(order_by_raw.lower())
        except ValueError:
            raise ValueError(
                f"source.order_by must be 'version' or 'time', got {order_by_raw!r}"
            ) from None

        return cls(
            owner=owner,
            repository=repository,
            github_api_url=get_str(data, "github_api_url") or DEFAULT_GITHUB_API_URL,
            drafts=get_bool(data, "drafts", False),
            pre_release=get_bool(data, "pre_release", False),
            release=get_bool(data, "release", True),
            tag_filter=get_raw_str(data, "tag_filter"),
            semver_constraint=get_str(data, "semver_constraint"),
            order_by=order_by,
        )

    def filter_config(self) -> FilterConfig:
        return FilterConfig(
            include_drafts=self.drafts,
            include_pre_release=self.pre_release,
            include_release=self.release,
            tag_filter=self.tag_filter,
            semver_constraint=self.semver_constraint,
            order_by=self.order_by,
        )


@dataclass(frozen=True, slots=True)
class CheckRequest:
    source: Source
    version: Cursor = field(default_factory=Cursor)


def parse_cursor(data: Mapping[str, object] | None) -> Result[Cursor, ConfigError]:
    """Parse the ``version`` object into a Cursor."""
    if data is None:
        return Ok(Cursor())

    raw_id = data.get("id")
    cursor_id: str | None
    if isinstance(raw_id, bool):
        return Err(ConfigError("version.id must be a string", field="version.id"))
    if isinstance(raw_id, int):
        cursor_id = str(raw_id)
    else:
        cursor_id = get_str(data, "id")

    timestamp = None
    raw_ts = get_str(data, "timestamp")
    if raw_ts is not None:
        timestamp = parse_timestamp(raw_ts)
        if timestamp is None:
            return Err(
                ConfigError(
                    f"version.timestamp is not an RFC 3339 timestamp: {raw_ts!r}",
                    field="version.timestamp",
                )
            )

    return Ok(Cursor(tag=get_raw_str(data, "tag"), id=cursor_id, timestamp=timestamp))


def _parse_json(text: str) -> Result[StrDict, ConfigError]:
    try:
        data_obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ConfigError(f"Invalid request JSON: {e}"))
    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Request root must be a JSON object"))
    return Ok(data)


def load_check_request(text: str) -> Result[CheckRequest, ConfigError]:
    """Load and validate a check request.

    Args:
        text: The raw JSON document read from stdin

    Returns:
        Ok(CheckRequest) on success, Err(ConfigError) on failure
    """
    result = _parse_json(text)
    if isinstance(result, Err):
        return result
    data = result.value

    source_table = get_table(data, "source")
    if source_table is None:
        return Err(ConfigError("Request is missing the 'source' object", field="source"))

    if data.get("version") is not None and get_table(data, "version") is None:
        return Err(ConfigError("'version' must be an object or null", field="version"))

    try:
        source = Source.from_dict(source_table)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid source: {e}", field="source"))

    cursor = parse_cursor(get_table(data, "version"))
    if isinstance(cursor, Err):
        return cursor

    return Ok(CheckRequest(source=source, version=cursor.value))
