"""Domain types shared by the resolution engine and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

__all__ = [
    "ZERO_INSTANT",
    "as_utc",
    "Classification",
    "OrderBy",
    "RawRelease",
    "FilterConfig",
    "Cursor",
    "VersionIdentity",
    "parse_timestamp",
    "format_timestamp",
]

# Sorts before every real timestamp; serialized as 0001-01-01T00:00:00Z.
ZERO_INSTANT = datetime.min.replace(tzinfo=UTC)


class Classification(Enum):
    RELEASE = "release"
    PRE_RELEASE = "pre_release"
    DRAFT = "draft"

    def __str__(self) -> str:
        return self.value


class OrderBy(Enum):
    VERSION = "version"
    TIME = "time"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RawRelease:
    """A release as returned by the listing provider (read-only)."""

    id: int
    tag: str | None = None
    draft: bool = False
    prerelease: bool = False
    created_at: datetime | None = None
    published_at: datetime | None = None
    name: str | None = None
    url: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_at", as_utc(self.created_at))
        object.__setattr__(self, "published_at", as_utc(self.published_at))

    @property
    def classification(self) -> Classification:
        if self.draft:
            return Classification.DRAFT
        if self.prerelease:
            return Classification.PRE_RELEASE
        return Classification.RELEASE

    @property
    def effective_timestamp(self) -> datetime:
        """``published_at``, else ``created_at``, else the zero instant."""
        if self.published_at is not None:
            return self.published_at
        if self.created_at is not None:
            return self.created_at
        return ZERO_INSTANT

    def identity(self) -> VersionIdentity:
        return VersionIdentity(
            tag=self.tag or "",
            id=str(self.id),
            timestamp=self.effective_timestamp,
        )


@dataclass(frozen=True, slots=True)
class FilterConfig:
    include_drafts: bool = False
    include_pre_release: bool = False
    include_release: bool = True
    tag_filter: str | None = None
    semver_constraint: str | None = None
    order_by: OrderBy = OrderBy.VERSION


@dataclass(frozen=True, slots=True)
class Cursor:
    """The caller's last-known version. All fields empty means first run."""

    tag: str | None = None
    id: str | None = None
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", as_utc(self.timestamp))

    @property
    def is_empty(self) -> bool:
        return (
            not self.tag
            and not self.id
            and (self.timestamp is None or self.timestamp == ZERO_INSTANT)
        )


@dataclass(frozen=True, slots=True)
class VersionIdentity:
    """Externally visible identity of a release, emitted in ascending order."""

    tag: str
    id: str
    timestamp: datetime

    def to_json(self) -> dict[str, str]:
        out: dict[str, str] = {}
        if self.tag:
            out["tag"] = self.tag
        out["id"] = self.id
        out["timestamp"] = format_timestamp(self.timestamp)
        return out


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to a naive datetime; aware values and None pass through."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def parse_timestamp(value: str) -> datetime | None:
    """Parse an RFC 3339 timestamp; naive values are taken as UTC."""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return as_utc(parsed)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    utc = value.astimezone(UTC)
    text = f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
    if utc.microsecond:
        text += f".{utc.microsecond:06d}".rstrip("0")
    return text + "Z"
