"""Release-listing providers.

The engine consumes a complete, unpaginated snapshot of a repository's
releases. ``GitHubReleaseLister`` builds that snapshot from the REST API,
``StaticReleaseLister`` serves a fixed list (tests, replays).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from ghr.core.config import DEFAULT_GITHUB_API_URL
from ghr.core.model import RawRelease, parse_timestamp
from ghr.core.result import Err, Ok, Result
from ghr.core.structured import as_obj_list, as_str_dict, get_int, get_raw_str, get_str
from ghr.tools.http import HttpError

if TYPE_CHECKING:
    from ghr.tools.http import HttpClient

__all__ = [
    "PAGE_SIZE",
    "ReleaseLister",
    "GitHubReleaseLister",
    "StaticReleaseLister",
    "parse_release",
    "releases_url",
]

PAGE_SIZE = 100


class ReleaseLister(Protocol):
    def list_releases(self) -> Result[list[RawRelease], HttpError]:
        """Return every release of the repository as of call time."""
        ...


def releases_url(api_url: str, owner: str, repository: str, page: int) -> str:
    base = api_url.rstrip("/")
    return f"{base}/repos/{owner}/{repository}/releases?per_page={PAGE_SIZE}&page={page}"


def _timestamp(data: Mapping[str, object], key: str) -> datetime | None:
    raw = get_str(data, key)
    if raw is None:
        return None
    return parse_timestamp(raw)


def parse_release(obj: object) -> RawRelease | None:
    """Parse one entry of the GitHub releases payload.

    Returns None when the entry is not an object or has no integer ``id``.
    """
    data = as_str_dict(obj)
    if data is None:
        return None
    release_id = get_int(data, "id")
    if release_id is None:
        return None

    return RawRelease(
        id=release_id,
        tag=get_raw_str(data, "tag_name"),
        draft=data.get("draft") is True,
        prerelease=data.get("prerelease") is True,
        created_at=_timestamp(data, "created_at"),
        published_at=_timestamp(data, "published_at"),
        name=get_str(data, "name"),
        url=get_str(data, "html_url"),
    )


class GitHubReleaseLister:
    """Lists releases through ``GET /repos/{owner}/{repo}/releases``.

    Pages are requested until a short (or empty) page comes back.
    """

    def __init__(
        self,
        *,
        http: HttpClient,
        owner: str,
        repository: str,
        api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> None:
        self._http = http
        self._owner = owner
        self._repository = repository
        self._api_url = api_url

    def list_releases(self) -> Result[list[RawRelease], HttpError]:
        releases: list[RawRelease] = []
        page = 1
        while True:
            url = releases_url(self._api_url, self._owner, self._repository, page)
            result = self._http.get_json(url)
            if isinstance(result, Err):
                return result

            entries = as_obj_list(result.value)
            if entries is None:
                return Err(HttpError(url=url, status=0, message="Expected JSON array"))

            for entry in entries:
                release = parse_release(entry)
                if release is None:
                    return Err(HttpError(url=url, status=0, message="Malformed release entry"))
                releases.append(release)

            if len(entries) < PAGE_SIZE:
                return Ok(releases)
            page += 1


class StaticReleaseLister:
    def __init__(self, releases: Iterable[RawRelease]) -> None:
        self._releases = list(releases)

    def list_releases(self) -> Result[list[RawRelease], HttpError]:
        return Ok(list(self._releases))
