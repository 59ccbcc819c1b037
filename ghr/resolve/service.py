"""Check flow: fetch once, then filter -> sort -> resolve.

``resolve_versions`` is the pure engine; ``CheckService`` wires it to a
release-listing provider and reports counts for diagnostics.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ghr.core.config import ConfigError
from ghr.core.model import Classification, Cursor, FilterConfig, RawRelease, VersionIdentity
from ghr.core.result import Err, Ok, Result
from ghr.resolve.classify import classify_and_filter
from ghr.resolve.context import ResolveContext, build_context
from ghr.resolve.cursor import resolve_delta
from ghr.resolve.errors import CheckError
from ghr.resolve.ordering import sort_releases

if TYPE_CHECKING:
    from ghr.github.listing import ReleaseLister

__all__ = ["CheckReport", "CheckService", "check_releases", "resolve_versions"]


@dataclass(frozen=True, slots=True)
class CheckReport:
    versions: tuple[VersionIdentity, ...]
    fetched: int
    qualifying: int
    latest: VersionIdentity | None = None
    by_classification: tuple[tuple[Classification, int], ...] = ()


def _count_classifications(
    releases: Iterable[RawRelease],
) -> tuple[tuple[Classification, int], ...]:
    counts = Counter(release.classification for release in releases)
    return tuple((kind, counts[kind]) for kind in Classification if counts[kind])


def check_releases(
    releases: Iterable[RawRelease],
    ctx: ResolveContext,
    cursor: Cursor,
) -> CheckReport:
    snapshot = list(releases)
    candidates = sort_releases(classify_and_filter(snapshot, ctx), ctx.ordering)
    versions = resolve_delta(candidates, cursor, ctx.ordering)
    return CheckReport(
        versions=tuple(versions),
        fetched=len(snapshot),
        qualifying=len(candidates),
        latest=candidates[-1].identity() if candidates else None,
        by_classification=_count_classifications(snapshot),
    )


def resolve_versions(
    releases: Iterable[RawRelease],
    config: FilterConfig,
    cursor: Cursor,
) -> Result[list[VersionIdentity], ConfigError]:
    """The engine as a pure function of (releases, config, cursor)."""
    ctx = build_context(config)
    if isinstance(ctx, Err):
        return ctx
    return Ok(list(check_releases(releases, ctx.value, cursor).versions))


class CheckService:
    """Runs one check against a release-listing provider."""

    def __init__(self, *, lister: ReleaseLister) -> None:
        self._lister = lister

    def run(self, config: FilterConfig, cursor: Cursor) -> Result[CheckReport, CheckError]:
        # Configuration is validated before any network traffic.
        ctx = build_context(config)
        if isinstance(ctx, Err):
            error = ctx.error
            return Err(CheckError(kind="invalid_config", message=error.message, hint=error.hint))

        listing = self._lister.list_releases()
        if isinstance(listing, Err):
            return Err(
                CheckError(
                    kind="listing_failed",
                    message=f"listing releases failed: {listing.error}",
                )
            )

        return Ok(check_releases(listing.value, ctx.value, cursor))
