"""Release orderings.

One implementation per ``OrderBy`` mode, chosen once per invocation by
:func:`ordering_for`. Each ordering exposes a total sort key; sorting always
goes through Python's stable ``sorted`` so co-equal releases keep the order
the listing provider returned them in.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from ghr.core.model import Cursor, OrderBy, RawRelease
from ghr.versioning.extract import VersionRule, extract
from ghr.versioning.semver import parse_loose

__all__ = [
    "Ordering",
    "VersionOrdering",
    "TimeOrdering",
    "ordering_for",
    "sort_releases",
    "match_index",
]

type VersionKey = tuple[object, ...]


class Ordering(Protocol):
    """A total order over releases plus the cursor search it supports."""

    @property
    def mode(self) -> OrderBy: ...

    def key(self, release: RawRelease) -> object:
        """Sort key for ``release`` (ascending = older)."""
        ...

    def locate(self, releases: Sequence[RawRelease], cursor: Cursor) -> int | None:
        """Index in sorted ``releases`` where the delta for ``cursor`` starts."""
        ...


def _tag_index(releases: Sequence[RawRelease], tag: str) -> int | None:
    for i, release in enumerate(releases):
        if release.tag == tag:
            return i
    return None


def _id_index(releases: Sequence[RawRelease], release_id: str) -> int | None:
    for i, release in enumerate(releases):
        if str(release.id) == release_id:
            return i
    return None


def match_index(releases: Sequence[RawRelease], cursor: Cursor) -> int | None:
    """Identity match: exact tag first, then exact id."""
    if cursor.tag:
        index = _tag_index(releases, cursor.tag)
        if index is not None:
            return index
    if cursor.id:
        return _id_index(releases, cursor.id)
    return None


@dataclass(frozen=True, slots=True)
class VersionOrdering:
    rule: VersionRule

    @property
    def mode(self) -> OrderBy:
        return OrderBy.VERSION

    def version_key(self, tag: str | None) -> VersionKey:
        # Unparsable versions sort before every parsable one and tie with each other.
        parsed = parse_loose(extract(self.rule, tag or ""))
        if parsed is None:
            return (0,)
        return (1, parsed.sort_key())

    def key(self, release: RawRelease) -> VersionKey:
        return self.version_key(release.tag)

    def locate(self, releases: Sequence[RawRelease], cursor: Cursor) -> int | None:
        if cursor.tag:
            target = self.version_key(cursor.tag)
            start = bisect_left(releases, target, key=self.key)
            for i in range(start, len(releases)):
                if self.key(releases[i]) != target:
                    break
                if releases[i].tag == cursor.tag:
                    return i
        if cursor.id:
            return _id_index(releases, cursor.id)
        return None


@dataclass(frozen=True, slots=True)
class TimeOrdering:
    @property
    def mode(self) -> OrderBy:
        return OrderBy.TIME

    def key(self, release: RawRelease) -> datetime:
        return release.effective_timestamp

    def locate(self, releases: Sequence[RawRelease], cursor: Cursor) -> int | None:
        # Positional: the first release not older than the cursor.
        if cursor.timestamp is None:
            return None
        index = bisect_left(releases, cursor.timestamp, key=self.key)
        if index >= len(releases):
            return None
        return index


def ordering_for(order_by: OrderBy, rule: VersionRule) -> Ordering:
    match order_by:
        case OrderBy.VERSION:
            return VersionOrdering(rule)
        case OrderBy.TIME:
            return TimeOrdering()


def sort_releases(releases: Iterable[RawRelease], ordering: Ordering) -> list[RawRelease]:
    """Stable ascending sort under ``ordering``."""
    return sorted(releases, key=ordering.key)

