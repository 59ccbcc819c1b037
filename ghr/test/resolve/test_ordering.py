"""Tests for ghr.resolve.ordering module."""

from __future__ import annotations

import itertools
import re
from datetime import UTC, datetime

from ghr.core.model import Cursor, OrderBy, RawRelease
from ghr.resolve.ordering import (
    TimeOrdering,
    VersionOrdering,
    match_index,
    ordering_for,
    sort_releases,
)
from ghr.versioning.extract import DefaultRule, RegexRule

DAY1 = datetime(2024, 5, 1, tzinfo=UTC)
DAY2 = datetime(2024, 5, 2, tzinfo=UTC)
DAY3 = datetime(2024, 5, 3, tzinfo=UTC)

VERSION = VersionOrdering(DefaultRule())
TIME = TimeOrdering()


def _tagged(*tags: str) -> list[RawRelease]:
    return [RawRelease(id=i, tag=tag) for i, tag in enumerate(tags, start=1)]


class TestVersionOrdering:
    """Test version sort keys."""

    def test_numeric_not_lexicographic(self) -> None:
        releases = _tagged("v0.1.10", "v0.4.0", "v0.1.9", "v0.1.3")
        assert [r.tag for r in sort_releases(releases, VERSION)] == [
            "v0.1.3",
            "v0.1.9",
            "v0.1.10",
            "v0.4.0",
        ]

    def test_prereleases_before_final(self) -> None:
        releases = _tagged("v1.0.0", "v1.0.0-rc.10", "v1.0.0-rc.2", "v0.9.0")
        assert [r.tag for r in sort_releases(releases, VERSION)] == [
            "v0.9.0",
            "v1.0.0-rc.2",
            "v1.0.0-rc.10",
            "v1.0.0",
        ]

    def test_unparsable_sorts_first(self) -> None:
        releases = _tagged("v1.0.0", "nightly", "v0.1.0")
        assert [r.tag for r in sort_releases(releases, VERSION)] == ["nightly", "v0.1.0", "v1.0.0"]

    def test_equal_versions_keep_fetch_order(self) -> None:
        releases = [
            RawRelease(id=10, tag="v1.0"),
            RawRelease(id=11, tag="1.0.0"),
            RawRelease(id=12, tag="v1.0.0+build"),
        ]
        assert [r.id for r in sort_releases(releases, VERSION)] == [10, 11, 12]

    def test_regex_rule_keys(self) -> None:
        ordering = VersionOrdering(RegexRule(re.compile(r"^app-v(.*)$")))
        releases = _tagged("app-v2.0.0", "app-v10.0.0", "app-v1.0.0")
        assert [r.tag for r in sort_releases(releases, ordering)] == [
            "app-v1.0.0",
            "app-v2.0.0",
            "app-v10.0.0",
        ]


class TestTimeOrdering:
    """Test timestamp sort keys."""

    def test_effective_timestamp(self) -> None:
        releases = [
            RawRelease(id=1, created_at=DAY2),
            RawRelease(id=2, created_at=DAY3),
            RawRelease(id=3, created_at=DAY1),
        ]
        assert [r.id for r in sort_releases(releases, TIME)] == [3, 1, 2]

    def test_published_wins_over_created(self) -> None:
        releases = [
            RawRelease(id=1, created_at=DAY1, published_at=DAY3),
            RawRelease(id=2, created_at=DAY2),
        ]
        assert [r.id for r in sort_releases(releases, TIME)] == [2, 1]

    def test_missing_timestamps_sort_first(self) -> None:
        releases = [RawRelease(id=1, created_at=DAY1), RawRelease(id=2)]
        assert [r.id for r in sort_releases(releases, TIME)] == [2, 1]


class TestKeyTotality:
    """Sort keys form a total order, including unparsable versions."""

    RELEASES = _tagged("v1.0.0", "junk", "v1.0", "v1.0.0-rc.1", "2", "other", "v0.9.9")

    def _cmp(self, a: RawRelease, b: RawRelease) -> int:
        ka, kb = VERSION.key(a), VERSION.key(b)
        return (ka > kb) - (ka < kb)  # type: ignore[operator]

    def test_antisymmetric(self) -> None:
        for a, b in itertools.product(self.RELEASES, repeat=2):
            assert self._cmp(a, b) == -self._cmp(b, a)

    def test_transitive(self) -> None:
        for a, b, c in itertools.product(self.RELEASES, repeat=3):
            if self._cmp(a, b) <= 0 and self._cmp(b, c) <= 0:
                assert self._cmp(a, c) <= 0


class TestLocate:
    """Test cursor search within sorted releases."""

    def test_match_index_prefers_tag(self) -> None:
        releases = _tagged("v1.0.0", "v2.0.0")
        assert match_index(releases, Cursor(tag="v1.0.0", id="2")) == 0

    def test_match_index_falls_back_to_id(self) -> None:
        releases = _tagged("v1.0.0", "v2.0.0")
        assert match_index(releases, Cursor(tag="v9.0.0", id="2")) == 1
        assert match_index(releases, Cursor(id="1")) == 0
        assert match_index(releases, Cursor(tag="v9.0.0")) is None

    def test_version_locate_within_equal_run(self) -> None:
        releases = sort_releases(_tagged("v1.0", "v1.0.0", "v2.0.0"), VERSION)
        assert VERSION.locate(releases, Cursor(tag="v1.0.0")) == 1

    def test_version_locate_by_id(self) -> None:
        releases = sort_releases(_tagged("v1.0.0", "v2.0.0", "v3.0.0"), VERSION)
        assert VERSION.locate(releases, Cursor(tag="renamed", id="2")) == 1

    def test_version_locate_missing(self) -> None:
        releases = sort_releases(_tagged("v1.0.0", "v2.0.0"), VERSION)
        assert VERSION.locate(releases, Cursor(tag="v1.5.0")) is None

    def test_time_locate_positional(self) -> None:
        releases = [RawRelease(id=1, created_at=DAY1), RawRelease(id=2, created_at=DAY3)]
        assert TIME.locate(releases, Cursor(timestamp=DAY2)) == 1
        assert TIME.locate(releases, Cursor(timestamp=DAY1)) == 0

    def test_time_locate_past_end(self) -> None:
        releases = [RawRelease(id=1, created_at=DAY1)]
        assert TIME.locate(releases, Cursor(timestamp=DAY2)) is None

    def test_time_locate_without_timestamp(self) -> None:
        releases = [RawRelease(id=1, created_at=DAY1)]
        assert TIME.locate(releases, Cursor(id="1")) is None


def test_ordering_for() -> None:
    assert ordering_for(OrderBy.VERSION, DefaultRule()).mode is OrderBy.VERSION
    assert ordering_for(OrderBy.TIME, DefaultRule()).mode is OrderBy.TIME
