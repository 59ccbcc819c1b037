"""Tests for ghr.resolve.cursor module."""

from __future__ import annotations

from datetime import UTC, datetime

from ghr.core.model import Cursor, RawRelease
from ghr.resolve.cursor import resolve_delta
from ghr.resolve.ordering import TimeOrdering, VersionOrdering, sort_releases
from ghr.versioning.extract import DefaultRule

VERSION = VersionOrdering(DefaultRule())
TIME = TimeOrdering()

DAY1 = datetime(2024, 5, 1, tzinfo=UTC)
DAY2 = datetime(2024, 5, 2, tzinfo=UTC)
DAY3 = datetime(2024, 5, 3, tzinfo=UTC)


def _sorted(*tags: str) -> list[RawRelease]:
    releases = [RawRelease(id=i, tag=tag) for i, tag in enumerate(tags, start=1)]
    return sort_releases(releases, VERSION)


def _emitted(releases: list[RawRelease], cursor: Cursor) -> list[str]:
    return [v.tag for v in resolve_delta(releases, cursor, VERSION)]


class TestResolveDelta:
    """Test the delta cases for version ordering."""

    def test_empty_releases(self) -> None:
        assert resolve_delta([], Cursor(tag="v1.0.0"), VERSION) == []
        assert resolve_delta([], Cursor(), VERSION) == []

    def test_first_run(self) -> None:
        assert _emitted(_sorted("v0.1.2", "v0.1.3", "v0.4.0"), Cursor()) == ["v0.4.0"]

    def test_caught_up(self) -> None:
        assert _emitted(_sorted("v0.1.2", "v0.4.0"), Cursor(tag="v0.4.0")) == []

    def test_caught_up_by_id(self) -> None:
        assert _emitted(_sorted("v0.1.2", "v0.4.0"), Cursor(id="2")) == []

    def test_delta_includes_cursor(self) -> None:
        releases = _sorted("v0.1.2", "v0.1.3", "v0.4.0")
        assert _emitted(releases, Cursor(tag="v0.1.3")) == ["v0.1.3", "v0.4.0"]

    def test_unknown_cursor_restarts_at_latest(self) -> None:
        releases = _sorted("v0.1.2", "v0.1.3", "v0.4.0")
        assert _emitted(releases, Cursor(tag="v9.9.9")) == ["v0.4.0"]

    def test_tag_wins_over_id(self) -> None:
        releases = _sorted("v0.1.2", "v0.1.3", "v0.4.0")
        assert _emitted(releases, Cursor(tag="v0.1.2", id="3")) == ["v0.1.2", "v0.1.3", "v0.4.0"]

    def test_identities(self) -> None:
        releases = [RawRelease(id=5, tag="v1.0.0", published_at=DAY1)]
        [identity] = resolve_delta(releases, Cursor(), VERSION)
        assert identity.tag == "v1.0.0"
        assert identity.id == "5"
        assert identity.timestamp == DAY1


class TestResolveDeltaByTime:
    """Test the delta cases for time ordering."""

    RELEASES = sort_releases(
        [
            RawRelease(id=1, created_at=DAY1),
            RawRelease(id=2, created_at=DAY2),
            RawRelease(id=3, created_at=DAY3),
        ],
        TIME,
    )

    def _ids(self, cursor: Cursor) -> list[str]:
        return [v.id for v in resolve_delta(self.RELEASES, cursor, TIME)]

    def test_first_run(self) -> None:
        assert self._ids(Cursor()) == ["3"]

    def test_positional_from_timestamp(self) -> None:
        assert self._ids(Cursor(id="99", timestamp=DAY2)) == ["2", "3"]

    def test_caught_up_by_id(self) -> None:
        assert self._ids(Cursor(id="3", timestamp=DAY3)) == []

    def test_timestamp_after_latest(self) -> None:
        later = datetime(2030, 1, 1, tzinfo=UTC)
        assert self._ids(Cursor(id="99", timestamp=later)) == ["3"]

    def test_no_timestamp(self) -> None:
        assert self._ids(Cursor(id="99")) == ["3"]
