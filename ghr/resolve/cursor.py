"""Delta computation relative to the caller's cursor.

Given the filtered, ascending release list ``R`` and a cursor ``c``:

- ``R`` empty                      -> ``[]``
- ``c`` empty (first run)          -> ``[last(R)]``
- ``c`` identifies ``last(R)``     -> ``[]`` (caught up)
- ``c`` located at index ``i``     -> ``R[i:]`` (the cursor release included)
- ``c`` not located                -> ``[last(R)]`` (restart from newest)

The resolver never fails; it only varies the cardinality of its result.
"""

from __future__ import annotations

from collections.abc import Sequence

from ghr.core.model import Cursor, RawRelease, VersionIdentity
from ghr.resolve.ordering import Ordering, match_index

__all__ = ["resolve_delta"]


def resolve_delta(
    releases: Sequence[RawRelease],
    cursor: Cursor,
    ordering: Ordering,
) -> list[VersionIdentity]:
    """Compute the versions to emit.

    Args:
        releases: Qualifying releases, sorted ascending by ``ordering``
        cursor: The last version the caller has seen
        ordering: The ordering ``releases`` was sorted with

    Returns:
        Ascending list of version identities (possibly empty)
    """
    if not releases:
        return []

    latest = releases[-1]
    if cursor.is_empty:
        return [latest.identity()]

    if match_index(releases, cursor) == len(releases) - 1:
        return []

    index = ordering.locate(releases, cursor)
    if index is None:
        return [latest.identity()]
    return [release.identity() for release in releases[index:]]
