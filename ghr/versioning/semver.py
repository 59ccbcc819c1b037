"""Strict and loose semantic versions.

``SemVer`` follows semver.org exactly and backs ``semver_constraint``
checks. ``LooseVersion`` accepts any dotted numeric release (``1``, ``1.2``,
``1.2.3.4``) with optional pre-release and build suffixes and is what
releases are ordered by.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "SemVer",
    "LooseVersion",
    "parse_semver",
    "parse_loose",
    "prerelease_key",
]


_SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)(?:\.(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*))*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)

_LOOSE_RE = re.compile(
    r"^(\d+(?:\.\d+)*)"
    r"(?:-([0-9A-Za-z][0-9A-Za-z.-]*)|\.?([A-Za-z][0-9A-Za-z.-]*))?"
    r"(?:\+([0-9A-Za-z.-]+))?$"
)

_TOKEN_RE = re.compile(r"\d+|[A-Za-z]+")

type PrereleaseKey = tuple[tuple[int, int, str], ...]


def prerelease_key(prerelease: str) -> PrereleaseKey:
    """Ordering key for a pre-release suffix.

    Tokens are split on separators and digit/letter boundaries so that
    ``rc.2``, ``rc2`` and ``rc-2`` all order before ``rc.10``. Numeric tokens
    sort before alphabetic ones.
    """
    parts: list[tuple[int, int, str]] = []
    for token in _TOKEN_RE.findall(prerelease):
        if token.isdigit():
            parts.append((0, int(token), ""))
        else:
            parts.append((1, 0, token))
    return tuple(parts)


@dataclass(frozen=True, slots=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def sort_key(self) -> tuple[tuple[int, int, int], int, PrereleaseKey]:
        # A final release outranks any pre-release of the same core.
        return (self.core, 0 if self.prerelease else 1, prerelease_key(self.prerelease))

    def __lt__(self, other: SemVer) -> bool:
        return self.sort_key() < other.sort_key()

    def __le__(self, other: SemVer) -> bool:
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: SemVer) -> bool:
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: SemVer) -> bool:
        return self.sort_key() >= other.sort_key()


def parse_semver(text: str) -> SemVer | None:
    """Parse a strict semantic version (no leading ``v``)."""
    m = _SEMVER_RE.match(text)
    if m is None:
        return None
    return SemVer(
        major=int(m.group(1)),
        minor=int(m.group(2)),
        patch=int(m.group(3)),
        prerelease=m.group(4) or "",
        build=m.group(5) or "",
    )


@dataclass(frozen=True, slots=True)
class LooseVersion:
    """A dotted numeric release with optional pre-release/build suffixes.

    Build metadata is kept for display but does not take part in ordering.
    """

    release: tuple[int, ...]
    prerelease: str = ""
    build: str = ""

    def sort_key(self) -> tuple[tuple[int, ...], int, PrereleaseKey]:
        release = list(self.release)
        while len(release) > 1 and release[-1] == 0:
            release.pop()
        return (tuple(release), 0 if self.prerelease else 1, prerelease_key(self.prerelease))


def parse_loose(text: str) -> LooseVersion | None:
    """Parse a loosely semantic version; None when ``text`` is not one."""
    if not text:
        return None
    m = _LOOSE_RE.match(text)
    if m is None:
        return None
    release = tuple(int(part) for part in m.group(1).split("."))
    prerelease = m.group(2) or m.group(3) or ""
    return LooseVersion(release=release, prerelease=prerelease, build=m.group(4) or "")
