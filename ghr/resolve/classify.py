"""Release classification and filtering.

A release survives when, in order:

1. its draft flag equals ``include_drafts`` (one draft-state universe per run),
2. its kind (release / pre-release) is admitted by the :class:`ReleaseSelector`,
3. it satisfies ``semver_constraint`` (when set),
4. its tag matches ``tag_filter`` (when set),
5. under version ordering, its extracted version parses as a loose version.

Per-release data problems only exclude that release; they are never errors.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ghr.core.model import Classification, FilterConfig, OrderBy, RawRelease
from ghr.versioning.extract import RegexRule, extract
from ghr.versioning.semver import parse_loose, parse_semver

if TYPE_CHECKING:
    from ghr.resolve.context import ResolveContext

__all__ = ["ReleaseSelector", "kind_of", "classify_and_filter", "accepts"]


def kind_of(release: RawRelease) -> Classification:
    """Release type ignoring the draft flag (drafts can be pre-releases too)."""
    return Classification.PRE_RELEASE if release.prerelease else Classification.RELEASE


@dataclass(frozen=True, slots=True)
class ReleaseSelector:
    """Which draft state and which release kinds a run admits.

    Computed once from the three ``source`` booleans. A kind is admitted
    when it is enabled, or when the other kind is disabled too: with both
    ``release`` and ``pre_release`` off every kind passes.
    """

    drafts: bool
    kinds: frozenset[Classification]

    @classmethod
    def from_config(cls, config: FilterConfig) -> ReleaseSelector:
        kinds: set[Classification] = set()
        if config.include_pre_release or not config.include_release:
            kinds.add(Classification.PRE_RELEASE)
        if config.include_release or not config.include_pre_release:
            kinds.add(Classification.RELEASE)
        return cls(drafts=config.include_drafts, kinds=frozenset(kinds))

    def admits(self, release: RawRelease) -> bool:
        if release.draft != self.drafts:
            return False
        return kind_of(release) in self.kinds


def accepts(release: RawRelease, ctx: ResolveContext) -> bool:
    """Whether ``release`` belongs to the candidate set of this run."""
    if not ctx.selector.admits(release):
        return False

    tag = release.tag or ""

    if ctx.constraint is not None:
        if not tag:
            return False
        version = parse_semver(extract(ctx.rule, tag))
        if version is None or not ctx.constraint.check(version):
            return False

    if isinstance(ctx.rule, RegexRule):
        if not tag or ctx.rule.pattern.search(tag) is None:
            return False

    if ctx.ordering.mode is OrderBy.VERSION:
        if parse_loose(extract(ctx.rule, tag)) is None:
            return False

    return True


def classify_and_filter(releases: Iterable[RawRelease], ctx: ResolveContext) -> list[RawRelease]:
    """Keep the releases this run may report, preserving their order."""
    return [release for release in releases if accepts(release, ctx)]
