"""Semantic version range expressions.

Supported syntax (the usual range dialect of semver tooling):

- comparisons: ``=``, ``!=``, ``>``, ``<``, ``>=``, ``<=`` (also ``=>``, ``=<``)
- wildcards: ``1.2.x``, ``1.*``, ``*`` and partial versions (``1.2`` == ``1.2.x``)
- tilde: ``~1.2.3`` (>=1.2.3 <1.3.0), ``~1`` (>=1.0.0 <2.0.0); ``~>`` is an alias
- caret: ``^1.2.3`` (>=1.2.3 <2.0.0), ``^0.2.3`` (>=0.2.3 <0.3.0), ``^0.0.3`` (>=0.0.3 <0.0.4)
- hyphen ranges: ``1.2 - 1.4.5``
- AND: terms separated by commas or whitespace; OR: groups separated by ``||``

A version carrying a pre-release only satisfies a term whose own version
carries a pre-release, so ``>=1.0.0`` does not admit ``1.1.0-rc.1``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ghr.core.config import ConfigError
from ghr.core.result import Err, Ok, Result
from ghr.versioning.semver import SemVer

__all__ = ["Constraint", "Term", "parse_constraint"]


_PARTIAL_RE = re.compile(
    r"^v?(\d+|[xX*])(?:\.(\d+|[xX*]))?(?:\.(\d+|[xX*]))?"
    r"(?:-([0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)

_VERSION = r"v?[0-9xX*][0-9A-Za-z.+*-]*"
_TERM_RE = re.compile(
    rf"\s*(?:(?P<lo>{_VERSION})\s+-\s+(?P<hi>{_VERSION})"
    rf"|(?P<op>!=|>=|=>|<=|=<|~>|>|<|=|~|\^)?\s*(?P<ver>{_VERSION}))\s*,?"
)

type Bound = tuple[str, SemVer]


@dataclass(frozen=True, slots=True)
class _Partial:
    major: int | None
    minor: int | None
    patch: int | None
    prerelease: str

    @property
    def is_full(self) -> bool:
        return self.patch is not None

    def lower(self) -> SemVer:
        return SemVer(self.major or 0, self.minor or 0, self.patch or 0, self.prerelease)

    def upper(self) -> SemVer | None:
        """Exclusive upper bound of a wildcard version; None when unbounded."""
        if self.major is None:
            return None
        if self.minor is None:
            return SemVer(self.major + 1, 0, 0)
        if self.patch is None:
            return SemVer(self.major, self.minor + 1, 0)
        return None


def _parse_partial(text: str) -> _Partial | None:
    m = _PARTIAL_RE.match(text)
    if m is None:
        return None

    numbers: list[int | None] = []
    wildcard = False
    for raw in (m.group(1), m.group(2), m.group(3)):
        if wildcard or raw is None or raw in {"x", "X", "*"}:
            wildcard = True
            numbers.append(None)
        else:
            numbers.append(int(raw))
    return _Partial(numbers[0], numbers[1], numbers[2], m.group(4) or "")


_COMPARE = {
    "=": lambda a, b: a.sort_key() == b.sort_key(),
    ">": lambda a, b: a > b,
    ">=": lambda a, b: a >= b,
    "<": lambda a, b: a < b,
    "<=": lambda a, b: a <= b,
}


@dataclass(frozen=True, slots=True)
class Term:
    """One AND-able piece of a constraint, reduced to plain bounds."""

    text: str
    bounds: tuple[Bound, ...]
    negate: bool = False
    prerelease_ok: bool = False

    def check(self, version: SemVer) -> bool:
        if version.prerelease and not self.prerelease_ok:
            return False
        inside = all(_COMPARE[op](version, bound) for op, bound in self.bounds)
        return not inside if self.negate else inside


def _never(text: str) -> Term:
    return Term(text=text, bounds=(), negate=True)


def _term_for(op: str, p: _Partial, text: str) -> Term:
    pre = bool(p.prerelease)
    lo = p.lower()
    up = p.upper()

    if op in {"", "=", "!="}:
        if p.major is None:
            bounds: tuple[Bound, ...] = ()
        elif p.is_full:
            bounds = (("=", lo),)
        else:
            if up is None:
                raise AssertionError(f"partial version without an upper bound: {text}")
            bounds = ((">=", lo), ("<", up))
        return Term(text=text, bounds=bounds, negate=op == "!=", prerelease_ok=pre)

    if op == ">":
        if p.major is None:
            return _never(text)
        if p.is_full:
            return Term(text=text, bounds=((">", lo),), prerelease_ok=pre)
        if up is None:
            raise AssertionError(f"partial version without an upper bound: {text}")
        return Term(text=text, bounds=((">=", up),), prerelease_ok=pre)

    if op in {">=", "=>"}:
        bounds = () if p.major is None else ((">=", lo),)
        return Term(text=text, bounds=bounds, prerelease_ok=pre)

    if op == "<":
        if p.major is None:
            return _never(text)
        return Term(text=text, bounds=(("<", lo),), prerelease_ok=pre)

    if op in {"<=", "=<"}:
        if p.major is None:
            bounds = ()
        elif p.is_full:
            bounds = (("<=", lo),)
        else:
            if up is None:
                raise AssertionError(f"partial version without an upper bound: {text}")
            bounds = (("<", up),)
        return Term(text=text, bounds=bounds, prerelease_ok=pre)

    if op in {"~", "~>"}:
        if p.major is None:
            return Term(text=text, bounds=(), prerelease_ok=pre)
        if p.minor is None:
            ceiling = SemVer(p.major + 1, 0, 0)
        else:
            ceiling = SemVer(p.major, p.minor + 1, 0)
        return Term(text=text, bounds=((">=", lo), ("<", ceiling)), prerelease_ok=pre)

    if op == "^":
        if p.major is None:
            return Term(text=text, bounds=(), prerelease_ok=pre)
        if p.major > 0:
            ceiling = SemVer(p.major + 1, 0, 0)
        elif p.minor is None:
            ceiling = SemVer(1, 0, 0)
        elif p.minor > 0:
            ceiling = SemVer(0, p.minor + 1, 0)
        elif p.patch is None:
            ceiling = SemVer(0, 1, 0)
        else:
            ceiling = SemVer(0, 0, p.patch + 1)
        return Term(text=text, bounds=((">=", lo), ("<", ceiling)), prerelease_ok=pre)

    raise AssertionError(f"unexpected constraint operator: {op}")


def _hyphen_term(lo: _Partial, hi: _Partial, text: str) -> Term:
    bounds: list[Bound] = [(">=", lo.lower())]
    if hi.is_full:
        bounds.append(("<=", hi.lower()))
    else:
        up = hi.upper()
        if up is not None:
            bounds.append(("<", up))
    return Term(
        text=text,
        bounds=tuple(bounds),
        prerelease_ok=bool(lo.prerelease or hi.prerelease),
    )


@dataclass(frozen=True, slots=True)
class Constraint:
    """A parsed range expression: OR of AND-groups of terms."""

    text: str
    groups: tuple[tuple[Term, ...], ...]

    def check(self, version: SemVer) -> bool:
        return any(all(term.check(version) for term in group) for group in self.groups)


def _parse_group(text: str, source: str) -> Result[tuple[Term, ...], ConfigError]:
    terms: list[Term] = []
    pos = 0
    stripped = text.strip()
    while pos < len(stripped):
        m = _TERM_RE.match(stripped, pos)
        if m is None or m.end() == pos:
            return Err(_invalid(source, f"unexpected input at {stripped[pos:]!r}"))
        pos = m.end()
        term_text = m.group(0).strip().rstrip(",").strip()

        if m.group("lo") is not None:
            lo = _parse_partial(m.group("lo"))
            hi = _parse_partial(m.group("hi"))
            if lo is None or hi is None:
                return Err(_invalid(source, f"bad version in {term_text!r}"))
            terms.append(_hyphen_term(lo, hi, term_text))
            continue

        partial = _parse_partial(m.group("ver"))
        if partial is None:
            return Err(_invalid(source, f"bad version {m.group('ver')!r}"))
        terms.append(_term_for(m.group("op") or "", partial, term_text))

    if not terms:
        return Err(_invalid(source, "empty range"))
    return Ok(tuple(terms))


def _invalid(source: str, detail: str) -> ConfigError:
    return ConfigError(
        f"invalid semver_constraint {source!r}: {detail}",
        field="semver_constraint",
        hint="examples: '0.1.x', '>= 1.2, < 2.0', '~1.4', '^2', '1.0 - 1.5'",
    )


def parse_constraint(text: str) -> Result[Constraint, ConfigError]:
    """Parse a range expression such as ``>= 1.2, < 2.0 || 3.x``."""
    if not text.strip():
        return Err(_invalid(text, "empty constraint"))

    groups: list[tuple[Term, ...]] = []
    for raw_group in text.split("||"):
        group = _parse_group(raw_group, text)
        if isinstance(group, Err):
            return group
        groups.append(group.value)
    return Ok(Constraint(text=text, groups=tuple(groups)))
