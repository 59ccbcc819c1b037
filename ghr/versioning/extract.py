"""Turning free-form release tags into comparable version strings.

Two rules exist:

- ``DefaultRule``: ``v1.2.3`` -> ``1.2.3``; anything else is used unchanged.
- ``RegexRule``: built from ``tag_filter``. The expression is searched in
  the tag; without a capture group the whole match is the version, with one
  the first group is, unless that group is too short to be a version (see
  :func:`is_plausible_capture`), in which case a known prefix is stripped
  from the whole match instead.

An empty string means "this tag carries no parseable version".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ghr.core.config import ConfigError
from ghr.core.result import Err, Ok, Result

__all__ = [
    "KNOWN_PREFIXES",
    "DefaultRule",
    "RegexRule",
    "VersionRule",
    "compile_rule",
    "extract",
    "is_plausible_capture",
    "strip_known_prefix",
]

KNOWN_PREFIXES: tuple[str, ...] = (
    "v",
    "version-",
    "release-",
    "rel-",
    "r",
    "@",
    "stable-",
    "final-",
    "prod-",
    "production-",
)

# Longest first so `release-` is preferred over `r`.
_PREFIXES_BY_LENGTH = tuple(sorted(KNOWN_PREFIXES, key=len, reverse=True))


@dataclass(frozen=True, slots=True)
class DefaultRule:
    pass


@dataclass(frozen=True, slots=True)
class RegexRule:
    pattern: re.Pattern[str]

    @property
    def use_capture(self) -> bool:
        return self.pattern.groups > 0


type VersionRule = DefaultRule | RegexRule


def compile_rule(tag_filter: str | None) -> Result[VersionRule, ConfigError]:
    """Build the extraction rule for one invocation.

    Args:
        tag_filter: The configured tag regex, or None for the default rule

    Returns:
        Ok with the rule, or Err when the expression does not compile
    """
    if tag_filter is None:
        return Ok(DefaultRule())
    try:
        return Ok(RegexRule(re.compile(tag_filter)))
    except re.error as e:
        return Err(
            ConfigError(
                f"invalid tag_filter {tag_filter!r}: {e}",
                field="tag_filter",
                hint="tag_filter is a Python regular expression, e.g. '^app-v(.*)$'",
            )
        )


def is_plausible_capture(captured: str | None) -> bool:
    """Whether a captured group looks like a version on its own.

    Anything shorter than 3 characters without a dot (``1``, ``v2``) is more
    likely a fragment of the tag than the version.
    """
    if not captured:
        return False
    return len(captured) >= 3 or "." in captured


def strip_known_prefix(text: str) -> str:
    for prefix in _PREFIXES_BY_LENGTH:
        if text.startswith(prefix) and len(text) > len(prefix):
            return text[len(prefix) :]
    return text


def _strip_v(tag: str) -> str:
    if len(tag) > 1 and tag[0] == "v" and tag[1].isdigit():
        return tag[1:]
    return tag


def extract(rule: VersionRule, tag: str) -> str:
    """Return the version string carried by ``tag`` ("" when none)."""
    if not tag:
        return ""

    match rule:
        case DefaultRule():
            return _strip_v(tag)
        case RegexRule(pattern=pattern):
            m = pattern.search(tag)
            if m is None:
                return ""
            whole = m.group(0)
            if not rule.use_capture:
                return whole
            captured = m.group(1)
            if is_plausible_capture(captured):
                return captured
            return strip_known_prefix(whole)
