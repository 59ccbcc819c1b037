"""Per-invocation resolution context.

Everything that is compiled from configuration (the tag regex, the semver
constraint, the ordering and the release selector) is built here once and
threaded explicitly into the classifier, the sort and the resolver.
"""

from __future__ import annotations

from dataclasses import dataclass

from ghr.core.config import ConfigError
from ghr.core.model import FilterConfig
from ghr.core.result import Err, Ok, Result
from ghr.resolve.classify import ReleaseSelector
from ghr.resolve.ordering import Ordering, ordering_for
from ghr.versioning.constraint import Constraint, parse_constraint
from ghr.versioning.extract import VersionRule, compile_rule

__all__ = ["ResolveContext", "build_context"]


@dataclass(frozen=True, slots=True)
class ResolveContext:
    config: FilterConfig
    rule: VersionRule
    constraint: Constraint | None
    ordering: Ordering
    selector: ReleaseSelector


def build_context(config: FilterConfig) -> Result[ResolveContext, ConfigError]:
    """Compile ``config`` into a context.

    Args:
        config: Filter configuration from the request source

    Returns:
        Ok with the context, or Err on an invalid tag_filter or semver_constraint
    """
    rule = compile_rule(config.tag_filter)
    if isinstance(rule, Err):
        return rule

    constraint: Constraint | None = None
    if config.semver_constraint is not None:
        parsed = parse_constraint(config.semver_constraint)
        if isinstance(parsed, Err):
            return parsed
        constraint = parsed.value

    return Ok(
        ResolveContext(
            config=config,
            rule=rule.value,
            constraint=constraint,
            ordering=ordering_for(config.order_by, rule.value),
            selector=ReleaseSelector.from_config(config),
        )
    )
