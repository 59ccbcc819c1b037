"""Version resolution engine: classify, order and compute the delta."""

from ghr.resolve.classify import ReleaseSelector, classify_and_filter
from ghr.resolve.context import ResolveContext, build_context
from ghr.resolve.cursor import resolve_delta
from ghr.resolve.errors import CheckError
from ghr.resolve.ordering import (
    Ordering,
    TimeOrdering,
    VersionOrdering,
    ordering_for,
    sort_releases,
)
from ghr.resolve.service import CheckReport, CheckService, check_releases, resolve_versions

__all__ = [
    "ReleaseSelector",
    "classify_and_filter",
    "ResolveContext",
    "build_context",
    "resolve_delta",
    "CheckError",
    "Ordering",
    "TimeOrdering",
    "VersionOrdering",
    "ordering_for",
    "sort_releases",
    "CheckReport",
    "CheckService",
    "check_releases",
    "resolve_versions",
]
