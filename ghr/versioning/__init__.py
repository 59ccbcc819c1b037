"""Version extraction, parsing and range constraints."""

from ghr.versioning.constraint import Constraint, parse_constraint
from ghr.versioning.extract import (
    DefaultRule,
    RegexRule,
    VersionRule,
    compile_rule,
    extract,
    is_plausible_capture,
)
from ghr.versioning.semver import LooseVersion, SemVer, parse_loose, parse_semver

__all__ = [
    "Constraint",
    "parse_constraint",
    "DefaultRule",
    "RegexRule",
    "VersionRule",
    "compile_rule",
    "extract",
    "is_plausible_capture",
    "LooseVersion",
    "SemVer",
    "parse_loose",
    "parse_semver",
]
