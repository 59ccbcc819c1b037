"""Core domain types and logic."""

from .config import CheckRequest, ConfigError, Source, load_check_request
from .errors import ErrorCode
from .model import (
    Classification,
    Cursor,
    FilterConfig,
    OrderBy,
    RawRelease,
    VersionIdentity,
)
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "CheckRequest",
    "ConfigError",
    "Source",
    "load_check_request",
    # errors
    "ErrorCode",
    # model
    "Classification",
    "Cursor",
    "FilterConfig",
    "OrderBy",
    "RawRelease",
    "VersionIdentity",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
