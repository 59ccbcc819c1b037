"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghr.core.errors import ErrorCode
from ghr.output.console import Style
from ghr.resolve.errors import CheckError

if TYPE_CHECKING:
    from ghr.output.console import ConsoleProtocol

__all__ = ["print_check_error", "check_error_exit_code"]


def print_check_error(error: CheckError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def check_error_exit_code(error: CheckError) -> int:
    match error.kind:
        case "invalid_config":
            return int(ErrorCode.USER_ERROR)
        case "listing_failed":
            return int(ErrorCode.NETWORK_ERROR)
