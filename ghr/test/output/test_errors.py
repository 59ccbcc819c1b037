from __future__ import annotations

from ghr.core.errors import ErrorCode
from ghr.output.console import MockConsole, Style
from ghr.output.errors import check_error_exit_code, print_check_error
from ghr.resolve.errors import CheckError


def test_print_check_error_with_hint() -> None:
    console = MockConsole()
    error = CheckError(kind="invalid_config", message="invalid tag_filter", hint="check the regex")

    print_check_error(error, console)

    assert console.messages == ["error: invalid tag_filter", "hint: check the regex"]
    assert console.outputs[1].style == Style.DIM


def test_print_check_error_without_hint() -> None:
    console = MockConsole()
    print_check_error(CheckError(kind="listing_failed", message="boom"), console)
    assert console.messages == ["error: boom"]


def test_exit_codes() -> None:
    assert check_error_exit_code(CheckError(kind="invalid_config", message="x")) == ErrorCode.USER_ERROR
    assert check_error_exit_code(CheckError(kind="listing_failed", message="x")) == ErrorCode.NETWORK_ERROR

