"""Tests for ghr.output.console module."""

from __future__ import annotations

from ghr.output.console import MockConsole, OutputRecord, Style


class TestStyle:
    """Test Style enum."""

    def test_str_conversion(self) -> None:
        assert str(Style.ERROR) == "error"
        assert str(Style.DIM) == "dim"
        assert str(Style.DEFAULT) == "default"


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_print_with_style(self) -> None:
        console = MockConsole()
        console.print("o/r: 3 releases, 2 qualifying", Style.DIM)
        assert console.outputs[0].style == Style.DIM

    def test_error(self) -> None:
        console = MockConsole()
        console.error("listing failed")
        assert console.messages == ["error: listing failed"]
        assert console.has_error()
        assert not console.has_warning()

    def test_warning(self) -> None:
        console = MockConsole()
        console.warning("no qualifying releases")
        assert console.messages == ["warning: no qualifying releases"]
        assert console.has_warning()

    def test_info(self) -> None:
        console = MockConsole()
        console.info("up to date")
        assert console.outputs[0].style == Style.INFO

    def test_text_joins_lines(self) -> None:
        console = MockConsole()
        console.print("a")
        console.info("b")
        assert console.text == "a\ninfo: b"
