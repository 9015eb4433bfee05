"""
Unit tests for ConsolePresenter and the scoped style helper.
"""

import io

import pytest

from featmatrix.presenters.console import (
    RESET,
    ConsolePresenter,
    color_enabled,
    styled,
)


class FailingWriter(io.StringIO):
    """Buffer whose writes fail for one specific payload."""

    def __init__(self, fail_on: str) -> None:
        super().__init__()
        self._fail_on = fail_on

    def write(self, s: str) -> int:
        if s == self._fail_on:
            raise OSError("write failed")
        return super().write(s)


class TestStyled:
    """Scoped ANSI styling."""

    def test_wraps_output_in_style_and_reset(self):
        buf = io.StringIO()

        with styled(buf, "1", "96"):
            buf.write("Building")

        assert buf.getvalue() == "\033[1;96mBuilding" + RESET

    def test_disabled_writes_plain_text(self):
        buf = io.StringIO()

        with styled(buf, "1", enabled=False):
            buf.write("Building")

        assert buf.getvalue() == "Building"

    def test_reset_written_when_body_raises(self):
        buf = FailingWriter(fail_on="Building")

        with pytest.raises(OSError), styled(buf, "1"):
            buf.write("Building")

        assert buf.getvalue().endswith(RESET)


class TestColorChoice:
    """color_enabled decisions."""

    def test_always_and_never(self):
        buf = io.StringIO()

        assert color_enabled("always", buf) is True
        assert color_enabled("never", buf) is False

    def test_auto_off_for_non_tty(self):
        assert color_enabled("auto", io.StringIO()) is False

    def test_auto_respects_no_color(self, monkeypatch):
        class Tty(io.StringIO):
            def isatty(self):
                return True

        assert color_enabled("auto", Tty()) is True
        monkeypatch.setenv("NO_COLOR", "1")
        assert color_enabled("auto", Tty()) is False


class TestPrintStatus:
    """Status lines."""

    def test_plain_status_line(self, output):
        presenter = ConsolePresenter(color="never", file=output)

        presenter.print_status("    Building ", "crate=x features=[]")

        assert output.getvalue() == "    Building crate=x features=[]\n"

    def test_colored_label_is_reset_before_message(self, output):
        ConsolePresenter(color="always", file=output).print_status("    Checking ", "crate=x")

        assert output.getvalue() == f"\033[1;96m    Checking {RESET}crate=x\n"

    def test_reset_even_if_label_write_fails(self):
        buf = FailingWriter(fail_on="   Clippy   ")
        presenter = ConsolePresenter(color="always", file=buf)

        with pytest.raises(OSError):
            presenter.print_status("   Clippy   ", "crate=x")

        assert buf.getvalue() == "\033[1;96m" + RESET


class TestMessages:
    """Other presenter output."""

    def test_print_success(self, output):
        ConsolePresenter(color="always", file=output).print_success("done")

        assert output.getvalue() == f"\033[92mdone{RESET}\n"

    def test_print_error_goes_to_stderr(self, output, capsys):
        ConsolePresenter(color="never", file=output).print_error("boom")

        assert output.getvalue() == ""
        assert capsys.readouterr().err == "Error: boom\n"

    def test_print_warning(self, output, capsys):
        ConsolePresenter(color="never", file=output).print_warning("careful")

        assert capsys.readouterr().err == "Warning: careful\n"
