"""
Console presenter for terminal output.

Implements human-readable status lines for the CLI.
"""

import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from ..core.interfaces.presenter import IPresenter
from ..core.models.config import ColorChoice

BOLD = "1"
RED = "91"
GREEN = "92"
YELLOW = "93"
CYAN = "96"
RESET = "\033[0m"

def color_enabled(choice: ColorChoice, file: TextIO) -> bool:
    """Decide whether ANSI colors should be written to file."""
    if choice == "always":
        return True
    if choice == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(file, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def styled(file: TextIO, *codes: str, enabled: bool = True) -> Iterator[TextIO]:
    """
    Apply an ANSI style to everything written to file inside the block.

    The reset sequence is always written on exit, also when a write
    inside the block raises.
    """
    try:
        if enabled:
            file.write(f"\033[{';'.join(codes)}m")
        yield file
    finally:
        if enabled:
            file.write(RESET)


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Formats output for human-readable terminal display.
    """

    def __init__(self, color: ColorChoice = "auto", file: TextIO | None = None) -> None:
        """
        Initialize console presenter.

        Args:
            color: "auto" (TTY only), "always" or "never"
            file: Output file (defaults to sys.stdout)
        """
        self._file = file or sys.stdout
        self._err_file = sys.stderr
        self._use_color = color_enabled(color, self._file)
        self._err_color = color_enabled(color, self._err_file)

    @property
    def use_color(self) -> bool:
        return self._use_color

    def print(self, message: str) -> None:
        """Print a message to output."""
        print(message, file=self._file)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        with styled(self._err_file, RED, enabled=self._err_color):
            self._err_file.write(f"Error: {message}")
        self._err_file.write("\n")

    def print_warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        with styled(self._err_file, YELLOW, enabled=self._err_color):
            self._err_file.write(f"Warning: {message}")
        self._err_file.write("\n")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        with styled(self._file, GREEN, enabled=self._use_color):
            self._file.write(message)
        self._file.write("\n")

    def print_status(self, label: str, message: str) -> None:
        """
        Print a status line such as "    Building crate=foo features=[a,b]".

        The label is written as given, padding included, and is bold cyan
        when colors are enabled. The message follows it directly. Output is
        flushed so the line appears before anything a child process writes
        to the same terminal.
        """
        with styled(self._file, BOLD, CYAN, enabled=self._use_color):
            self._file.write(label)
        self._file.write(f"{message}\n")
        self._file.flush()
