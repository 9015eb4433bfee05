"""
Logger interface for featmatrix diagnostics.

Records what featmatrix itself decides (argument routing, dropped
segments, spawn failures, stop-after-failure). What cargo prints is never
logged; it goes straight to the terminal.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Diagnostic sink with printf-style arguments.

    Status lines and reports belong to IPresenter, not here.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Record detail useful when debugging an invocation."""

    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        """Record a matrix-level event."""

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None:
        """Record input that was accepted but partly ignored."""

    @abstractmethod
    def error(self, message: str, *args: Any) -> None:
        """Record a failure to run the build tool."""
