"""
Presenter interface definitions for output formatting.

Keeps the runner and the matrix driver independent of how status lines
reach the terminal.
"""

from abc import ABC, abstractmethod


class IPresenter(ABC):
    """
    Interface for output presentation.

    Implementations handle formatting and displaying output
    to the user.
    """

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""
        pass

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""
        pass

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        pass

    @abstractmethod
    def print_success(self, message: str) -> None:
        """Print a success message."""
        pass

    @abstractmethod
    def print_status(self, label: str, message: str) -> None:
        """
        Print a status line: a highlighted label followed by a message.

        Args:
            label: Padded action label, e.g. "    Building "
            message: Plain text printed right after the label
        """
        pass
