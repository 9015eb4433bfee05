"""
Output presenters for featmatrix CLI.
"""

from .console import ConsolePresenter
from .matrix_report import MatrixReportPresenter

__all__ = ["ConsolePresenter", "MatrixReportPresenter"]
