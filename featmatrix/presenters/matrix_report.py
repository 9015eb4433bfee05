"""
Matrix report presenter for displaying the summary after a matrix run.

Follows SRP: only handles report presentation.
"""

from ..core.interfaces.presenter import IPresenter
from ..services.execution.matrix import MatrixResult


class MatrixReportPresenter:
    """Formats and displays matrix completion reports."""

    def __init__(self, presenter: IPresenter) -> None:
        """
        Initialize report presenter.

        Args:
            presenter: Base presenter for output
        """
        self._out = presenter

    def show_report(self, result: MatrixResult, quiet: bool = False) -> None:
        """
        Display the matrix summary.

        Args:
            result: Outcomes of the matrix run
            quiet: If True, only failures are reported
        """
        passed = len(result.runs) - len(result.failures)

        if result.succeeded:
            if not quiet:
                self._out.print_success(f"All {passed} feature set(s) passed")
            return

        summary = f"{passed} passed, {len(result.failures)} failed"
        if result.skipped:
            summary += f", {result.skipped} not run"
        self._out.print_error(summary)

        for run in result.failures:
            self._out.print(f"  features=[{run.features}]: exit {run.outcome.exit_code}")
