"""
Matrix executor: runs one feature runner per feature set, in order.

Applies the continue/stop policy after a failing run. Spawn errors are
not handled here; they abort the whole matrix.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import Field, computed_field

from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.models.base import ImmutableModel
from ...core.models.invocation import FeatureSet, Outcome, SubcommandKind
from .runner import FeatureRunner


@dataclass
class MatrixRequest:
    """Request parameters for a matrix run."""

    kind: SubcommandKind
    crate_name: str
    feature_sets: list[FeatureSet]
    working_dir: Path
    cargo_args: list[str] = field(default_factory=list)
    last: list[str] = field(default_factory=list)
    fail_fast: bool = True
    program: str | None = None

    def __post_init__(self) -> None:
        self.kind = SubcommandKind(self.kind)


class FeatureRunResult(ImmutableModel):
    """Outcome of the run for one feature set."""

    features: str
    outcome: Outcome


class MatrixResult(ImmutableModel):
    """Outcomes of a matrix run, in execution order."""

    runs: list[FeatureRunResult] = Field(default_factory=list)
    planned: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failures(self) -> list[FeatureRunResult]:
        """Runs that failed."""
        return [r for r in self.runs if not r.outcome.success]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> bool:
        """True when every planned run ran and passed."""
        return not self.failures and len(self.runs) == self.planned

    @computed_field  # type: ignore[prop-decorator]
    @property
    def skipped(self) -> int:
        """Number of planned runs that never started."""
        return self.planned - len(self.runs)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exit_code(self) -> int:
        """0 on success, else the first failure's exit status (1 if not positive)."""
        if not self.failures:
            return 0
        code = self.failures[0].outcome.exit_code
        return code if code is not None and code > 0 else 1


RunnerFactory = Callable[..., FeatureRunner]


class MatrixExecutor:
    """
    Runs a feature set matrix sequentially.

    Usage:
        executor = MatrixExecutor(presenter)
        result = executor.execute(MatrixRequest(...))
    """

    def __init__(
        self,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
        runner_factory: RunnerFactory = FeatureRunner,
    ) -> None:
        """
        Initialize matrix executor.

        Args:
            presenter: Presenter handed to each runner
            logger: Logger for internal diagnostics
            runner_factory: Callable building a runner (FeatureRunner signature)
        """
        self._presenter = presenter
        self._logger = logger
        self._runner_factory = runner_factory

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def execute(self, request: MatrixRequest) -> MatrixResult:
        """
        Run every feature set in order.

        Stops after the first failure when request.fail_fast is set.

        Returns:
            MatrixResult with one entry per run that was started

        Raises:
            SpawnError: If the build tool could not be started
        """
        runs: list[FeatureRunResult] = []
        planned = len(request.feature_sets)
        self.logger.info(
            "Running %s across %d feature set(s) for %s",
            request.kind.value,
            planned,
            request.crate_name,
        )

        for feature_set in request.feature_sets:
            runner = self._runner_factory(
                request.kind,
                request.crate_name,
                feature_set,
                request.cargo_args,
                request.last,
                request.working_dir,
                program=request.program,
                presenter=self._presenter,
                logger=self.logger,
            )
            outcome = runner.run()
            runs.append(FeatureRunResult(features=runner.invocation.features, outcome=outcome))

            if not outcome.success and request.fail_fast:
                self.logger.info(
                    "Stopping after first failure (%d run(s) skipped)", planned - len(runs)
                )
                break

        return MatrixResult(runs=runs, planned=planned)
