"""
Feature runner: one build-tool invocation for one feature set.

Builds the argument vector in the constructor and runs it once,
classifying the result as a pass or a fail.
"""

from __future__ import annotations

import subprocess
from collections.abc import Iterable, Sequence
from pathlib import Path

from ...core.exceptions import RunnerStateError, SpawnError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.models.invocation import (
    Invocation,
    Outcome,
    SubcommandKind,
    get_subcommand,
    render_features,
)
from ...core.settings import resolve_cargo
from .args import PassthroughArgumentRouter


class FeatureRunner:
    """
    Runs the build tool once with exactly one feature set enabled.

    Default features are always disabled so the feature set is the only
    source of enabled features. The instance is single use.

    Usage:
        runner = FeatureRunner(
            SubcommandKind.TEST, "mycrate", ("serde",), ["--", "--nocapture"], [], Path(".")
        )
        outcome = runner.run()
    """

    def __init__(
        self,
        kind: SubcommandKind,
        crate_name: str,
        feature_set: Iterable[str],
        cargo_args: Sequence[str],
        last: Sequence[str],
        working_dir: Path | str,
        *,
        program: str | None = None,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Build the invocation.

        Args:
            kind: Subcommand to run
            crate_name: Component name shown in the status line
            feature_set: Features to enable (assumed unique)
            cargo_args: Primary pass-through arguments, may embed "--"
            last: Secondary pass-through arguments for the linter
            working_dir: Directory the build tool runs in
            program: Build tool executable (resolved from $CARGO if omitted)
            presenter: Presenter for the status line
            logger: Logger for internal diagnostics
        """
        self._kind = SubcommandKind(kind)
        self._crate_name = crate_name
        self._presenter = presenter
        self._logger = logger
        self._consumed = False

        features = render_features(feature_set)
        args = ["--no-default-features"]
        if features:
            args.extend(["--features", features])

        routed = PassthroughArgumentRouter(logger=logger).route(cargo_args, last)
        args.extend(routed.render())

        self._invocation = Invocation(
            program=program or resolve_cargo(),
            subcommand=get_subcommand(self._kind).name,
            features=features,
            args=args,
            working_dir=working_dir,
        )

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    @property
    def presenter(self) -> IPresenter:
        """Get presenter, resolving from container or creating a ConsolePresenter."""
        if self._presenter is None:
            from ...core.di import resolve_or_default
            from ...presenters.console import ConsolePresenter

            self._presenter = resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]
        return self._presenter

    @property
    def invocation(self) -> Invocation:
        """The assembled invocation."""
        return self._invocation

    def run(self) -> Outcome:
        """
        Print the status line, run the build tool and wait for it.

        The child inherits stdout and stderr; nothing is captured.

        Returns:
            Outcome.passed() on a zero exit status, otherwise
            Outcome.failed() with the process return code

        Raises:
            SpawnError: If the process could not be started
            RunnerStateError: If this runner has already run
        """
        if self._consumed:
            raise RunnerStateError(
                "FeatureRunner instances can only run once",
                context={"crate": self._crate_name, "features": self._invocation.features},
            )
        self._consumed = True

        inv = self._invocation
        self.presenter.print_status(
            get_subcommand(self._kind).label,
            f"crate={self._crate_name} features=[{inv.features}]",
        )
        self.logger.debug("Running %s in %s", inv.argv, inv.working_dir)

        try:
            completed = subprocess.run(inv.argv, cwd=inv.working_dir, check=False)
        except OSError as e:
            reason = e.strerror or str(e)
            if not inv.working_dir.is_dir():
                message = f"Could not enter working directory {inv.working_dir}: {reason}"
            else:
                message = f"Could not run {inv.program}: {reason}"
            self.logger.error("Failed to start %s in %s: %s", inv.program, inv.working_dir, e)
            raise SpawnError(
                message,
                program=inv.program,
                working_dir=str(inv.working_dir),
                cause=e,
            ) from e

        if completed.returncode == 0:
            return Outcome.passed()

        self.logger.info(
            "%s failed with exit status %d (features=[%s])",
            inv.subcommand,
            completed.returncode,
            inv.features,
        )
        return Outcome.failed(completed.returncode)
