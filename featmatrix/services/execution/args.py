"""
Pass-through argument routing for build-tool invocations.

Decides which caller-supplied tokens go to the build tool itself and
which are forwarded, after a separator, to the tool it runs (the linter
or test harness).
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field

from ...core.interfaces.logger import ILogger
from ...core.models.base import ImmutableModel

SEPARATOR = "--"


class PassthroughArgs(ImmutableModel):
    """Pass-through arguments after routing."""

    direct: list[str] = Field(default_factory=list)
    linter: list[str] | None = None
    dropped: list[list[str]] = Field(default_factory=list)

    def render(self, separator: str = SEPARATOR) -> list[str]:
        """Flatten into argv order: direct args, then separator and linter args."""
        rendered = list(self.direct)
        if self.linter is not None:
            rendered.append(separator)
            rendered.extend(self.linter)
        return rendered


def _split_on(args: Sequence[str], separator: str) -> list[list[str]]:
    segments: list[list[str]] = [[]]
    for arg in args:
        if arg == separator:
            segments.append([])
        else:
            segments[-1].append(arg)
    return segments


def split_passthrough(
    cargo_args: Sequence[str],
    last: Sequence[str],
    separator: str = SEPARATOR,
) -> PassthroughArgs:
    """
    Route pass-through arguments.

    When last is empty, cargo_args is split on every separator: segment 0
    goes to the build tool, segment 1 to the linter and any further
    segments are dropped. When last is non-empty, cargo_args goes to the
    build tool verbatim and last goes to the linter.

    Args:
        cargo_args: Primary pass-through arguments
        last: Secondary (linter) pass-through arguments
        separator: Token dividing the two groups

    Returns:
        PassthroughArgs with direct, linter and dropped segments
    """
    if last:
        return PassthroughArgs(direct=list(cargo_args), linter=list(last))

    segments = _split_on(cargo_args, separator)
    return PassthroughArgs(
        direct=segments[0],
        linter=segments[1] if len(segments) > 1 else None,
        dropped=segments[2:],
    )


class PassthroughArgumentRouter:
    """
    Routes pass-through arguments and reports what gets discarded.

    Usage:
        router = PassthroughArgumentRouter()
        routed = router.route(["--release", "--", "-D", "warnings"], [])
    """

    def __init__(self, logger: ILogger | None = None, separator: str = SEPARATOR) -> None:
        """Initialize router with optional logger."""
        self._logger = logger
        self._separator = separator

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def route(self, cargo_args: Sequence[str], last: Sequence[str]) -> PassthroughArgs:
        """Route arguments, logging any segments that are dropped."""
        routed = split_passthrough(cargo_args, last, self._separator)
        self.logger.debug(
            "Routed pass-through args: direct=%s, linter=%s", routed.direct, routed.linter
        )
        if routed.dropped:
            self.logger.warning(
                "Ignoring arguments after a second %r separator: %s",
                self._separator,
                routed.dropped,
            )
        return routed
