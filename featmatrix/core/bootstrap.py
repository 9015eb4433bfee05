"""
Application bootstrap for featmatrix.

Registers the presenter and logger in the service container.
Called once per CLI invocation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter

if TYPE_CHECKING:
    from .settings import FeatmatrixSettings


def bootstrap(settings: FeatmatrixSettings | None = None) -> ServiceContainer:
    """
    Bootstrap the featmatrix application.

    Registrations are replaced on every call so the presenter is bound to
    the current sys.stdout.

    Args:
        settings: Loaded settings (loaded from cwd if omitted)

    Returns:
        Initialized ServiceContainer
    """
    from ..presenters.console import ConsolePresenter
    from ..services.logging import FeatmatrixLogger
    from .settings import load_settings

    if settings is None:
        settings = load_settings()

    container = get_container()

    container.register_singleton(
        IPresenter,  # type: ignore[type-abstract]
        implementation=ConsolePresenter(color=settings.output.color),
    )

    log_cfg = settings.logging

    def create_logger() -> ILogger:
        return FeatmatrixLogger(log_cfg)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    return container


def reset() -> None:
    """Drop all registrations (for testing)."""
    ServiceContainer.reset()
