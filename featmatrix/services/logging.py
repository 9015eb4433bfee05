"""
Diagnostic logging for featmatrix.

Where messages go is decided by the [logging] settings section: stderr,
a rotating log file, both, or nowhere. Status lines and the matrix report
are not log records; they go through the presenter.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

DEFAULT_LOG_FILE = Path.home() / ".featmatrix" / "featmatrix.log"

CONSOLE_FORMAT = "featmatrix: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class FeatmatrixLogger(ILogger):
    """
    ILogger backed by a stdlib logger configured from LoggingConfig.

    Usage:
        logger = FeatmatrixLogger(settings.logging)
        logger.debug("Running %s", argv)
    """

    def __init__(self, config: LoggingConfig | None = None, name: str = "featmatrix") -> None:
        config = config or LoggingConfig()

        self._logger = logging.getLogger(name)
        self._logger.setLevel(config.level.upper())
        self._logger.handlers.clear()
        self._logger.propagate = False

        if config.console:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            self._logger.addHandler(console)

        if config.file:
            log_file = Path(config.path).expanduser() if config.path else DEFAULT_LOG_FILE
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8"
            )
            handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            self._logger.addHandler(handler)

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)


class NullLogger(ILogger):
    """Discards everything; used when the container was never bootstrapped."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass
