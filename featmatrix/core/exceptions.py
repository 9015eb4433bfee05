"""
Custom exception hierarchy for featmatrix.

Separates tooling-environment problems (raised as exceptions) from build
and test failures, which are ordinary outcomes and never raised.
"""

from __future__ import annotations


class FeatmatrixException(Exception):
    """
    Base exception for all featmatrix errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, commands, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class FeatmatrixConfigError(FeatmatrixException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(FeatmatrixConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, unreadable feature-set files, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(FeatmatrixConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class FeatmatrixExecutionError(FeatmatrixException):
    """Base class for errors while driving the build tool."""

    pass


class SpawnError(FeatmatrixExecutionError):
    """
    The build tool process could not be started at all.

    Raised for a missing executable, a permission error or an invalid
    working directory. The matrix run should be aborted: this is an
    environment problem, not a test failure.
    """

    exit_code: int = 127

    def __init__(
        self,
        message: str,
        *,
        program: str | None = None,
        working_dir: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if program:
            ctx["program"] = program
        if working_dir:
            ctx["working_dir"] = working_dir
        super().__init__(message, context=ctx, cause=cause)


class RunnerStateError(FeatmatrixExecutionError):
    """A runner was asked to run more than once."""
