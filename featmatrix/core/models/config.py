"""
Configuration models.

Provides Pydantic models for featmatrix configuration with validation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, field_validator

from .base import FeatmatrixBaseModel

# Type aliases
ColorChoice = Literal["auto", "always", "never"]
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(FeatmatrixBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # TOML and env values are coerced
        extra="ignore",  # Unknown keys in config files are skipped
    )


class CargoConfig(ConfigBaseModel):
    """Build tool configuration section."""

    program: str | None = None  # Falls back to $CARGO, then "cargo"

    @field_validator("program", mode="before")
    @classmethod
    def empty_is_unset(cls, v: str | None) -> str | None:
        """Treat an empty program string as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v


class RunConfig(ConfigBaseModel):
    """Matrix run policy section."""

    fail_fast: bool = True


class OutputConfig(ConfigBaseModel):
    """Output configuration section."""

    color: ColorChoice = "auto"


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
    path: str | None = None  # Log file, default ~/.featmatrix/featmatrix.log
