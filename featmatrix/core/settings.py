"""
Pydantic Settings for featmatrix configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigValidationError
from .models.config import CargoConfig, LoggingConfig, OutputConfig, RunConfig

CONFIG_FILE_NAME = ".featmatrix.toml"
DEFAULT_CARGO = "cargo"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _embedded_section(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    """Return the featmatrix table embedded in a Cargo.toml or pyproject.toml."""
    if path.name == "Cargo.toml":
        return data.get("package", {}).get("metadata", {}).get("featmatrix")
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get("featmatrix")
    return data


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find featmatrix configuration by walking up from start_dir (or cwd).

    In each directory, checks .featmatrix.toml, then Cargo.toml with a
    [package.metadata.featmatrix] table, then pyproject.toml with a
    [tool.featmatrix] table.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        for name in ("Cargo.toml", "pyproject.toml"):
            candidate = parent / name
            if not candidate.exists():
                continue
            try:
                with open(candidate, "rb") as f:
                    data = tomllib.load(f)
                if _embedded_section(candidate, data) is not None:
                    return candidate
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse %s: %s", candidate, e)
            except OSError as e:
                _get_logger().debug("Failed to read %s: %s", candidate, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            self._data = dict(_embedded_section(path, data) or {})
            self._data["_config_file"] = str(path)

        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to parse config file: {e}"
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return TOML data for settings initialization, minus internal keys."""
        return {k: v for k, v in self._load_toml().items() if not k.startswith("_")}


class FeatmatrixSettings(BaseSettings):
    """featmatrix configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (FEATMATRIX_<section>__<field>, plus CARGO)
    3. TOML config file (.featmatrix.toml, Cargo.toml or pyproject.toml)
    4. Model defaults
    """

    model_config = {
        "env_prefix": "FEATMATRIX_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    cargo: CargoConfig = CargoConfig()
    run: RunConfig = RunConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @model_validator(mode="before")
    @classmethod
    def handle_cargo_env_var(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Fill cargo.program from $CARGO when nothing else set it."""
        cargo_env = os.environ.get("CARGO")
        if not cargo_env:
            return data

        cargo = data.get("cargo", {})
        if isinstance(cargo, dict):
            if not cargo.get("program"):
                data["cargo"] = {**cargo, "program": cargo_env}
        elif isinstance(cargo, CargoConfig) and cargo.program is None:
            data["cargo"] = CargoConfig(program=cargo_env)
        return data

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        Note: config_path/start_dir cannot be passed through here, so
        load_settings() hands them over in module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the config file that was loaded, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Error message when a config file was found but unusable."""
        return self._config_error


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> FeatmatrixSettings:
    """Load featmatrix settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values with the highest priority

    Returns:
        FeatmatrixSettings instance with all sources merged
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        try:
            settings = FeatmatrixSettings(**overrides)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigValidationError(f"Invalid configuration: {errors}", cause=e) from e

        # Copy internal fields from TOML source
        toml_data = TomlConfigSource(FeatmatrixSettings, config_path, start_dir)._load_toml()
        if "_config_file" in toml_data:
            settings._config_file = toml_data["_config_file"]
        if "_config_error" in toml_data:
            settings._config_error = toml_data["_config_error"]

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None


def resolve_cargo(settings: FeatmatrixSettings | None = None) -> str:
    """
    Resolve the build tool executable.

    Uses settings.cargo.program when set, otherwise $CARGO, otherwise "cargo".
    """
    if settings is not None and settings.cargo.program:
        return settings.cargo.program
    return os.environ.get("CARGO") or DEFAULT_CARGO
