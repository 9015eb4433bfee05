"""
Unit tests for service wiring: container, bootstrap and logging.
"""

import logging
from pathlib import Path

import pytest

from featmatrix.core.bootstrap import bootstrap
from featmatrix.core.container import ServiceContainer, get_container
from featmatrix.core.di import resolve_or_default
from featmatrix.core.exceptions import ConfigValidationError, FeatmatrixException, SpawnError
from featmatrix.core.interfaces.logger import ILogger
from featmatrix.core.interfaces.presenter import IPresenter
from featmatrix.core.models.config import LoggingConfig
from featmatrix.core.settings import load_settings
from featmatrix.presenters.console import ConsolePresenter
from featmatrix.services.logging import FeatmatrixLogger, NullLogger


class TestServiceContainer:
    def test_resolve_unregistered_raises(self):
        with pytest.raises(KeyError):
            get_container().resolve(ILogger)

    def test_try_resolve_unregistered_is_none(self):
        assert get_container().try_resolve(ILogger) is None

    def test_singleton_factory_called_once(self):
        calls = []

        def factory():
            calls.append(1)
            return NullLogger()

        container = ServiceContainer()
        container.register_singleton(ILogger, factory=factory)

        assert container.resolve(ILogger) is container.resolve(ILogger)
        assert calls == [1]

    def test_register_requires_instance_or_factory(self):
        with pytest.raises(ValueError):
            ServiceContainer().register_singleton(ILogger)

    def test_resolve_or_default_falls_back(self):
        assert isinstance(resolve_or_default(ILogger, NullLogger), NullLogger)


class TestBootstrap:
    def test_registers_presenter_and_logger(self, tmp_path: Path):
        container = bootstrap(load_settings(start_dir=str(tmp_path)))

        assert isinstance(container.resolve(IPresenter), ConsolePresenter)
        assert isinstance(container.resolve(ILogger), FeatmatrixLogger)

    def test_presenter_uses_color_setting(self, tmp_path: Path):
        settings = load_settings(start_dir=str(tmp_path), output={"color": "always"})

        presenter = bootstrap(settings).resolve(IPresenter)

        assert presenter.use_color is True


class TestFeatmatrixLogger:
    def test_writes_to_configured_file(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "featmatrix.log"
        config = LoggingConfig(level="info", file=True, path=str(log_file))
        logger = FeatmatrixLogger(config, name="featmatrix.test")

        logger.info("ran %s", "check")
        logger.debug("hidden")
        for handler in logging.getLogger("featmatrix.test").handlers:
            handler.flush()

        text = log_file.read_text()
        assert "[INFO] featmatrix.test: ran check" in text
        assert "hidden" not in text

    def test_console_output_uses_level(self, capsys):
        logger = FeatmatrixLogger(
            LoggingConfig(level="warning", console=True), name="featmatrix.console"
        )

        logger.info("quiet")
        logger.warning("dropped %s", "extra")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "featmatrix: WARNING: dropped extra" in err

    def test_no_handlers_configured(self, capsys):
        logger = FeatmatrixLogger(LoggingConfig(level="debug"), name="featmatrix.silent")

        logger.error("nothing")

        assert capsys.readouterr().err == ""

    def test_bootstrap_passes_logging_section(self, tmp_path: Path):
        settings = load_settings(
            start_dir=str(tmp_path),
            logging={"file": True, "path": str(tmp_path / "fm.log")},
        )

        bootstrap(settings).resolve(ILogger).warning("written")

        assert "[WARNING] featmatrix: written" in (tmp_path / "fm.log").read_text()


class TestExceptions:
    def test_context_in_str(self):
        error = SpawnError("Could not run cargo", program="cargo", working_dir="/w")

        assert str(error) == "Could not run cargo (program='cargo', working_dir='/w')"
        assert error.exit_code == 127

    def test_validation_error_is_value_error(self):
        error = ConfigValidationError("bad color", key="output.color", value="pink")

        assert isinstance(error, ValueError)
        assert isinstance(error, FeatmatrixException)
        assert error.context == {"key": "output.color", "value": "pink"}
