"""
Shared pytest fixtures for featmatrix tests.

This module provides:
- reset_container: isolates the global service container per test
- fake_cargo: an executable script standing in for cargo
- runs_of: reads back what fake_cargo was called with
- string_presenter: a ConsolePresenter writing to a StringIO
"""

import io
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from featmatrix.core.container import ServiceContainer
from featmatrix.presenters.console import ConsolePresenter

RUN_MARKER = "::run"


@pytest.fixture(autouse=True)
def reset_container():
    """Start and end every test with an empty service container."""
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment out of settings resolution."""
    monkeypatch.delenv("CARGO", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    for name in (
        "FEATMATRIX_RUN__FAIL_FAST",
        "FEATMATRIX_OUTPUT__COLOR",
        "FEATMATRIX_CARGO__PROGRAM",
        "FEATMATRIX_LOGGING__LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_cargo(tmp_path: Path) -> Callable[..., Path]:
    """
    Create an executable that records its arguments and exits with a code.

    Every invocation appends a marker line and then one line per argument
    to args.txt next to the script; see recorded_runs().

    Returns:
        Factory taking the exit code and returning the script path
    """

    def make(exit_code: int = 0, name: str = "fake-cargo") -> Path:
        bindir = tmp_path / "bin"
        bindir.mkdir(exist_ok=True)
        script = bindir / name
        args_file = bindir / "args.txt"
        script.write_text(
            "#!/bin/sh\n"
            f"echo '{RUN_MARKER}' >> '{args_file}'\n"
            f"for arg in \"$@\"; do printf '%s\\n' \"$arg\" >> '{args_file}'; done\n"
            f"exit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return make


def recorded_runs(script: Path) -> list[list[str]]:
    """Arguments of every fake_cargo invocation, one list per run."""
    args_file = script.parent / "args.txt"
    if not args_file.exists():
        return []
    runs: list[list[str]] = []
    for line in args_file.read_text().splitlines():
        if line == RUN_MARKER:
            runs.append([])
        else:
            runs[-1].append(line)
    return runs


@pytest.fixture
def runs_of() -> Callable[[Path], list[list[str]]]:
    """Expose recorded_runs() to tests."""
    return recorded_runs


@pytest.fixture
def output() -> io.StringIO:
    """Buffer standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def string_presenter(output: io.StringIO) -> ConsolePresenter:
    """ConsolePresenter without colors writing to the output buffer."""
    return ConsolePresenter(color="never", file=output)
