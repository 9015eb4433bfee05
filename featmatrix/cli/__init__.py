"""
Click-based CLI for featmatrix.

Usage:
    from featmatrix.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from .context import FeatmatrixContext

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("featmatrix")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="featmatrix")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """featmatrix - run cargo once per feature set

    Each run disables default features and enables exactly one
    caller-supplied feature set, then reports pass or fail.

    \b
    Commands:
        featmatrix build-all-features    cargo build per feature set
        featmatrix check-all-features    cargo check per feature set
        featmatrix clippy-all-features   cargo clippy per feature set
        featmatrix test-all-features     cargo test per feature set
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None:
        ctx.obj = FeatmatrixContext.create()


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import MATRIX_COMMANDS

    for cmd in MATRIX_COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "FeatmatrixContext",
    "__version__",
    "cli",
    "register_commands",
]
