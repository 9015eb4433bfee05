"""
Entry point for the `featmatrix` command-line interface.

featmatrix runs a cargo subcommand once per caller-supplied feature set,
with default features disabled, and reports which sets pass.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the featmatrix CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
