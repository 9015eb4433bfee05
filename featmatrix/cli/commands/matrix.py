"""
Native Click implementation of the *-all-features commands.

One command per subcommand kind, named after its CLI alias:

Usage: featmatrix build-all-features [options] [-- <cargo args> [-- <linter args>]]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.exceptions import ConfigValidationError, FeatmatrixException
from ...core.models.invocation import (
    SUBCOMMANDS,
    FeatureSet,
    SubcommandKind,
    parse_feature_set,
)
from ...services.execution.args import SEPARATOR
from ..context import FeatmatrixContext, detect_crate_name

_HELP = """Run `cargo {name}` once per feature set.

Default features are always disabled; each run enables exactly the
features of one set. Sets come from --feature-set and --feature-sets-file,
in that order. Without any, the empty feature set is run.

Unrecognized options and arguments after `--` are passed to cargo. A
`--` after cargo arguments, or a second `--`, starts the arguments for
the tool cargo runs (e.g. clippy lints or test harness flags); use
--last to pass those explicitly instead.

\b
Examples:
    featmatrix {cli_name} -f serde -f serde,std
    featmatrix {cli_name} --feature-sets-file sets.txt -- --release
    featmatrix clippy-all-features -f std --all-targets -- -D warnings
"""


def _collect_feature_sets(
    feature_set_args: tuple[str, ...],
    feature_sets_file: Path | None,
) -> list[FeatureSet]:
    from ...services.feature_sets import read_feature_sets

    feature_sets = [parse_feature_set(text) for text in feature_set_args]
    if feature_sets_file is not None:
        feature_sets.extend(read_feature_sets(feature_sets_file))
    return feature_sets or [()]


class PassthroughCommand(click.Command):
    """
    Command whose trailing arguments may carry their own separator.

    click drops the first `--` it sees. Parsing stops there instead, and
    the separator is put back into cargo_args when cargo arguments precede
    it, so `--all-targets -- -D warnings` still reaches the linter.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if SEPARATOR not in args:
            return super().parse_args(ctx, args)

        index = args.index(SEPARATOR)
        rest = super().parse_args(ctx, args[:index])
        leading = list(ctx.params.get("cargo_args") or ())
        tail = args[index + 1 :]
        ctx.params["cargo_args"] = tuple([*leading, SEPARATOR, *tail] if leading else tail)
        return rest


def make_matrix_command(kind: SubcommandKind) -> click.Command:
    """Build the click command for one subcommand kind."""
    info = SUBCOMMANDS[kind]

    @click.command(
        info.cli_name,
        cls=PassthroughCommand,
        help=_HELP.format(name=info.name, cli_name=info.cli_name),
        context_settings={"ignore_unknown_options": True},
    )
    @click.argument("cargo_args", nargs=-1, type=click.UNPROCESSED)
    @click.option(
        "-f",
        "--feature-set",
        "feature_set_args",
        multiple=True,
        help="Comma-separated features for one run (repeatable)",
    )
    @click.option(
        "--feature-sets-file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="File with one comma-separated feature set per line",
    )
    @click.option("--crate", "crate_name", help="Crate name shown in status lines")
    @click.option(
        "-C",
        "--manifest-dir",
        type=click.Path(file_okay=False, path_type=Path),
        help="Directory to run cargo in (default: current directory)",
    )
    @click.option("--last", "last", multiple=True, help="Argument for the linter (repeatable)")
    @click.option(
        "--fail-fast/--keep-going",
        default=None,
        help="Stop at the first failing feature set (default from config)",
    )
    @click.option("--color", type=click.Choice(["auto", "always", "never"]), default=None)
    @click.option("--cargo", "program", help="Build tool executable (default: $CARGO or cargo)")
    @click.option("-q", "--quiet", is_flag=True, help="Only report failures in the summary")
    @click.option("-v", "--verbose", is_flag=True, help="Log featmatrix diagnostics to stderr")
    @click.pass_obj
    def command(
        ctx: FeatmatrixContext | None,
        cargo_args: tuple[str, ...],
        feature_set_args: tuple[str, ...],
        feature_sets_file: Path | None,
        crate_name: str | None,
        manifest_dir: Path | None,
        last: tuple[str, ...],
        fail_fast: bool | None,
        color: str | None,
        program: str | None,
        quiet: bool,
        verbose: bool,
    ) -> None:
        from ...core.bootstrap import bootstrap
        from ...core.interfaces.logger import ILogger
        from ...core.interfaces.presenter import IPresenter
        from ...core.settings import load_settings, resolve_cargo
        from ...presenters.matrix_report import MatrixReportPresenter
        from ...services.execution import MatrixExecutor, MatrixRequest

        if ctx is None:
            ctx = FeatmatrixContext.create()
        working_dir = manifest_dir if manifest_dir is not None else ctx.cwd

        overrides: dict = {}
        if color is not None:
            overrides["output"] = {"color": color}
        if verbose:
            overrides["logging"] = {"console": True, "level": "debug"}
        try:
            settings = load_settings(start_dir=str(working_dir), **overrides)
        except ConfigValidationError as e:
            raise click.ClickException(str(e)) from e

        container = bootstrap(settings)
        presenter = container.resolve(IPresenter)  # type: ignore[type-abstract]
        logger = container.resolve(ILogger)  # type: ignore[type-abstract]
        if settings.config_file:
            logger.debug("Loaded settings from %s", settings.config_file)
        if settings.config_error:
            presenter.print_warning(settings.config_error)

        try:
            request = MatrixRequest(
                kind=kind,
                crate_name=crate_name or detect_crate_name(working_dir),
                feature_sets=_collect_feature_sets(feature_set_args, feature_sets_file),
                working_dir=working_dir,
                cargo_args=list(cargo_args),
                last=list(last),
                fail_fast=settings.run.fail_fast if fail_fast is None else fail_fast,
                program=program or resolve_cargo(settings),
            )
            result = MatrixExecutor(presenter=presenter).execute(request)
        except FeatmatrixException as e:
            presenter.print_error(str(e))
            raise SystemExit(e.exit_code) from e

        MatrixReportPresenter(presenter).show_report(result, quiet=quiet)

        if result.exit_code != 0:
            raise SystemExit(result.exit_code)

    return command
