"""
Unit tests for invocation models and feature-set helpers.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from featmatrix.core.models.invocation import (
    SUBCOMMANDS,
    Invocation,
    Outcome,
    SubcommandKind,
    get_subcommand,
    parse_feature_set,
    render_features,
)


class TestSubcommandTable:
    """The kind -> strings lookup table."""

    def test_every_kind_is_mapped(self):
        assert set(SUBCOMMANDS) == set(SubcommandKind)

    @pytest.mark.parametrize(
        ("kind", "name", "cli_name"),
        [
            (SubcommandKind.BUILD, "build", "build-all-features"),
            (SubcommandKind.CHECK, "check", "check-all-features"),
            (SubcommandKind.CLIPPY, "clippy", "clippy-all-features"),
            (SubcommandKind.TEST, "test", "test-all-features"),
        ],
    )
    def test_names(self, kind, name, cli_name):
        info = SUBCOMMANDS[kind]

        assert info.name == name
        assert info.cli_name == cli_name

    @pytest.mark.parametrize(
        ("kind", "label"),
        [
            (SubcommandKind.BUILD, "    Building "),
            (SubcommandKind.CHECK, "    Checking "),
            (SubcommandKind.CLIPPY, "   Clippy   "),
            (SubcommandKind.TEST, "     Testing  "),
        ],
    )
    def test_status_labels_keep_padding(self, kind, label):
        assert SUBCOMMANDS[kind].label == label

    def test_cli_names_are_distinct(self):
        cli_names = [info.cli_name for info in SUBCOMMANDS.values()]
        assert len(set(cli_names)) == len(cli_names)

    def test_lookup_by_value(self):
        assert get_subcommand("clippy") is SUBCOMMANDS[SubcommandKind.CLIPPY]

    def test_lookup_unknown_value(self):
        with pytest.raises(ValueError):
            get_subcommand("doc")

    def test_info_is_frozen(self):
        with pytest.raises(ValidationError):
            SUBCOMMANDS[SubcommandKind.BUILD].name = "other"


class TestFeatureHelpers:
    """render_features / parse_feature_set."""

    def test_render_joins_without_trailing_comma(self):
        assert render_features(("a", "b", "c")) == "a,b,c"

    def test_render_single(self):
        assert render_features(["serde"]) == "serde"

    def test_render_empty(self):
        assert render_features(()) == ""

    def test_parse_strips_and_skips_empty_items(self):
        assert parse_feature_set(" a, ,b,") == ("a", "b")

    def test_parse_collapses_duplicates_in_order(self):
        assert parse_feature_set("b,a,b") == ("b", "a")

    def test_parse_empty_string(self):
        assert parse_feature_set("") == ()


class TestInvocation:
    """Invocation model."""

    def test_argv(self):
        inv = Invocation(
            program="cargo",
            subcommand="test",
            features="a",
            args=["--no-default-features", "--features", "a"],
            working_dir="/tmp/crate",
        )

        assert inv.argv == ["cargo", "test", "--no-default-features", "--features", "a"]
        assert inv.working_dir == Path("/tmp/crate")


class TestOutcome:
    """Outcome model."""

    def test_passed(self):
        outcome = Outcome.passed()

        assert outcome.success
        assert outcome.exit_code == 0
        assert str(outcome) == "pass"

    def test_failed_keeps_status(self):
        outcome = Outcome.failed(101)

        assert not outcome.success
        assert outcome.exit_code == 101
        assert str(outcome) == "fail (exit 101)"

    def test_failed_signal_status(self):
        assert Outcome.failed(-9).exit_code == -9
