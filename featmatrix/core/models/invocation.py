"""
Invocation models.

Provides the subcommand lookup table, feature-set helpers and the
immutable models describing one build-tool invocation and its outcome.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator

from .base import ImmutableModel

# Ordered collection of unique feature names enabled for one invocation
FeatureSet = tuple[str, ...]


class SubcommandKind(str, Enum):
    """Build-tool actions that can be driven across feature sets."""

    BUILD = "build"
    CHECK = "check"
    CLIPPY = "clippy"
    TEST = "test"


class SubcommandInfo(ImmutableModel):
    """Strings associated with one subcommand kind.

    label is the status line prefix, written verbatim including its
    padding.
    """

    name: str
    cli_name: str
    label: str


SUBCOMMANDS: dict[SubcommandKind, SubcommandInfo] = {
    SubcommandKind.BUILD: SubcommandInfo(
        name="build", cli_name="build-all-features", label="    Building "
    ),
    SubcommandKind.CHECK: SubcommandInfo(
        name="check", cli_name="check-all-features", label="    Checking "
    ),
    SubcommandKind.CLIPPY: SubcommandInfo(
        name="clippy", cli_name="clippy-all-features", label="   Clippy   "
    ),
    SubcommandKind.TEST: SubcommandInfo(
        name="test", cli_name="test-all-features", label="     Testing  "
    ),
}

_unmapped = set(SubcommandKind) - set(SUBCOMMANDS)
if _unmapped:
    raise RuntimeError(f"Subcommand kinds missing from SUBCOMMANDS: {sorted(_unmapped)}")


def get_subcommand(kind: SubcommandKind | str) -> SubcommandInfo:
    """Look up the strings for a subcommand kind (enum member or value)."""
    return SUBCOMMANDS[SubcommandKind(kind)]


def render_features(feature_set: Iterable[str]) -> str:
    """Join feature names with commas, without leading or trailing separator."""
    return ",".join(feature_set)


def parse_feature_set(text: str) -> FeatureSet:
    """
    Parse a comma-separated feature list into a feature set.

    Whitespace around names is stripped, empty items are discarded and
    duplicates are collapsed keeping the first occurrence.

    Args:
        text: Comma-separated feature names, e.g. "serde,std"

    Returns:
        Feature set in the order given
    """
    seen: dict[str, None] = {}
    for item in text.split(","):
        name = item.strip()
        if name:
            seen.setdefault(name, None)
    return tuple(seen)


class Invocation(ImmutableModel):
    """Fully assembled description of one build-tool process."""

    program: str
    subcommand: str
    features: str = ""
    args: list[str] = Field(default_factory=list)
    working_dir: Path

    @field_validator("working_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: Any) -> Path:
        """Ensure working_dir is a Path object."""
        return Path(v) if not isinstance(v, Path) else v

    @property
    def argv(self) -> list[str]:
        """Complete argument vector, program first."""
        return [self.program, self.subcommand, *self.args]


class Outcome(ImmutableModel):
    """Result of one invocation: pass, or fail with the process exit status."""

    success: bool
    exit_code: int | None = None

    @classmethod
    def passed(cls) -> Outcome:
        """Create a passing outcome."""
        return cls(success=True, exit_code=0)

    @classmethod
    def failed(cls, exit_code: int) -> Outcome:
        """Create a failing outcome carrying the process exit status.

        Args:
            exit_code: Process return code (negative when killed by a signal)
        """
        return cls(success=False, exit_code=exit_code)

    def __str__(self) -> str:
        if self.success:
            return "pass"
        return f"fail (exit {self.exit_code})"
