"""
Reading externally supplied feature sets.

featmatrix does not enumerate feature combinations itself; callers pass
them on the command line or list them in a file, one per line.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..core.exceptions import ConfigFileError
from ..core.models.invocation import FeatureSet, parse_feature_set

EMPTY_SET_MARKER = "-"


def parse_feature_sets(lines: Iterable[str]) -> list[FeatureSet]:
    """
    Parse feature-set lines.

    Each line is a comma-separated feature list. Blank lines and lines
    starting with "#" are skipped; a line holding only "-" stands for the
    empty feature set.
    """
    feature_sets: list[FeatureSet] = []
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line == EMPTY_SET_MARKER:
            feature_sets.append(())
        else:
            feature_sets.append(parse_feature_set(line))
    return feature_sets


def read_feature_sets(path: Path) -> list[FeatureSet]:
    """
    Read feature sets from a file.

    Raises:
        ConfigFileError: If the file cannot be read
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(
            "Failed to read feature sets file", file_path=str(path), cause=e
        ) from e
    return parse_feature_sets(text.splitlines())
