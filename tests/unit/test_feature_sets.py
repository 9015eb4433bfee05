"""
Unit tests for reading externally supplied feature sets.
"""

from pathlib import Path

import pytest

from featmatrix.core.exceptions import ConfigFileError
from featmatrix.services.feature_sets import parse_feature_sets, read_feature_sets


class TestParseFeatureSets:
    def test_lines_in_order(self):
        assert parse_feature_sets(["a", "a,b", "c"]) == [("a",), ("a", "b"), ("c",)]

    def test_comments_and_blank_lines_skipped(self):
        assert parse_feature_sets(["# header", "", "   ", "a"]) == [("a",)]

    def test_dash_is_empty_set(self):
        assert parse_feature_sets(["-", "a"]) == [(), ("a",)]

    def test_duplicate_sets_kept(self):
        """Dedup of whole sets is the caller's choice, not ours."""
        assert parse_feature_sets(["a", "a"]) == [("a",), ("a",)]


class TestReadFeatureSets:
    def test_reads_file(self, tmp_path: Path):
        path = tmp_path / "sets.txt"
        path.write_text("std\nstd,serde\n")

        assert read_feature_sets(path) == [("std",), ("std", "serde")]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigFileError) as exc_info:
            read_feature_sets(tmp_path / "missing.txt")

        assert exc_info.value.context["file_path"] == str(tmp_path / "missing.txt")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_undecodable_file(self, tmp_path: Path):
        path = tmp_path / "sets.txt"
        path.write_bytes(b"\xff\xfe serde\n")

        with pytest.raises(ConfigFileError) as exc_info:
            read_feature_sets(path)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
