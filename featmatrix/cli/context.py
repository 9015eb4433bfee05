"""
Click context extension for featmatrix CLI.

Provides FeatmatrixContext dataclass that holds featmatrix-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib


@dataclass
class FeatmatrixContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory (default manifest directory)
    """

    cwd: Path

    @classmethod
    def create(cls, cwd: Path | None = None) -> FeatmatrixContext:
        """Create a FeatmatrixContext for the current environment.

        Args:
            cwd: Working directory override (defaults to Path.cwd())
        """
        return cls(cwd=cwd if cwd is not None else Path.cwd())


def detect_crate_name(manifest_dir: Path) -> str:
    """
    Name of the crate in manifest_dir.

    Reads [package].name from Cargo.toml and falls back to the directory name.
    """
    manifest = manifest_dir / "Cargo.toml"
    try:
        with open(manifest, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return manifest_dir.resolve().name

    name = data.get("package", {}).get("name")
    return name if isinstance(name, str) and name else manifest_dir.resolve().name
