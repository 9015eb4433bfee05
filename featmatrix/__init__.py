"""
featmatrix - run cargo across feature sets.

Library entry points:

    from featmatrix import FeatureRunner, SubcommandKind

    outcome = FeatureRunner(
        SubcommandKind.CHECK, "mycrate", ("std",), [], [], "path/to/crate"
    ).run()
"""

from .core.exceptions import FeatmatrixException, SpawnError
from .core.models.invocation import (
    SUBCOMMANDS,
    FeatureSet,
    Invocation,
    Outcome,
    SubcommandInfo,
    SubcommandKind,
)
from .services.execution import (
    FeatureRunner,
    MatrixExecutor,
    MatrixRequest,
    MatrixResult,
    split_passthrough,
)

__all__ = [
    "SUBCOMMANDS",
    "FeatmatrixException",
    "FeatureRunner",
    "FeatureSet",
    "Invocation",
    "MatrixExecutor",
    "MatrixRequest",
    "MatrixResult",
    "Outcome",
    "SpawnError",
    "SubcommandInfo",
    "SubcommandKind",
    "split_passthrough",
]
