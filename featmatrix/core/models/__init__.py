"""
Pydantic models for featmatrix.

Re-exports the invocation and configuration models.
"""

from .base import FeatmatrixBaseModel, ImmutableModel
from .config import CargoConfig, LoggingConfig, OutputConfig, RunConfig
from .invocation import (
    SUBCOMMANDS,
    FeatureSet,
    Invocation,
    Outcome,
    SubcommandInfo,
    SubcommandKind,
    get_subcommand,
    parse_feature_set,
    render_features,
)

__all__ = [
    "SUBCOMMANDS",
    "CargoConfig",
    "FeatmatrixBaseModel",
    "FeatureSet",
    "ImmutableModel",
    "Invocation",
    "LoggingConfig",
    "Outcome",
    "OutputConfig",
    "RunConfig",
    "SubcommandInfo",
    "SubcommandKind",
    "get_subcommand",
    "parse_feature_set",
    "render_features",
]
