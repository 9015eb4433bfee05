"""Execution services for featmatrix commands."""

from .args import PassthroughArgs, PassthroughArgumentRouter, split_passthrough
from .matrix import FeatureRunResult, MatrixExecutor, MatrixRequest, MatrixResult
from .runner import FeatureRunner

__all__ = [
    "FeatureRunResult",
    "FeatureRunner",
    "MatrixExecutor",
    "MatrixRequest",
    "MatrixResult",
    "PassthroughArgs",
    "PassthroughArgumentRouter",
    "split_passthrough",
]
