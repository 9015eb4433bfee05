"""
Base Pydantic models for featmatrix.

Values handed from the CLI to the matrix executor and on to each runner
are frozen once built. Configuration sections relax strictness in
models/config.py so TOML and environment input can be coerced.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FeatmatrixBaseModel(BaseModel):
    """Strict model: no implicit conversions, no unknown fields."""

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
    )


class ImmutableModel(FeatmatrixBaseModel):
    """Frozen model for invocations, outcomes and lookup table entries."""

    model_config = ConfigDict(frozen=True)
