# src/statelab/core/config.py
"""
Runtime configuration.

A single frozen pydantic model. ``StateLabConfig.from_env()`` layers
``STATELAB_*`` environment variables over the defaults; explicit keyword
overrides win over both.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

__all__ = ["ConfigError", "StateLabConfig", "ENV_PREFIX"]

ENV_PREFIX = "STATELAB_"

# env suffix -> field name
_ENV_FIELDS: Dict[str, str] = {
    "SEED": "seed",
    "TRIALS": "trials",
    "MAX_JOINT_VARIABLES": "max_joint_variables",
}


class ConfigError(ValueError):
    """User-fixable configuration error."""


class StateLabConfig(BaseModel):
    """Knobs for demos, convergence runs and joint-state sizing."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    seed: Optional[int] = None
    trials: int = Field(default=10_000, gt=0)
    prob_true: float = Field(default=0.5, ge=0.0, le=1.0)
    tolerance: float = Field(default=0.05, gt=0.0, le=0.5)
    delta: float = Field(default=0.05, gt=0.0, lt=1.0)
    # 2**24 float64 cells is 128 MiB
    max_joint_variables: int = Field(default=16, ge=1, le=24)

    @field_validator("seed", mode="before")
    @classmethod
    def _normalize_seed(cls, v: Any) -> Optional[int]:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if isinstance(v, bool):
            raise ValueError("seed must be an integer")
        try:
            iv = int(v)
        except (TypeError, ValueError):
            raise ValueError("seed must be an integer")
        if iv < 0:
            raise ValueError("seed must be >= 0")
        return iv

    @classmethod
    def build(cls, **kwargs: Any) -> "StateLabConfig":
        """Construct, converting pydantic validation failures into ConfigError."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> "StateLabConfig":
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for suffix, field_name in _ENV_FIELDS.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.build(**values)

    @classmethod
    def max_joint_variables_from_env(cls, environ: Optional[Mapping[str, str]] = None) -> int:
        """Resolve only ``max_joint_variables``; unrelated bad ``STATELAB_*`` values are ignored."""
        env = os.environ if environ is None else environ
        key = ENV_PREFIX + "MAX_JOINT_VARIABLES"
        subset = {key: env[key]} if key in env else {}
        return cls.from_env(subset).max_joint_variables
