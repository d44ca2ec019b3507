# src/statelab/core/probability.py
"""Scalar probability validation shared by the marginal and joint models."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .errors import InvalidProbability


def _is_finite_number(x: Any) -> bool:
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (int, float, np.integer, np.floating)) and math.isfinite(float(x))


def require_probability(p: Any, name: str = "prob_true") -> float:
    """
    Require ``p`` to be a finite real in the closed interval [0, 1].

    No clipping: anything outside the interval, NaN/inf, bools and non-numbers
    raise InvalidProbability.
    """
    if not _is_finite_number(p):
        raise InvalidProbability(f"{name} must be a finite number, got {p!r}")
    x = float(p)
    if not (0.0 <= x <= 1.0):
        raise InvalidProbability(f"{name} must be in [0,1], got {x!r}")
    return x
