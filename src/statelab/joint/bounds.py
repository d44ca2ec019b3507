# src/statelab/joint/bounds.py
"""
Feasibility primitives for joint Bernoulli distributions.

For two booleans A, B with marginals pA, pB the overlap p11 = P(A=1, B=1) is
only feasible inside the Fréchet-Hoeffding bounds

    lower = max(0, pA + pB - 1)
    upper = min(pA, pB)

and determines the full 2x2 table

    p10 = pA - p11
    p01 = pB - p11
    p00 = 1 - pA - pB + p11

``validate_table`` generalises the 2x2 check to a table over {0,1}^n.
"""

from __future__ import annotations

import math
from typing import Any, Tuple, TypedDict

import numpy as np

from statelab.core.errors import InfeasibleJoint, InvalidJointTable
from statelab.core.probability import require_probability

__all__ = [
    "EPS_PROB",
    "JointCells",
    "fh_bounds",
    "validate_joint",
    "joint_cells_from_marginals",
    "phi_from_joint",
    "validate_table",
]

# tolerance for boundary comparisons; values within eps are clipped to the boundary
EPS_PROB = 1e-12


class JointCells(TypedDict):
    """Typed 2x2 joint table."""

    p00: float
    p01: float
    p10: float
    p11: float


def _clip01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def fh_bounds(p_a: Any, p_b: Any) -> Tuple[float, float]:
    """Return Fréchet-Hoeffding bounds (lower, upper) for p11 given marginals."""
    a = require_probability(p_a, "p_a")
    b = require_probability(p_b, "p_b")
    lo = _clip01(max(0.0, a + b - 1.0))
    hi = _clip01(min(a, b))
    return (lo, hi)


def validate_joint(p_a: Any, p_b: Any, p_11: Any) -> float:
    """Return p11 snapped onto [lower, upper]; more than EPS_PROB outside raises InfeasibleJoint."""
    lo, hi = fh_bounds(p_a, p_b)
    overlap = require_probability(p_11, "p_11")
    overshoot = max(lo - overlap, overlap - hi)
    if overshoot > EPS_PROB:
        raise InfeasibleJoint(
            f"P(a and b)={overlap} is outside [{lo}, {hi}] by {overshoot:.3g}"
        )
    return float(np.clip(overlap, lo, hi))


def joint_cells_from_marginals(p_a: Any, p_b: Any, p_11: Any) -> JointCells:
    """Construct the full 2x2 joint distribution from marginals and overlap."""
    a = require_probability(p_a, "p_a")
    b = require_probability(p_b, "p_b")
    x = validate_joint(a, b, p_11)

    p10 = _clip01(a - x)
    p01 = _clip01(b - x)
    p00 = _clip01(1.0 - a - b + x)
    return JointCells(p00=p00, p01=p01, p10=p10, p11=x)


def phi_from_joint(p_a: Any, p_b: Any, p_11: Any) -> float:
    """
    Pearson correlation of two booleans, read off the 2x2 table:

        phi = (p11*p00 - p10*p01) / sqrt(pA(1-pA) pB(1-pB))

    NaN when either variable is constant.
    """
    cells = joint_cells_from_marginals(p_a, p_b, p_11)
    a = cells["p10"] + cells["p11"]
    b = cells["p01"] + cells["p11"]
    spread = a * (1.0 - a) * b * (1.0 - b)
    if spread <= 0.0:
        return float("nan")
    cross = cells["p11"] * cells["p00"] - cells["p10"] * cells["p01"]
    return float(np.clip(cross / math.sqrt(spread), -1.0, 1.0))


def validate_table(table: Any, *, n_vars: int, prob_tol: float = 1e-9) -> np.ndarray:
    """
    Validate a joint table over ``n_vars`` booleans and return it shaped (2,)*n_vars.

    Accepts either that shape or a flat vector of length 2**n_vars (row-major,
    first variable most significant). No renormalisation: cells must be finite,
    in [0, 1], and sum to 1 within ``prob_tol``.
    """
    if not (math.isfinite(float(prob_tol)) and 0.0 <= float(prob_tol) <= 1e-3):
        raise InvalidJointTable(f"prob_tol must be finite and reasonably small, got {prob_tol!r}")

    shape = (2,) * n_vars
    arr = np.asarray(table, dtype=np.float64)
    if arr.shape != shape:
        if arr.ndim == 1 and arr.size == 2**n_vars:
            arr = arr.reshape(shape)
        else:
            raise InvalidJointTable(
                f"Expected table shape {shape} or flat length {2**n_vars}, got {arr.shape}"
            )

    if not np.all(np.isfinite(arr)):
        raise InvalidJointTable(f"Non-finite probabilities in table: {arr.ravel().tolist()}")
    if float(arr.min()) < 0.0:
        raise InvalidJointTable(f"Negative cell probability encountered: min={float(arr.min())}")
    if float(arr.max()) > 1.0:
        raise InvalidJointTable(f"Cell probability > 1 encountered: max={float(arr.max())}")

    s = float(arr.sum())
    err = abs(s - 1.0)
    if err > float(prob_tol):
        raise InvalidJointTable(
            f"Cell probabilities do not sum to 1 within tol: sum={s} (|Δ|={err}, tol={prob_tol})"
        )
    return arr.copy()
