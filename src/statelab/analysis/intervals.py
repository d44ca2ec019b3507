# src/statelab/analysis/intervals.py
"""
Interval estimators for Bernoulli proportions.

Provides:
  - wilson_ci_from_counts(k, n, delta)
  - hoeffding_radius(n, delta)

Notes:
  * Wilson is preferred over Wald for small n and for p near 0 or 1, where
    observations of a RandomBool are most lopsided.
  * Hoeffding gives a distribution-free radius: P(|p_hat - p| >= r) <= delta.
"""

from __future__ import annotations

from math import log, sqrt

import numpy as np

__all__ = ["wilson_ci_from_counts", "hoeffding_radius", "norm_ppf"]


def _validate_n(name: str, n: int) -> None:
    if isinstance(n, bool) or not (isinstance(n, (int, np.integer)) and n > 0):
        raise ValueError(f"{name} must be a positive integer. Got {n}.")


def _validate_delta(delta: float) -> None:
    if not (0.0 < delta < 1.0):
        raise ValueError(f"delta must be in (0,1). Got {delta}.")


def _clip01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


# Acklam's rational approximation to the standard normal inverse CDF.
_A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
_B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
_D = (7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e00, 3.754408661907416e00)
_P_LOW = 0.02425


def _tail(q: float) -> float:
    num = ((((_C[0] * q + _C[1]) * q + _C[2]) * q + _C[3]) * q + _C[4]) * q + _C[5]
    den = (((_D[0] * q + _D[1]) * q + _D[2]) * q + _D[3]) * q + 1
    return num / den


def norm_ppf(p: float) -> float:
    """Standard normal quantile."""
    if not (0.0 < p < 1.0):
        raise ValueError(f"p must be in (0,1), got {p}")
    if p < _P_LOW:
        return _tail(sqrt(-2 * log(p)))
    if p > 1 - _P_LOW:
        return -_tail(sqrt(-2 * log(1 - p)))
    q = p - 0.5
    r = q * q
    num = (((((_A[0] * r + _A[1]) * r + _A[2]) * r + _A[3]) * r + _A[4]) * r + _A[5]) * q
    den = ((((_B[0] * r + _B[1]) * r + _B[2]) * r + _B[3]) * r + _B[4]) * r + 1
    return num / den


def wilson_ci_from_counts(k: int, n: int, delta: float = 0.05) -> tuple[float, float]:
    """Two-sided Wilson score interval for k successes out of n.

    Args:
        k: number of successes (0..n)
        n: sample size (>0)
        delta: two-sided tail probability (e.g., 0.05 for 95% CI)

    Returns:
        (lo, hi) within [0,1].
    """
    _validate_n("n", n)
    if not (0 <= k <= n):
        raise ValueError(f"k must be in [0,n]. Got k={k}, n={n}")
    _validate_delta(delta)
    phat = k / n
    z = norm_ppf(1.0 - 0.5 * delta)
    z2 = z * z
    denom = 1.0 + z2 / n
    center = (phat + z2 / (2 * n)) / denom
    half = (z * sqrt((phat * (1.0 - phat) + z2 / (4 * n)) / n)) / denom
    return _clip01(center - half), _clip01(center + half)


def hoeffding_radius(n: int, delta: float = 0.05) -> float:
    """Two-sided Hoeffding radius sqrt(log(2/delta) / (2n))."""
    _validate_n("n", n)
    _validate_delta(delta)
    return sqrt(log(2.0 / delta) / (2.0 * n))
