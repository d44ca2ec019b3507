# src/statelab/analysis/convergence.py
"""
Empirical convergence of observed frequencies.

Observing many *fresh* RandomBool(p) instances once each should give a fraction
of ``True`` close to p, and closer as the number of trials grows.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from statelab.core.random_bool import RandomBool
from statelab.core.rng import UniformSource, make_source, resolve_source

from .intervals import hoeffding_radius, wilson_ci_from_counts

__all__ = ["ConvergenceResult", "run_convergence"]

LOG = logging.getLogger(__name__)


class ConvergenceResult(BaseModel):
    """Summary of one convergence run."""

    model_config = ConfigDict(frozen=True)

    prob_true: float = Field(ge=0.0, le=1.0)
    trials: int = Field(gt=0)
    hits: int = Field(ge=0)
    seed: Optional[int] = None
    delta: float = Field(gt=0.0, lt=1.0)
    wilson_ci: Tuple[float, float]
    hoeffding_radius: float = Field(ge=0.0)

    @property
    def frequency(self) -> float:
        return self.hits / self.trials

    @property
    def abs_error(self) -> float:
        return abs(self.frequency - self.prob_true)

    def within(self, tolerance: float) -> bool:
        return self.abs_error <= tolerance


def run_convergence(
    prob_true: float,
    trials: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[UniformSource] = None,
    delta: float = 0.05,
) -> ConvergenceResult:
    """
    Observe ``trials`` fresh ``RandomBool(prob_true)`` instances once each.

    The source is, in order of preference: ``rng``, a stream derived from
    ``seed``, or the process-wide default.
    """
    if isinstance(trials, bool) or not isinstance(trials, int) or trials <= 0:
        raise ValueError(f"trials must be a positive int, got {trials!r}")
    if rng is None and seed is not None:
        rng = make_source(seed)
    source = resolve_source(rng)

    hits = 0
    for _ in range(trials):
        if RandomBool(prob_true, rng=source).get():
            hits += 1

    lo, hi = wilson_ci_from_counts(hits, trials, delta)
    result = ConvergenceResult(
        prob_true=float(prob_true),
        trials=trials,
        hits=hits,
        seed=seed,
        delta=delta,
        wilson_ci=(lo, hi),
        hoeffding_radius=hoeffding_radius(trials, delta),
    )
    LOG.info(
        "convergence p=%.4g trials=%d frequency=%.4f error=%.4f",
        result.prob_true, trials, result.frequency, result.abs_error,
    )
    return result
