# src/statelab/core/random_bool.py
"""
Probabilistic state with randomness resolved on observation.

A ``RandomBool`` only stores the probability of being true. Nothing is decided
until someone calls ``get``; that call draws once from the RNG source, picks an
outcome, and collapses the stored probability to exactly 1.0 or 0.0 so every
later read agrees with the first.

``set`` copies a *realized* outcome, not a probability: it observes the other
variable and pins this one to the same value. Two variables joined by ``set``
therefore always agree, which is what makes it a faithful copy.

A ``RandomBool`` is marginal only. It cannot express correlation with another
instance; see ``statelab.joint`` for that.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .probability import require_probability
from .rng import UniformSource, resolve_source

__all__ = ["RandomBool"]

LOG = logging.getLogger(__name__)


class RandomBool:
    """Marginal random boolean with collapse-on-read semantics."""

    __slots__ = ("_prob_true", "_rng")

    def __init__(self, prob_true: Any, *, rng: Optional[UniformSource] = None) -> None:
        self._prob_true = require_probability(prob_true)
        self._rng = rng

    # ------------------------------------------------------------------
    # new / set / get
    # ------------------------------------------------------------------
    def set(self, other: "RandomBool") -> None:
        if not isinstance(other, RandomBool):
            raise TypeError(f"can only set from another RandomBool, got {type(other).__name__}")
        self._prob_true = 1.0 if other.get() else 0.0

    def get(self, rng: Optional[UniformSource] = None) -> bool:
        """Observe: draw, collapse, and return the outcome."""
        source = resolve_source(rng if rng is not None else self._rng)
        u = source.uniform()
        prior = self._prob_true
        result = u < prior
        self._prob_true = 1.0 if result else 0.0
        LOG.debug("observed RandomBool(p=%.6g) u=%.6g -> %s", prior, u, result)
        return result

    def reset(self, prob_true: Any) -> None:
        """Re-arm with a fresh, unobserved marginal."""
        self._prob_true = require_probability(prob_true)

    # ------------------------------------------------------------------
    # Non-destructive inspection
    # ------------------------------------------------------------------
    @property
    def prob_true(self) -> float:
        return self._prob_true

    @property
    def collapsed(self) -> bool:
        """True when the distribution is degenerate (after an observation, or built that way)."""
        return self._prob_true in (0.0, 1.0)

    def __repr__(self) -> str:
        return f"RandomBool(prob_true={self._prob_true!r})"
