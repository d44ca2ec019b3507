# src/statelab/core/rng.py
"""
Uniform random sources.

Every observation in statelab consumes exactly one ``uniform()`` draw in [0, 1).
Callers who want reproducible runs pass an explicit source; everyone else shares
the process-wide default, which ``set_seed`` re-seeds.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Protocol, runtime_checkable

import numpy as np

LOG = logging.getLogger(__name__)

DEFAULT_SEED = 1337
SEED_ENV_VAR = "STATELAB_SEED"


@runtime_checkable
class UniformSource(Protocol):
    def uniform(self) -> float:
        """Return one sample from Uniform[0, 1)."""
        ...


class GeneratorSource:
    """UniformSource backed by a ``numpy.random.Generator``."""

    def __init__(
        self,
        generator: Optional[np.random.Generator] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        if generator is not None and seed is not None:
            raise ValueError("pass either generator or seed, not both")
        if generator is not None and not isinstance(generator, np.random.Generator):
            raise TypeError(f"generator must be a numpy.random.Generator, got {type(generator).__name__}")
        self.generator = generator if generator is not None else np.random.default_rng(seed)
        self.draws = 0

    def uniform(self) -> float:
        self.draws += 1
        return float(self.generator.random())

    def __repr__(self) -> str:
        return f"GeneratorSource(draws={self.draws})"


def make_source(seed: int, *keys: int) -> GeneratorSource:
    """
    Stable source keyed by (seed, *keys).

    Different key tuples give statistically independent streams; the same tuple
    always replays the same stream.
    """
    parts = (seed, *keys)
    if not all(isinstance(x, int) and not isinstance(x, bool) for x in parts):
        raise TypeError("seed and keys must all be ints")
    if any(x < 0 for x in parts):
        raise ValueError(f"seed and keys must be non-negative, got {parts!r}")
    ss = np.random.SeedSequence(list(parts))
    return GeneratorSource(np.random.default_rng(ss))


_default: Optional[GeneratorSource] = None


def _resolve_seed(seed: Optional[int]) -> int:
    if seed is not None:
        s = int(seed)
    else:
        raw = os.environ.get(SEED_ENV_VAR)
        if raw is None or not raw.strip():
            return DEFAULT_SEED
        try:
            s = int(raw)
        except ValueError as e:
            raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}") from e
    if s < 0:
        raise ValueError(f"seed must be >= 0, got {s}")
    return s


def default_source() -> GeneratorSource:
    """The process-wide source, created on first use."""
    global _default
    if _default is None:
        env_seed = os.environ.get(SEED_ENV_VAR)
        # unseeded unless the environment pins it
        _default = GeneratorSource(seed=_resolve_seed(None) if env_seed else None)
    return _default


def set_seed(seed: Optional[int] = None) -> int:
    """Re-seed the process-wide source; returns the resolved seed."""
    global _default
    s = _resolve_seed(seed)
    _default = GeneratorSource(seed=s)
    LOG.debug("default source re-seeded with %d", s)
    return s


def resolve_source(rng: Optional[UniformSource]) -> UniformSource:
    return rng if rng is not None else default_source()
