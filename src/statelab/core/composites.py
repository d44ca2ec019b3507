# src/statelab/core/composites.py
"""Logical operators over ``RandomBool``.

Every operator observes all of its operands (no short-circuit), so each operand
is collapsed by the time the result is written. Nothing unobserved survives a
computation chain; carrying correlations through operators without collapse is
what ``statelab.joint`` is for.

``rng``, when given, is used to observe the operands instead of their own
sources. The result itself is certain, so writing it never draws from any
caller-visible source.

Usage:

>>> x, y, out = RandomBool(0.5), RandomBool(0.5), RandomBool(0.0)
>>> and_(out, x, y)
>>> out.get() == (x.get() and y.get())
True
"""

from __future__ import annotations

from typing import Optional

from .random_bool import RandomBool
from .rng import UniformSource

__all__ = ["negate", "and_", "or_"]


class _SettledSource:
    """Source for degenerate results: any draw in [0, 1) gives the same outcome at p=0 or p=1."""

    def uniform(self) -> float:
        return 0.0


_SETTLED = _SettledSource()


def _certain(value: bool) -> RandomBool:
    return RandomBool(1.0 if value else 0.0, rng=_SETTLED)


def negate(var: RandomBool, *, rng: Optional[UniformSource] = None) -> None:
    var.set(_certain(not var.get(rng)))


def and_(
    output: RandomBool,
    left: RandomBool,
    right: RandomBool,
    *,
    rng: Optional[UniformSource] = None,
) -> None:
    l_val = left.get(rng)
    r_val = right.get(rng)
    output.set(_certain(l_val and r_val))


def or_(
    output: RandomBool,
    left: RandomBool,
    right: RandomBool,
    *,
    rng: Optional[UniformSource] = None,
) -> None:
    l_val = left.get(rng)
    r_val = right.get(rng)
    output.set(_certain(l_val or r_val))
