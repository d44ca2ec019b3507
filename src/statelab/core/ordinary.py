# src/statelab/core/ordinary.py
"""
Classical state.

An ``OrdinaryVariable`` stores a value and keeps it over time. Its value is
fixed the moment it is constructed or assigned; reading it never changes it.
The only thing asked of the stored type is that it can be duplicated
(``copy.deepcopy``), so readers and writers never share a mutable object.

Usage:

>>> bit = OrdinaryVariable(False)
>>> true_bit = OrdinaryVariable(True)
>>> bit.set(true_bit)
>>> bit.get()
True
"""

from __future__ import annotations

import copy
from typing import Generic, TypeVar

from .errors import DuplicationUnsupported

__all__ = ["OrdinaryVariable", "duplicate", "negate", "and_", "implies"]

T = TypeVar("T")


def duplicate(value: T) -> T:
    """Independent copy of ``value``; raises DuplicationUnsupported if it cannot be copied."""
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as e:
        raise DuplicationUnsupported(
            f"values of type {type(value).__name__} cannot be duplicated: {e}"
        ) from e


class OrdinaryVariable(Generic[T]):
    """A deterministic container with eager copy semantics."""

    __slots__ = ("_value",)

    def __init__(self, initial_value: T) -> None:
        self._value: T = duplicate(initial_value)

    def set(self, other: "OrdinaryVariable[T]") -> None:
        if not isinstance(other, OrdinaryVariable):
            raise TypeError(f"can only set from another OrdinaryVariable, got {type(other).__name__}")
        self._value = other.get()

    def get(self) -> T:
        return duplicate(self._value)

    def __repr__(self) -> str:
        return f"OrdinaryVariable({self._value!r})"


# ---------------------------------------------------------------------------
# Computations on classical booleans
# ---------------------------------------------------------------------------
def negate(var: OrdinaryVariable[bool]) -> None:
    result = OrdinaryVariable(not var.get())
    var.set(result)


def and_(
    output: OrdinaryVariable[bool],
    left: OrdinaryVariable[bool],
    right: OrdinaryVariable[bool],
) -> None:
    result = OrdinaryVariable(bool(left.get() and right.get()))
    output.set(result)


def implies(
    output: OrdinaryVariable[bool],
    left: OrdinaryVariable[bool],
    right: OrdinaryVariable[bool],
) -> None:
    """``output := left => right``, written as ``!(left && !right)``."""
    not_right = OrdinaryVariable(right.get())
    negate(not_right)
    and_(output, left, not_right)
    negate(output)
