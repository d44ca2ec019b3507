# src/statelab/core/errors.py
"""
Semantic errors for statelab.

Public functions raise these instead of bare ValueError/TypeError so callers can
catch a whole family (``StateError``) or one contract violation. Each class also
inherits the builtin it specialises, so ``except ValueError`` keeps working.
"""

from __future__ import annotations

__all__ = [
    "StateError",
    "InvalidProbability",
    "DuplicationUnsupported",
    "JointStateError",
    "UnknownVariable",
    "DuplicateVariable",
    "InfeasibleJoint",
    "InvalidJointTable",
    "ImpossibleEvidence",
]


class StateError(Exception):
    """Base error for this package."""


class InvalidProbability(StateError, ValueError):
    """A probability is non-numeric, non-finite, or outside [0, 1]."""


class DuplicationUnsupported(StateError, TypeError):
    """A value cannot produce an independent copy of itself."""


class JointStateError(StateError):
    """Misuse of a joint boolean state."""


class UnknownVariable(JointStateError, KeyError):
    """Name not present in the joint state."""

    def __str__(self) -> str:
        # KeyError.__str__ wraps the message in quotes
        return str(self.args[0]) if self.args else ""


class DuplicateVariable(JointStateError, ValueError):
    """Name already present in the joint state."""


class InfeasibleJoint(JointStateError, ValueError):
    """Requested overlap lies outside the Fréchet-Hoeffding bounds."""


class InvalidJointTable(JointStateError, ValueError):
    """Joint probability table has the wrong shape, bad cells, or does not sum to 1."""


class ImpossibleEvidence(JointStateError, ValueError):
    """Conditioning on an event of probability zero."""
