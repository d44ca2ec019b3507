"""Top-level package for statelab: classical, marginal-random and joint boolean state."""

from importlib import metadata as _metadata

from . import analysis, core, joint
from .core import (
    DuplicationUnsupported,
    InvalidProbability,
    OrdinaryVariable,
    RandomBool,
    StateError,
)
from .joint import JointBool, JointBooleanState

try:
    __version__ = _metadata.version("statelab")
except _metadata.PackageNotFoundError:  # pragma: no cover - during local usage
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "analysis",
    "core",
    "joint",
    "DuplicationUnsupported",
    "InvalidProbability",
    "JointBool",
    "JointBooleanState",
    "OrdinaryVariable",
    "RandomBool",
    "StateError",
]
