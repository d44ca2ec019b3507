"""Classical and marginal-random state, the RNG service, and shared errors."""

from .config import ConfigError, StateLabConfig
from .errors import (
    DuplicationUnsupported,
    InvalidProbability,
    StateError,
)
from .ordinary import OrdinaryVariable
from .random_bool import RandomBool
from .rng import GeneratorSource, UniformSource, default_source, make_source, set_seed

__all__ = [
    "ConfigError",
    "DuplicationUnsupported",
    "GeneratorSource",
    "InvalidProbability",
    "OrdinaryVariable",
    "RandomBool",
    "StateError",
    "StateLabConfig",
    "UniformSource",
    "default_source",
    "make_source",
    "set_seed",
]
