# src/statelab/joint/state.py
"""
Joint boolean state.

The marginal model in ``statelab.core.random_bool`` keeps one probability per
variable and so can never say "these two coins always land the same way".
Here a set of named booleans shares a single probability table over the whole
outcome space {0,1}^n (a numpy array of shape (2,)*n, one axis per name).

Consequences:

- ``observe(name)`` samples that variable from its current marginal, then
  conditions the *table* on the outcome. The other variables are not forced to
  collapse; their distributions become the conditionals given what was seen.
- ``derive(...)`` adds a variable that is a deterministic function of existing
  ones without observing anything. Observing the derived variable later tells
  you something about its inputs (``derive_and`` seen true pins both inputs).
- ``assign(target, source)`` is assignment without collapse: afterwards the two
  variables agree in every possible world.

The table grows as 2**n, so the number of variables is capped
(``StateLabConfig.max_joint_variables``).
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from statelab.core.config import StateLabConfig
from statelab.core.errors import (
    DuplicateVariable,
    ImpossibleEvidence,
    JointStateError,
    UnknownVariable,
)
from statelab.core.probability import require_probability
from statelab.core.rng import UniformSource, resolve_source

from .bounds import fh_bounds, joint_cells_from_marginals, phi_from_joint, validate_table

__all__ = ["JointBooleanState", "JointBool"]

LOG = logging.getLogger(__name__)

BoolFn = Callable[..., Any]


def _clip01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


class JointBooleanState:
    """A single joint distribution over a growing set of named booleans."""

    def __init__(
        self,
        rng: Optional[UniformSource] = None,
        *,
        max_variables: Optional[int] = None,
    ) -> None:
        if max_variables is None:
            max_variables = StateLabConfig.max_joint_variables_from_env()
        if isinstance(max_variables, bool) or not isinstance(max_variables, int) or max_variables < 1:
            raise JointStateError(f"max_variables must be a positive int, got {max_variables!r}")
        self._rng = rng
        self._max_variables = max_variables
        self._names: List[str] = []
        # zero variables: one world with all the mass
        self._table: np.ndarray = np.ones((), dtype=np.float64)
        self._observed: Dict[str, bool] = {}

    @classmethod
    def from_table(
        cls,
        names: Sequence[str],
        table: Any,
        *,
        rng: Optional[UniformSource] = None,
        prob_tol: float = 1e-9,
        max_variables: Optional[int] = None,
    ) -> "JointBooleanState":
        """Build from an explicit table (shape (2,)*n, or flat 2**n with names[0] most significant)."""
        state = cls(rng, max_variables=max_variables)
        names = list(names)
        state._reserve(names)
        state._table = validate_table(table, n_vars=len(names), prob_tol=prob_tol)
        state._names = names
        return state

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------
    def _axis(self, name: str) -> int:
        try:
            return self._names.index(name)
        except ValueError:
            raise UnknownVariable(f"unknown variable {name!r}; known: {self._names}") from None

    def _reserve(self, names: Sequence[str]) -> None:
        seen = set(self._names)
        for name in names:
            if not isinstance(name, str) or not name:
                raise JointStateError(f"variable names must be non-empty strings, got {name!r}")
            if name in seen:
                raise DuplicateVariable(f"variable {name!r} already exists")
            seen.add(name)
        if len(seen) > self._max_variables:
            raise JointStateError(
                f"joint state limited to {self._max_variables} variables, "
                f"requested {len(seen)}"
            )

    def _derived_axis(self, fn: BoolFn, sources: Sequence[str]) -> np.ndarray:
        """Current table with one extra trailing axis holding fn(sources)."""
        if not sources:
            raise JointStateError("a derived variable needs at least one source")
        axes = [self._axis(s) for s in sources]
        uniq = sorted(set(axes))
        pos = [uniq.index(a) for a in axes]
        # fn over the 2**k source worlds only, broadcast over the rest
        small = np.zeros((2,) * len(uniq), dtype=bool)
        for world in itertools.product((False, True), repeat=len(uniq)):
            small[tuple(int(v) for v in world)] = bool(fn(*(world[j] for j in pos)))
        bshape = [1] * self._table.ndim
        for a in uniq:
            bshape[a] = 2
        mask = small.reshape(bshape)
        return np.stack([self._table * ~mask, self._table * mask], axis=-1)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add(self, name: str, prob_true: Any) -> "JointBool":
        """Add a variable independent of everything already present."""
        p = require_probability(prob_true)
        self._reserve([name])
        self._table = np.multiply.outer(self._table, np.array([1.0 - p, p], dtype=np.float64))
        self._names.append(name)
        LOG.debug("added %s with P(true)=%.6g", name, p)
        return JointBool(self, name)

    def add_pair(
        self,
        a: str,
        b: str,
        p_a: Any,
        p_b: Any,
        p_11: Any,
    ) -> Tuple["JointBool", "JointBool"]:
        """Add two correlated variables with marginals p_a, p_b and overlap P(a and b) = p_11."""
        cells = joint_cells_from_marginals(p_a, p_b, p_11)
        self._reserve([a, b])
        pair = np.array(
            [[cells["p00"], cells["p01"]], [cells["p10"], cells["p11"]]],
            dtype=np.float64,
        )
        self._table = np.multiply.outer(self._table, pair)
        self._names.extend([a, b])
        LOG.debug("added pair (%s, %s) with cells %s", a, b, dict(cells))
        return JointBool(self, a), JointBool(self, b)

    def derive(self, name: str, fn: BoolFn, *sources: str) -> "JointBool":
        """Add ``name := fn(*sources)`` as a deterministic function of existing variables."""
        self._reserve([name])
        self._table = self._derived_axis(fn, sources)
        self._names.append(name)
        LOG.debug("derived %s from %s", name, list(sources))
        return JointBool(self, name)

    def derive_and(self, name: str, left: str, right: str) -> "JointBool":
        return self.derive(name, lambda x, y: x and y, left, right)

    def derive_or(self, name: str, left: str, right: str) -> "JointBool":
        return self.derive(name, lambda x, y: x or y, left, right)

    def derive_not(self, name: str, source: str) -> "JointBool":
        return self.derive(name, lambda x: not x, source)

    def derive_copy(self, name: str, source: str) -> "JointBool":
        return self.derive(name, lambda x: x, source)

    def assign(self, target: str, source: str) -> None:
        """Make ``target`` equal to ``source`` in every world, without observing either."""
        t = self._axis(target)
        if target == source:
            return
        extended = self._derived_axis(lambda x: x, [source])
        self._table = extended.sum(axis=t)
        self._names.pop(t)
        self._names.append(target)
        self._observed.pop(target, None)
        LOG.debug("assigned %s := %s", target, source)

    def marginalize(self, name: str) -> None:
        """Drop ``name``, summing it out of the table."""
        t = self._axis(name)
        self._table = self._table.sum(axis=t)
        self._names.pop(t)
        self._observed.pop(name, None)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------
    def observe(self, name: str, rng: Optional[UniformSource] = None) -> bool:
        """Sample ``name`` from its current marginal, then condition the table on the outcome."""
        i = self._axis(name)
        p = self.marginal(name)
        source = resolve_source(rng if rng is not None else self._rng)
        u = source.uniform()
        result = u < p

        idx: List[Any] = [slice(None)] * len(self._names)
        idx[i] = 0 if result else 1
        table = self._table.copy()
        table[tuple(idx)] = 0.0
        mass = float(table.sum())
        if mass <= 0.0:
            raise ImpossibleEvidence(f"observed {name}={result} but it has probability zero")
        self._table = table / mass
        self._observed[name] = result
        LOG.debug("observed %s (P(true)=%.6g) u=%.6g -> %s", name, p, u, result)
        return result

    # ------------------------------------------------------------------
    # Non-destructive queries
    # ------------------------------------------------------------------
    def marginal(self, name: str) -> float:
        """P(name is true)."""
        i = self._axis(name)
        totals = np.moveaxis(self._table, i, 0).reshape(2, -1).sum(axis=1)
        return _clip01(float(totals[1]))

    def probability(self, assignment: Mapping[str, bool]) -> float:
        """P(every name in ``assignment`` takes its given value)."""
        idx: List[Any] = [slice(None)] * len(self._names)
        for name, value in assignment.items():
            idx[self._axis(name)] = 1 if value else 0
        return _clip01(float(np.sum(self._table[tuple(idx)])))

    def conditional(self, name: str, given: Mapping[str, bool]) -> float:
        """P(name is true | given)."""
        self._axis(name)
        evidence = dict(given)
        denom = self.probability(evidence)
        if denom <= 0.0:
            raise ImpossibleEvidence(f"evidence {evidence} has probability zero")
        if name in evidence:
            return 1.0 if evidence[name] else 0.0
        num = self.probability({**evidence, name: True})
        return _clip01(num / denom)

    def correlation(self, a: str, b: str) -> float:
        """Phi coefficient between two variables; NaN when either is degenerate."""
        p_a = self.marginal(a)
        p_b = self.marginal(b)
        lo, hi = fh_bounds(p_a, p_b)
        p_11 = min(max(self.probability({a: True, b: True}), lo), hi)
        return phi_from_joint(p_a, p_b, p_11)

    def table(self) -> np.ndarray:
        return self._table.copy()

    def handle(self, name: str) -> "JointBool":
        self._axis(name)
        return JointBool(self, name)

    @property
    def variables(self) -> Tuple[str, ...]:
        return tuple(self._names)

    @property
    def observed(self) -> Dict[str, bool]:
        return dict(self._observed)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        marginals = ", ".join(f"{n}={self.marginal(n):.4g}" for n in self._names)
        return f"JointBooleanState({marginals})"


class JointBool:
    """Handle on one variable of a ``JointBooleanState``."""

    __slots__ = ("state", "name")

    def __init__(self, state: JointBooleanState, name: str) -> None:
        self.state = state
        self.name = name

    def get(self, rng: Optional[UniformSource] = None) -> bool:
        return self.state.observe(self.name, rng)

    def set(self, other: "JointBool") -> None:
        if not isinstance(other, JointBool):
            raise TypeError(f"can only set from another JointBool, got {type(other).__name__}")
        if other.state is not self.state:
            raise JointStateError(
                f"cannot assign {self.name} from {other.name}: variables live in different joint states"
            )
        self.state.assign(self.name, other.name)

    @property
    def probability(self) -> float:
        return self.state.marginal(self.name)

    def __repr__(self) -> str:
        if self.name not in self.state:
            return f"JointBool({self.name!r}, detached)"
        return f"JointBool({self.name!r}, P(true)={self.state.marginal(self.name):.4g})"
