"""
Pytest bootstrap for src/ layout, plus scripted RNG sources.

This ensures ./src is always on sys.path for any pytest invocation, so the
suite runs without an editable install.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List

import pytest
from hypothesis import HealthCheck, settings

repo_root = Path(__file__).resolve().parents[1]
src = repo_root / "src"
if src.is_dir():
    src_str = str(src)
    if src_str not in sys.path:
        # Put first so local src wins over any installed package named `statelab`.
        sys.path.insert(0, src_str)

from statelab.core import rng as rng_module  # noqa: E402

# the env/RNG isolation fixture below is autouse and resets per test, not per example
settings.register_profile(
    "statelab",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("statelab")


class ScriptedSource:
    """UniformSource that replays fixed draws and counts how many were taken."""

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = list(values)
        self.draws = 0

    def uniform(self) -> float:
        if self.draws >= len(self.values):
            raise AssertionError(f"scripted source exhausted after {self.draws} draws")
        v = self.values[self.draws]
        self.draws += 1
        return v


@pytest.fixture
def scripted():
    """Factory: scripted(0.1, 0.9, ...) -> ScriptedSource."""

    def _make(*values: float) -> ScriptedSource:
        return ScriptedSource(values)

    return _make


@pytest.fixture
def seeded():
    """Factory for deterministic numpy-backed sources."""
    return rng_module.make_source


@pytest.fixture(autouse=True)
def _isolate_default_source(monkeypatch):
    """Every test starts with a fresh, seeded process-wide source and a clean env."""
    for var in ("STATELAB_SEED", "STATELAB_TRIALS", "STATELAB_MAX_JOINT_VARIABLES"):
        monkeypatch.delenv(var, raising=False)
    rng_module.set_seed(1337)
    yield
    rng_module._default = None
