"""Statistics over repeated observations."""

from .convergence import ConvergenceResult, run_convergence
from .intervals import hoeffding_radius, wilson_ci_from_counts

__all__ = ["ConvergenceResult", "hoeffding_radius", "run_convergence", "wilson_ci_from_counts"]
