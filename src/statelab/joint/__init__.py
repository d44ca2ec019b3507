"""Joint (correlated) boolean state over a shared outcome table.

This is the extension past marginal-only randomness: variables that share one
distribution, observe without collapsing each other, and combine through
logical operators without premature observation.
"""

from .bounds import fh_bounds, joint_cells_from_marginals, phi_from_joint, validate_joint, validate_table
from .state import JointBool, JointBooleanState

__all__ = [
    "JointBool",
    "JointBooleanState",
    "fh_bounds",
    "joint_cells_from_marginals",
    "phi_from_joint",
    "validate_joint",
    "validate_table",
]
