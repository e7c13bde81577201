"""
Core rotation algorithms
"""

from ..kernels.python.rotate_copy_v1 import rotate_copy
from ..kernels.python.rotate_math_v1 import gcd, reverse_range
from ..kernels.python.rotate_reverse_v1 import rotate_reverse
from ..kernels.python.rotate_ring_v1 import rotate_ring
from .rotation import (
    RotationConfig,
    RotationInvariantError,
    RotationReport,
    Strategy,
    rotate,
    rotate_checked,
    rotate_left,
    rotated,
)

__all__ = [
    "rotate_copy",
    "rotate_reverse",
    "rotate_ring",
    "gcd",
    "reverse_range",
    "rotate",
    "rotate_left",
    "rotated",
    "rotate_checked",
    "RotationConfig",
    "RotationReport",
    "RotationInvariantError",
    "Strategy",
]
