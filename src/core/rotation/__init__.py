"""`rotation`: strategy dispatch over the array-rotation kernels.

This package mirrors the semantics of `src/kernels/rotate/rotate_array_v1.yaml`:
- three interchangeable in-place kernels (copy, triple reversal, cyclic replacement),
- one negative-shift policy shared by every strategy,
- post-rotation invariant checks.

Public API:
- `rotate(nums, k, strategy=None)` (in place, returns None)
- `rotate_left(nums, k, strategy=None)`
- `rotated(values, k, strategy=None) -> list[int]`
- `rotate_checked(nums, k, strategy=None) -> RotationReport` (raises on violation)
- `default_config() / load_config(path) -> RotationConfig`
"""

from .config import default_config, load_config
from .engine import kernel_for, rotate, rotate_checked, rotate_left, rotated
from .errors import RotationConfigError, RotationError, RotationInvariantError
from .invariants import INVARIANT_REGISTRY, check_all
from .types import (
    AuxSpace,
    NegativeShiftPolicy,
    RotationConfig,
    RotationReport,
    Strategy,
    StrategyInfo,
)

__all__ = [
    "rotate",
    "rotate_left",
    "rotated",
    "rotate_checked",
    "kernel_for",
    "default_config",
    "load_config",
    "check_all",
    "INVARIANT_REGISTRY",
    "AuxSpace",
    "NegativeShiftPolicy",
    "RotationConfig",
    "RotationReport",
    "Strategy",
    "StrategyInfo",
    "RotationError",
    "RotationConfigError",
    "RotationInvariantError",
]
