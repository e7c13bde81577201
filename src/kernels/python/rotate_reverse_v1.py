"""
Array rotation kernel: triple reversal (v1 semantics).

Implements the `triple_reverse` strategy of `src/kernels/rotate/rotate_array_v1.yaml`.

Reversing the whole sequence puts the last k elements first (reversed) and the
first n - k elements last (reversed); reversing each half again restores each
half's internal order while leaving the halves swapped.

O(n) time, O(1) auxiliary space.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from .rotate_math_v1 import _require_int, normalize_shift, require_int_sequence, reverse_range


def rotate_reverse(nums: MutableSequence[int], k: int) -> None:
    """Rotate `nums` right by `k` in place via three reversals."""
    require_int_sequence("nums", nums)
    _require_int("k", k)

    n = len(nums)
    if n == 0:
        return
    shift = normalize_shift(k, n)
    if shift == 0:
        return

    reverse_range(nums, 0, n)
    reverse_range(nums, 0, shift)
    reverse_range(nums, shift, n)
