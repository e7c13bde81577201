"""
Array rotation kernel: auxiliary copy (v1 semantics).

Implements the `copy_array` strategy of `src/kernels/rotate/rotate_array_v1.yaml`:
- every element is scattered into a scratch list at `(i + k) mod n`,
- the scratch list is copied back element by element.

O(n) time, O(n) auxiliary space.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from .rotate_math_v1 import _require_int, normalize_shift, require_int_sequence


def rotate_copy(nums: MutableSequence[int], k: int) -> None:
    """Rotate `nums` right by `k` in place via a scratch copy."""
    require_int_sequence("nums", nums)
    _require_int("k", k)

    n = len(nums)
    if n == 0:
        return
    shift = normalize_shift(k, n)
    if shift == 0:
        return

    scratch = [0] * n
    for i in range(n):
        scratch[(i + shift) % n] = nums[i]
    for i in range(n):
        nums[i] = scratch[i]
