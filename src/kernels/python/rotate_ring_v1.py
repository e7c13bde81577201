"""
Array rotation kernel: cyclic replacement (v1 semantics).

Implements the `ring_replace` strategy of `src/kernels/rotate/rotate_array_v1.yaml`.

The permutation `i -> (i + k) mod n` splits [0, n) into exactly g = gcd(k, n)
disjoint cycles, each of length n / g, and the j-th cycle starts at index j.
Walking each cycle once while carrying the displaced value writes every index
exactly once.

Unlike the other strategies this kernel does not short-circuit k mod n == 0:
gcd(0, n) == n, so it walks n single-element cycles, each of which writes a
value back onto itself.

O(n) time, O(1) auxiliary space.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from .rotate_math_v1 import _require_int, gcd, normalize_shift, require_int_sequence


def rotate_ring(nums: MutableSequence[int], k: int) -> None:
    """Rotate `nums` right by `k` in place by walking gcd(k, n) cycles."""
    require_int_sequence("nums", nums)
    _require_int("k", k)

    n = len(nums)
    if n == 0:
        return
    shift = normalize_shift(k, n)
    cycles = gcd(shift, n)

    for start in range(cycles):
        cur = (start + shift) % n
        pre_val = nums[start]
        cur_val = nums[cur]
        while cur != start:
            nums[cur] = pre_val
            pre_val = cur_val
            cur = (cur + shift) % n
            cur_val = nums[cur]
        # back at the cycle start: close the cycle
        nums[start] = pre_val
