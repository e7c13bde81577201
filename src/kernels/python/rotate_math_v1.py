"""
Shared arithmetic for the array-rotation kernels (v1 semantics).

This module mirrors the helpers referenced by `src/kernels/rotate/rotate_array_v1.yaml`:
- `gcd` (Euclid by repeated remainder),
- `reverse_range` (two-pointer swap on a sub-range, no slice copies),
- `normalize_shift` (floor modulo, so negative shifts rotate left).

Every function is stateless and operates on plain Python ints.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_int_sequence(name: str, nums: MutableSequence[int]) -> None:
    """Reject anything but a mutable sequence of ints (bools excluded)."""
    if not isinstance(nums, MutableSequence):
        raise TypeError(f"{name} must be a mutable sequence, got {type(nums).__name__}")
    for i, v in enumerate(nums):
        if not isinstance(v, int) or isinstance(v, bool):
            raise TypeError(f"{name}[{i}] must be an int")


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of two non-negative ints.

    `gcd(0, b) == b`, so `gcd(0, n) == n` for the zero-shift case.
    """
    _require_int("a", a)
    _require_int("b", b)
    if a < 0 or b < 0:
        raise ValueError("gcd inputs must be non-negative")
    while a != 0:
        a, b = b % a, a
    return b


def normalize_shift(k: int, n: int) -> int:
    """
    Reduce a right-shift amount into `[0, n)`.

    Uses Python's floor modulo, which equals `((k % n) + n) % n`; a negative `k`
    is a left rotation by `|k|`. Callers must handle `n == 0` first.
    """
    _require_int("k", k)
    _require_int("n", n)
    if n <= 0:
        raise ValueError("n must be positive")
    return k % n


def reverse_range(nums: MutableSequence[int], start: int, stop: int) -> None:
    """Reverse `nums[start:stop]` in place."""
    _require_int("start", start)
    _require_int("stop", stop)
    if not (0 <= start <= stop <= len(nums)):
        raise ValueError(f"invalid range [{start}, {stop}) for length {len(nums)}")

    left, right = start, stop - 1
    while left < right:
        nums[left], nums[right] = nums[right], nums[left]
        left += 1
        right -= 1


def cycle_count(n: int, k: int) -> int:
    """Number of disjoint cycles of `i -> (i + k) mod n` (0 for an empty sequence)."""
    _require_int("n", n)
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    return gcd(normalize_shift(k, n), n)


def cycle_decomposition(n: int, k: int) -> list[tuple[int, ...]]:
    """
    Cycles of the right-rotation permutation `i -> (i + k) mod n`.

    The j-th cycle starts at index j for j in [0, gcd(k mod n, n)), and every
    cycle has length n / gcd.
    """
    g = cycle_count(n, k)
    if g == 0:
        return []
    shift = normalize_shift(k, n)

    cycles: list[tuple[int, ...]] = []
    for start in range(g):
        members = [start]
        cur = (start + shift) % n
        while cur != start:
            members.append(cur)
            cur = (cur + shift) % n
        cycles.append(tuple(members))
    return cycles


def is_right_rotation(before: Sequence[int], after: Sequence[int], k: int) -> bool:
    """True when `after` is `before` rotated right by `k`."""
    n = len(before)
    if len(after) != n:
        return False
    if n == 0:
        return True
    shift = normalize_shift(k, n)
    return all(after[(i + shift) % n] == before[i] for i in range(n))
