"""Invariant checkers for the rotation engine.

This file mirrors the `invariants` list in `src/kernels/rotate/rotate_array_v1.yaml`.
Each checker takes `(before, after, shift)` and returns True when the invariant
holds; `check_all()` returns the list of violated invariant IDs (empty = all pass).
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Callable

from ...kernels.python.rotate_math_v1 import cycle_count, cycle_decomposition, is_right_rotation


def inv_length_preserved(before: Sequence[int], after: Sequence[int], shift: int) -> bool:
    return len(after) == len(before)


def inv_permutation(before: Sequence[int], after: Sequence[int], shift: int) -> bool:
    return Counter(after) == Counter(before)


def inv_right_shift(before: Sequence[int], after: Sequence[int], shift: int) -> bool:
    return is_right_rotation(before, after, shift)


def inv_cycle_cover(before: Sequence[int], after: Sequence[int], shift: int) -> bool:
    """Each gcd cycle carries its values one step forward.

    The cycles must partition [0, n) into equal-length orbits, and along every
    orbit (c0 c1 ... cm) the value at c_j must have moved to c_{j+1}.
    """
    n = len(before)
    if len(after) != n:
        return False
    cycles = cycle_decomposition(n, shift)
    if n == 0:
        return cycles == []
    g = cycle_count(n, shift)
    if len(cycles) != g or any(len(c) != n // g for c in cycles):
        return False
    if sorted(i for c in cycles for i in c) != list(range(n)):
        return False
    for c in cycles:
        for j, src in enumerate(c):
            if after[c[(j + 1) % len(c)]] != before[src]:
                return False
    return True


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

CheckFn = Callable[[Sequence[int], Sequence[int], int], bool]

INVARIANT_REGISTRY: dict[str, CheckFn] = {
    "inv_length_preserved": inv_length_preserved,
    "inv_permutation": inv_permutation,
    "inv_right_shift": inv_right_shift,
    "inv_cycle_cover": inv_cycle_cover,
}


def check_all(
    before: Sequence[int],
    after: Sequence[int],
    shift: int,
    ids: Sequence[str] | None = None,
) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass).

    `ids` restricts the check to a subset of the registry (e.g. the ids listed
    in the kernel spec); unknown ids raise `KeyError`.
    """
    selected = list(INVARIANT_REGISTRY) if ids is None else list(ids)
    return [
        inv_id
        for inv_id in selected
        if not INVARIANT_REGISTRY[inv_id](before, after, shift)
    ]
