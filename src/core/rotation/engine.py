"""Dispatch-table engine for array rotation.

``rotate(nums, k, strategy)`` is the single entry point. It:

1. Applies the negative-shift policy from the kernel spec.
2. Dispatches to the kernel for the requested strategy (default from config).

``rotate_checked()`` additionally snapshots the input and verifies every
invariant listed in `src/kernels/rotate/rotate_array_v1.yaml` on the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSequence
from typing import Callable

from ...kernels.python.rotate_copy_v1 import rotate_copy
from ...kernels.python.rotate_math_v1 import (
    _require_int,
    cycle_count,
    normalize_shift,
    require_int_sequence,
)
from ...kernels.python.rotate_reverse_v1 import rotate_reverse
from ...kernels.python.rotate_ring_v1 import rotate_ring
from .config import default_config
from .errors import RotationConfigError, RotationInvariantError
from .invariants import check_all
from .types import NegativeShiftPolicy, RotationConfig, RotationReport, Strategy

logger = logging.getLogger("rotate_array")

KernelFn = Callable[[MutableSequence[int], int], None]

_DISPATCH: dict[Strategy, KernelFn] = {
    Strategy.COPY_ARRAY: rotate_copy,
    Strategy.TRIPLE_REVERSE: rotate_reverse,
    Strategy.RING_REPLACE: rotate_ring,
}


def kernel_for(strategy: Strategy | str) -> KernelFn:
    """Return the kernel function implementing `strategy`."""
    return _DISPATCH[_coerce_strategy(strategy)]


def _coerce_strategy(strategy: Strategy | str) -> Strategy:
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(strategy)
    except ValueError:
        raise ValueError(f"unsupported rotation strategy: {strategy!r}") from None


def _resolve(
    strategy: Strategy | str | None, config: RotationConfig | None
) -> tuple[Strategy, RotationConfig]:
    cfg = config if config is not None else default_config()
    chosen = cfg.default_strategy if strategy is None else _coerce_strategy(strategy)
    _check_kernel_binding(chosen, cfg)
    return chosen, cfg


def _check_kernel_binding(strategy: Strategy, cfg: RotationConfig) -> None:
    # the kernel named in the YAML must be the module the dispatch table calls
    info = cfg.strategy_info(strategy)
    if info is None:
        return
    bound = _DISPATCH[strategy].__module__.rsplit(".", 1)[-1]
    if info.kernel != bound:
        raise RotationConfigError(
            f"strategy {strategy.value!r} names kernel {info.kernel!r} but dispatch binds {bound!r}"
        )


def _check_shift(k: int, cfg: RotationConfig) -> None:
    _require_int("k", k)
    if k < 0 and cfg.negative_shift is NegativeShiftPolicy.REJECT:
        raise ValueError(f"negative shift rejected by policy: {k}")


def rotate(
    nums: MutableSequence[int],
    k: int,
    strategy: Strategy | str | None = None,
    *,
    config: RotationConfig | None = None,
) -> None:
    """Rotate `nums` right by `k` in place using the selected strategy."""
    chosen, cfg = _resolve(strategy, config)
    _check_shift(k, cfg)
    require_int_sequence("nums", nums)
    logger.debug("rotate: strategy=%s n=%d k=%d", chosen.value, len(nums), k)
    _DISPATCH[chosen](nums, k)


def rotate_left(
    nums: MutableSequence[int],
    k: int,
    strategy: Strategy | str | None = None,
    *,
    config: RotationConfig | None = None,
) -> None:
    """Rotate `nums` left by `k` in place (a right rotation by n - k mod n)."""
    chosen, cfg = _resolve(strategy, config)
    _check_shift(k, cfg)
    require_int_sequence("nums", nums)

    n = len(nums)
    if n == 0:
        return
    right = (n - normalize_shift(k, n)) % n
    logger.debug("rotate_left: strategy=%s n=%d k=%d right=%d", chosen.value, n, k, right)
    _DISPATCH[chosen](nums, right)


def rotated(
    values: Iterable[int],
    k: int,
    strategy: Strategy | str | None = None,
    *,
    config: RotationConfig | None = None,
) -> list[int]:
    """Return a new list holding `values` rotated right by `k`."""
    out = list(values)
    rotate(out, k, strategy, config=config)
    return out


def rotate_checked(
    nums: MutableSequence[int],
    k: int,
    strategy: Strategy | str | None = None,
    *,
    config: RotationConfig | None = None,
) -> RotationReport:
    """
    Rotate `nums` right by `k` and verify the result.

    Raises `RotationInvariantError` when `config.verify_invariants` is set and the
    post-state violates any invariant listed in the kernel spec. The sequence is
    left in its rotated state either way.
    """
    chosen, cfg = _resolve(strategy, config)
    _check_shift(k, cfg)
    require_int_sequence("nums", nums)

    before = list(nums)
    rotate(nums, k, chosen, config=cfg)

    if cfg.verify_invariants:
        violations = check_all(before, nums, k, cfg.invariants or None)
        if violations:
            logger.debug("rotate_checked: strategy=%s violations=%s", chosen.value, violations)
            raise RotationInvariantError(violations)

    n = len(before)
    return RotationReport(
        strategy=chosen,
        length=n,
        shift=k,
        normalized_shift=normalize_shift(k, n) if n else 0,
        cycle_count=cycle_count(n, k),
    )
