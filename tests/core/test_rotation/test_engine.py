"""Tests for src/core/rotation/engine.py — dispatch table + entry points."""

from __future__ import annotations

from dataclasses import replace

import pytest

from src.core.rotation import (
    NegativeShiftPolicy,
    RotationConfig,
    RotationConfigError,
    RotationInvariantError,
    RotationReport,
    Strategy,
    default_config,
    kernel_for,
    rotate,
    rotate_checked,
    rotate_left,
    rotated,
)
from src.core.rotation.types import StrategyInfo
from src.core.rotation import engine as engine_mod
from src.kernels.python.rotate_copy_v1 import rotate_copy
from src.kernels.python.rotate_reverse_v1 import rotate_reverse
from src.kernels.python.rotate_ring_v1 import rotate_ring


def _reject_config():
    return replace(default_config(), negative_shift=NegativeShiftPolicy.REJECT)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestDispatch:
    def test_every_strategy_has_a_kernel(self):
        assert set(engine_mod._DISPATCH) == set(Strategy)

    def test_kernel_for_enum(self):
        assert kernel_for(Strategy.COPY_ARRAY) is rotate_copy
        assert kernel_for(Strategy.TRIPLE_REVERSE) is rotate_reverse
        assert kernel_for(Strategy.RING_REPLACE) is rotate_ring

    def test_kernel_for_string(self):
        assert kernel_for("ring_replace") is rotate_ring

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="unsupported rotation strategy"):
            rotate([1, 2, 3], 1, "bubble")


# ---------------------------------------------------------------------------
# rotate
# ---------------------------------------------------------------------------

class TestRotate:
    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_basic(self, strategy):
        nums = [1, 2, 3, 4, 5, 6, 7]
        assert rotate(nums, 3, strategy) is None
        assert nums == [5, 6, 7, 1, 2, 3, 4]

    def test_default_strategy_from_config(self):
        cfg = replace(default_config(), default_strategy=Strategy.COPY_ARRAY)
        nums = [1, 2, 3]
        rotate(nums, 1, config=cfg)
        assert nums == [3, 1, 2]

    def test_packaged_default(self):
        nums = [-1, -100, 3, 99]
        rotate(nums, 2)
        assert nums == [3, 99, -1, -100]

    def test_negative_normalized_by_default(self):
        nums = [1, 2, 3, 4]
        rotate(nums, -1, "triple_reverse")
        assert nums == [2, 3, 4, 1]

    def test_negative_rejected_by_policy(self):
        nums = [1, 2, 3, 4]
        with pytest.raises(ValueError, match="negative shift rejected"):
            rotate(nums, -1, config=_reject_config())
        assert nums == [1, 2, 3, 4]

    def test_rejects_bool_shift(self):
        with pytest.raises(TypeError, match="k must be an int"):
            rotate([1, 2], False)


# ---------------------------------------------------------------------------
# rotate_left / rotated
# ---------------------------------------------------------------------------

class TestRotateLeft:
    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_basic(self, strategy):
        nums = [1, 2, 3, 4, 5]
        rotate_left(nums, 2, strategy)
        assert nums == [3, 4, 5, 1, 2]

    def test_inverse_of_right(self):
        nums = [5, 1, 4, 2, 3]
        rotate(nums, 3)
        rotate_left(nums, 3)
        assert nums == [5, 1, 4, 2, 3]

    def test_empty(self):
        nums: list[int] = []
        rotate_left(nums, 7)
        assert nums == []

    def test_full_turn(self):
        nums = [1, 2, 3]
        rotate_left(nums, 3)
        assert nums == [1, 2, 3]

    def test_negative_rejected_by_policy(self):
        with pytest.raises(ValueError, match="negative shift rejected"):
            rotate_left([1, 2, 3], -1, config=_reject_config())


class TestRotated:
    def test_returns_new_list(self):
        src = (1, 2, 3, 4)
        out = rotated(src, 1)
        assert out == [4, 1, 2, 3]
        assert src == (1, 2, 3, 4)

    def test_does_not_mutate_list_input(self):
        src = [1, 2, 3, 4]
        out = rotated(src, 3, Strategy.COPY_ARRAY)
        assert out == [2, 3, 4, 1]
        assert src == [1, 2, 3, 4]
        assert out is not src


# ---------------------------------------------------------------------------
# rotate_checked
# ---------------------------------------------------------------------------

class TestRotateChecked:
    def test_report(self):
        nums = [1, 2, 3, 4, 5, 6]
        report = rotate_checked(nums, 8, Strategy.RING_REPLACE)
        assert nums == [5, 6, 1, 2, 3, 4]
        assert report == RotationReport(
            strategy=Strategy.RING_REPLACE,
            length=6,
            shift=8,
            normalized_shift=2,
            cycle_count=2,
        )

    def test_zero_shift_report(self):
        nums = [1, 2, 3, 4, 5, 6]
        report = rotate_checked(nums, 6)
        assert nums == [1, 2, 3, 4, 5, 6]
        assert report.normalized_shift == 0
        assert report.cycle_count == 6

    def test_empty_report(self):
        report = rotate_checked([], 3, "copy_array")
        assert report.length == 0
        assert report.normalized_shift == 0
        assert report.cycle_count == 0

    def test_default_strategy_recorded(self):
        report = rotate_checked([1, 2], 1)
        assert report.strategy is default_config().default_strategy

    def test_broken_kernel_raises(self, monkeypatch):
        def _drop_last(nums, k):
            nums[-1] = nums[0]

        monkeypatch.setitem(engine_mod._DISPATCH, Strategy.COPY_ARRAY, _drop_last)
        cfg = replace(default_config(), strategies=())
        with pytest.raises(RotationInvariantError) as exc:
            rotate_checked([1, 2, 3], 1, Strategy.COPY_ARRAY, config=cfg)
        assert "inv_permutation" in exc.value.violations
        assert "inv_right_shift" in exc.value.violations
        assert "inv_length_preserved" not in exc.value.violations

    def test_verification_can_be_disabled(self, monkeypatch):
        def _noop(nums, k):
            return None

        monkeypatch.setitem(engine_mod._DISPATCH, Strategy.COPY_ARRAY, _noop)
        cfg = replace(default_config(), verify_invariants=False, strategies=())
        report = rotate_checked([1, 2, 3], 1, Strategy.COPY_ARRAY, config=cfg)
        assert report.normalized_shift == 1

    def test_rejects_tuple(self):
        with pytest.raises(TypeError, match="mutable sequence"):
            rotate_checked((1, 2, 3), 1)

    def test_unknown_invariant_id_in_config(self):
        with pytest.raises(RotationConfigError, match="unknown invariant ids: inv_nope"):
            rotate_checked([1, 2, 3], 1, config=RotationConfig(invariants=("inv_nope",)))

    def test_unknown_invariant_id_via_replace(self):
        with pytest.raises(ValueError, match="unknown invariant ids"):
            replace(default_config(), invariants=("inv_right_shift", "inv_sorted"))


# ---------------------------------------------------------------------------
# Argument guards / kernel binding
# ---------------------------------------------------------------------------

class TestGuards:
    def test_rotate_rejects_generator(self):
        with pytest.raises(TypeError, match="mutable sequence"):
            rotate((x for x in [1, 2, 3]), 1)

    def test_rotate_rejects_tuple(self):
        with pytest.raises(TypeError, match="mutable sequence"):
            rotate((1, 2, 3), 1)

    def test_packaged_kernels_match_dispatch(self):
        cfg = default_config()
        for strategy in Strategy:
            info = cfg.strategy_info(strategy)
            assert info is not None
            assert engine_mod._DISPATCH[strategy].__module__.endswith(info.kernel)

    def test_mismatched_kernel_name(self):
        cfg = default_config()
        ring = cfg.strategy_info(Strategy.RING_REPLACE)
        wrong = replace(ring, kernel="rotate_copy_v1")
        others = tuple(i for i in cfg.strategies if i.strategy is not Strategy.RING_REPLACE)
        bad = replace(cfg, strategies=others + (wrong,))
        nums = [1, 2, 3]
        with pytest.raises(RotationConfigError, match="names kernel 'rotate_copy_v1'"):
            rotate(nums, 1, Strategy.RING_REPLACE, config=bad)
        assert nums == [1, 2, 3]

    def test_unlisted_strategy_skips_binding_check(self):
        cfg = RotationConfig(
            strategies=(
                StrategyInfo(
                    strategy=Strategy.COPY_ARRAY,
                    kernel="rotate_copy_v1",
                    aux_space=default_config().strategy_info(Strategy.COPY_ARRAY).aux_space,
                    short_circuits_zero_shift=True,
                ),
            )
        )
        nums = [1, 2, 3]
        rotate(nums, 1, Strategy.TRIPLE_REVERSE, config=cfg)
        assert nums == [3, 1, 2]
