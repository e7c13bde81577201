"""Data types for the `rotation` engine.

All types are frozen dataclasses or enums. Member values match the keys used in
`src/kernels/rotate/rotate_array_v1.yaml`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

from .errors import RotationConfigError
from .invariants import INVARIANT_REGISTRY


@unique
class Strategy(Enum):
    """One member per kernel strategy id."""
    COPY_ARRAY = "copy_array"
    TRIPLE_REVERSE = "triple_reverse"
    RING_REPLACE = "ring_replace"


@unique
class NegativeShiftPolicy(Enum):
    NORMALIZE = "normalize"
    REJECT = "reject"


@unique
class AuxSpace(Enum):
    CONSTANT = "constant"
    LINEAR = "linear"


@dataclass(frozen=True)
class StrategyInfo:
    """Static facts about one strategy, as declared in the kernel spec."""

    strategy: Strategy
    kernel: str
    aux_space: AuxSpace
    short_circuits_zero_shift: bool


@dataclass(frozen=True)
class RotationConfig:
    default_strategy: Strategy = Strategy.RING_REPLACE
    negative_shift: NegativeShiftPolicy = NegativeShiftPolicy.NORMALIZE
    verify_invariants: bool = True
    strategies: tuple[StrategyInfo, ...] = ()
    invariants: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.default_strategy, Strategy):
            raise TypeError("default_strategy must be a Strategy")
        if not isinstance(self.negative_shift, NegativeShiftPolicy):
            raise TypeError("negative_shift must be a NegativeShiftPolicy")
        if not isinstance(self.verify_invariants, bool):
            raise TypeError("verify_invariants must be a bool")
        seen = [info.strategy for info in self.strategies]
        if len(seen) != len(set(seen)):
            raise ValueError("strategies must not repeat")
        unknown = [x for x in self.invariants if x not in INVARIANT_REGISTRY]
        if unknown:
            raise RotationConfigError(f"unknown invariant ids: {', '.join(unknown)}")

    def strategy_info(self, strategy: Strategy) -> StrategyInfo | None:
        for info in self.strategies:
            if info.strategy is strategy:
                return info
        return None


@dataclass(frozen=True)
class RotationReport:
    """Summary of one checked rotation.

    `shift` is the caller's k; `normalized_shift` is k reduced into [0, length)
    (0 for an empty sequence).
    """

    strategy: Strategy
    length: int
    shift: int
    normalized_shift: int
    cycle_count: int
