"""
Kernel spec loading for the rotation engine.

The YAML kernel spec `src/kernels/rotate/rotate_array_v1.yaml` is the source of
truth for strategy metadata, engine defaults and the invariant list; this file
parses it into a `RotationConfig` and caches the result.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import RotationConfigError
from .invariants import INVARIANT_REGISTRY
from .types import AuxSpace, NegativeShiftPolicy, RotationConfig, Strategy, StrategyInfo

logger = logging.getLogger("rotate_array")

KERNEL_ID = "rotate_array_v1"


def _spec_path() -> Path:
    # src/core/rotation/config.py -> src/ -> kernels/rotate/rotate_array_v1.yaml
    return Path(__file__).resolve().parents[2] / "kernels" / "rotate" / f"{KERNEL_ID}.yaml"


def _load_yaml_spec(path: Path) -> Mapping[str, Any]:
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping):
        raise TypeError("kernel spec YAML must be a mapping")
    return obj


def _require_mapping(obj: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    if key not in obj:
        raise RotationConfigError(f"kernel spec missing key: {key}")
    value = obj[key]
    if not isinstance(value, Mapping):
        raise TypeError(f"kernel spec `{key}` must be a mapping")
    return value


def _parse_enum(enum_cls, raw: Any, field: str):
    try:
        return enum_cls(raw)
    except ValueError:
        raise RotationConfigError(f"unsupported {field}: {raw!r}") from None


def _parse_strategies(raw: Mapping[str, Any]) -> tuple[StrategyInfo, ...]:
    infos: list[StrategyInfo] = []
    for name, body in raw.items():
        strategy = _parse_enum(Strategy, name, "strategy")
        if not isinstance(body, Mapping):
            raise TypeError(f"strategy `{name}` must be a mapping")
        kernel = body.get("kernel")
        if not isinstance(kernel, str) or not kernel:
            raise RotationConfigError(f"strategy `{name}` missing kernel name")
        short_circuits = body.get("short_circuits_zero_shift", False)
        if not isinstance(short_circuits, bool):
            raise TypeError(f"strategy `{name}` short_circuits_zero_shift must be a bool")
        infos.append(
            StrategyInfo(
                strategy=strategy,
                kernel=kernel,
                aux_space=_parse_enum(AuxSpace, body.get("aux_space"), "aux_space"),
                short_circuits_zero_shift=short_circuits,
            )
        )

    missing = set(Strategy) - {info.strategy for info in infos}
    if missing:
        names = ", ".join(sorted(s.value for s in missing))
        raise RotationConfigError(f"kernel spec missing strategies: {names}")
    return tuple(infos)


def _parse_invariants(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
        raise TypeError("kernel spec `invariants` must be a list of strings")
    unknown = [x for x in raw if x not in INVARIANT_REGISTRY]
    if unknown:
        raise RotationConfigError(f"unknown invariant ids: {', '.join(unknown)}")
    return tuple(raw)


def config_from_dict(obj: Mapping[str, Any]) -> RotationConfig:
    """Build a `RotationConfig` from a parsed kernel spec."""
    kernel_id = obj.get("kernel_id")
    if kernel_id != KERNEL_ID:
        raise RotationConfigError(f"unexpected kernel_id: {kernel_id!r}")

    defaults = _require_mapping(obj, "defaults")
    verify = defaults.get("verify_invariants", True)
    if not isinstance(verify, bool):
        raise TypeError("defaults.verify_invariants must be a bool")

    return RotationConfig(
        default_strategy=_parse_enum(Strategy, defaults.get("strategy"), "strategy"),
        negative_shift=_parse_enum(
            NegativeShiftPolicy, defaults.get("negative_shift", "normalize"), "negative_shift"
        ),
        verify_invariants=verify,
        strategies=_parse_strategies(_require_mapping(obj, "strategies")),
        invariants=_parse_invariants(obj.get("invariants", [])),
    )


def load_config(path: str | Path) -> RotationConfig:
    """Load and validate a kernel spec file."""
    path = Path(path)
    cfg = config_from_dict(_load_yaml_spec(path))
    logger.debug(
        "Loaded rotation kernel spec from %s (default=%s, negative_shift=%s)",
        path,
        cfg.default_strategy.value,
        cfg.negative_shift.value,
    )
    return cfg


@lru_cache(maxsize=1)
def default_config() -> RotationConfig:
    """The packaged kernel spec, parsed once per process."""
    return load_config(_spec_path())
