"""
Kernel profiles for the StableSwap core.

A profile fixes the word widths the kernels compute in and the Newton
iteration cap. Profiles are defined in `stableswap/kernels/dex/stableswap_v1.yaml`;
this module loads them once and hands out immutable `SolverProfile` values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from ..kernels.python.stableswap_invariant_v1 import N_COINS
from ..kernels.python.uint_v1 import Word


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverProfile:
    name: str
    word: Word
    boundary: Word
    withdraw_boundary: Word
    max_iterations: int

    def __post_init__(self) -> None:
        if not isinstance(self.max_iterations, int) or isinstance(self.max_iterations, bool):
            raise TypeError("max_iterations must be an int")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive: {self.max_iterations}")
        if self.word.bits < 128:
            raise ValueError(f"{self.name}: word_bits must be at least 128")
        if not (self.word.bits >= self.boundary.bits >= self.withdraw_boundary.bits):
            raise ValueError(f"{self.name}: need word_bits >= boundary_bits >= withdraw_bits")


def _model_path() -> Path:
    # stableswap/core/profile.py -> stableswap/ -> kernels/dex/stableswap_v1.yaml
    return Path(__file__).resolve().parents[1] / "kernels" / "dex" / "stableswap_v1.yaml"


def _require_positive_int(where: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"{where} must be a positive int, got {value!r}")
    return value


def _parse_profiles(obj: Mapping[str, Any]) -> Tuple[str, Dict[str, SolverProfile]]:
    n_coins = obj.get("n_coins")
    if n_coins != N_COINS:
        raise ValueError(f"kernel supports exactly {N_COINS} coins, profile file declares {n_coins!r}")
    max_iterations = _require_positive_int("max_iterations", obj.get("max_iterations"))

    raw_profiles = obj.get("profiles")
    if not isinstance(raw_profiles, Mapping) or not raw_profiles:
        raise ValueError("profiles must be a non-empty mapping")

    profiles: Dict[str, SolverProfile] = {}
    for name, raw in raw_profiles.items():
        if not isinstance(raw, Mapping):
            raise ValueError(f"profile {name!r} must be a mapping")
        profiles[str(name)] = SolverProfile(
            name=str(name),
            word=Word(_require_positive_int(f"{name}.word_bits", raw.get("word_bits"))),
            boundary=Word(_require_positive_int(f"{name}.boundary_bits", raw.get("boundary_bits"))),
            withdraw_boundary=Word(_require_positive_int(f"{name}.withdraw_bits", raw.get("withdraw_bits"))),
            max_iterations=_require_positive_int(
                f"{name}.max_iterations", raw.get("max_iterations", max_iterations)
            ),
        )

    default = obj.get("default_profile")
    if default not in profiles:
        raise ValueError(f"default_profile {default!r} is not a defined profile")
    return str(default), profiles


@lru_cache(maxsize=1)
def _load_profiles() -> Tuple[str, Mapping[str, SolverProfile]]:
    path = _model_path()
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping):
        raise TypeError("profile YAML must be a mapping")
    default, profiles = _parse_profiles(obj)
    logger.debug("loaded %d StableSwap profiles from %s (default %s)", len(profiles), path, default)
    return default, MappingProxyType(profiles)


def profile_names() -> Tuple[str, ...]:
    _default, profiles = _load_profiles()
    return tuple(sorted(profiles))


def get_profile(name: Optional[str] = None) -> SolverProfile:
    """Return the named profile, or the default one when `name` is None."""
    default, profiles = _load_profiles()
    key = default if name is None else name
    try:
        return profiles[key]
    except KeyError:
        raise KeyError(f"unknown StableSwap profile: {key!r} (known: {', '.join(sorted(profiles))})") from None
