"""
Core StableSwap algorithms
"""

from .pool_tokens import PoolTokenConverter
from .profile import SolverProfile, get_profile, profile_names
from .stableswap_amm import (
    compute_d,
    compute_y,
    swap_to,
    swap_to_or_raise,
    swap_reserves,
    compute_withdraw_one,
    compute_withdraw_one_or_raise,
)
from .types import Amp, FeeRatio, PoolState, Reserves

__all__ = [
    "compute_d",
    "compute_y",
    "swap_to",
    "swap_to_or_raise",
    "swap_reserves",
    "compute_withdraw_one",
    "compute_withdraw_one_or_raise",
    "PoolTokenConverter",
    "SolverProfile",
    "get_profile",
    "profile_names",
    "Amp",
    "FeeRatio",
    "PoolState",
    "Reserves",
]
