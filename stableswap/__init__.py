"""`stableswap`: integer-only numeric core of a two-asset StableSwap AMM.

- deterministic fixed-width arithmetic (u128 by default, u256 profile available),
- Newton solvers for the invariant D and the counter-reserve y,
- exact-in swaps with a proportional fee,
- pool-token rates and single-sided withdrawal.

Public API:
- `compute_d(amp, amount_a, amount_b) -> int`
- `compute_y(amp, x, d) -> int`
- `swap_to(amp, source_amount, swap_source_amount, swap_destination_amount, fee) -> SwapOutcome | None`
- `compute_withdraw_one(amp, p, supply, base, quote, fee) -> WithdrawOutcome | None`
- `PoolTokenConverter(supply, token_a, token_b).token_a_rate(p) -> int | None`
"""

from .core import (
    Amp,
    FeeRatio,
    PoolState,
    PoolTokenConverter,
    Reserves,
    SolverProfile,
    compute_d,
    compute_withdraw_one,
    compute_withdraw_one_or_raise,
    compute_y,
    get_profile,
    profile_names,
    swap_reserves,
    swap_to,
    swap_to_or_raise,
)
from .errors import StableSwapDomainError, StableSwapError, StableSwapOverflowError
from .kernels.python.pool_token_v1 import WithdrawOutcome
from .kernels.python.stableswap_swap_v1 import SwapOutcome

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
    "SwapOutcome",
    "WithdrawOutcome",
    "StableSwapError",
    "StableSwapOverflowError",
    "StableSwapDomainError",
]
