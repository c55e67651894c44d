"""
StableSwap AMM (two assets) in the functional core API.

This wraps the kernels in `stableswap/kernels/python/`:
- `stableswap_invariant_v1` (D and y Newton solvers),
- `stableswap_swap_v1` (exact-in swap with proportional fee),
- `pool_token_v1` (single-sided withdrawal).

Two calling styles are offered. `swap_to` and `compute_withdraw_one` return
`None` when the inputs overflow the working word or fall outside the domain
of the operation; the `*_or_raise` variants propagate the typed
`StableSwapError` instead. The solvers themselves (`compute_d`,
`compute_y`) have no absent-value path and always raise.

Every function accepts an optional `profile` (see `stableswap.core.profile`);
the default profile computes in u128.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..errors import StableSwapError
from ..kernels.python.pool_token_v1 import WithdrawOutcome
from ..kernels.python.pool_token_v1 import compute_withdraw_one as _kernel_compute_withdraw_one_v1
from ..kernels.python.stableswap_invariant_v1 import compute_d as _kernel_compute_d_v1
from ..kernels.python.stableswap_invariant_v1 import compute_y as _kernel_compute_y_v1
from ..kernels.python.stableswap_swap_v1 import SwapOutcome
from ..kernels.python.stableswap_swap_v1 import swap_to as _kernel_swap_to_v1
from .profile import SolverProfile, get_profile
from .types import Amp, FeeRatio, Reserves


logger = logging.getLogger(__name__)

AmpLike = Union[Amp, int]


def _resolve(profile: Optional[SolverProfile]) -> SolverProfile:
    return get_profile() if profile is None else profile


def compute_d(amp: AmpLike, amount_a: int, amount_b: int, *, profile: Optional[SolverProfile] = None) -> int:
    """
    Invariant D of reserves (amount_a, amount_b).

    Returns 0 for an empty pool. Raises StableSwapOverflowError when an
    intermediate does not fit the profile's word.
    """
    prof = _resolve(profile)
    amp = Amp.coerce(amp)
    prof.boundary.require("amount_a", amount_a)
    prof.boundary.require("amount_b", amount_b)
    d = _kernel_compute_d_v1(
        amp=amp.value,
        amount_a=amount_a,
        amount_b=amount_b,
        word=prof.word,
        max_iterations=prof.max_iterations,
    )
    return prof.boundary.check("compute_d", d)


def compute_y(amp: AmpLike, x: int, d: int, *, profile: Optional[SolverProfile] = None) -> int:
    """
    Reserve on the other side of the pool when one side is `x` and the invariant is `d`.

    Requires x > 0.
    """
    prof = _resolve(profile)
    amp = Amp.coerce(amp)
    prof.boundary.require("x", x)
    prof.boundary.require("d", d)
    y = _kernel_compute_y_v1(amp=amp.value, x=x, d=d, word=prof.word, max_iterations=prof.max_iterations)
    return prof.boundary.check("compute_y", y)


def swap_to_or_raise(
    amp: AmpLike,
    source_amount: int,
    swap_source_amount: int,
    swap_destination_amount: int,
    fee: FeeRatio,
    *,
    profile: Optional[SolverProfile] = None,
) -> SwapOutcome:
    """
    Exact-in swap of `source_amount` into a pool holding
    (swap_source_amount, swap_destination_amount).

    Post-swap reserves:
        new_source_amount = swap_source_amount + source_amount
        new_destination_amount = swap_destination_amount - amount_swapped  (fee stays in pool)

    Raises:
        StableSwapDomainError: invalid fee, empty reserve or zero output.
        StableSwapOverflowError: an intermediate left its word.
    """
    prof = _resolve(profile)
    amp = Amp.coerce(amp)
    return _kernel_swap_to_v1(
        amp=amp.value,
        source_amount=source_amount,
        swap_source_amount=swap_source_amount,
        swap_destination_amount=swap_destination_amount,
        fee_numerator=fee.numerator,
        fee_denominator=fee.denominator,
        word=prof.word,
        boundary=prof.boundary,
        max_iterations=prof.max_iterations,
    )


def swap_to(
    amp: AmpLike,
    source_amount: int,
    swap_source_amount: int,
    swap_destination_amount: int,
    fee: FeeRatio,
    *,
    profile: Optional[SolverProfile] = None,
) -> Optional[SwapOutcome]:
    """Like `swap_to_or_raise()` but returns None instead of raising a StableSwapError."""
    try:
        return swap_to_or_raise(
            amp,
            source_amount,
            swap_source_amount,
            swap_destination_amount,
            fee,
            profile=profile,
        )
    except StableSwapError as exc:
        logger.debug("swap_to rejected: %s", exc)
        return None


def swap_reserves(
    amp: AmpLike,
    reserves: Reserves,
    source_amount: int,
    fee: FeeRatio,
    *,
    a_to_b: bool = True,
    profile: Optional[SolverProfile] = None,
) -> Optional[SwapOutcome]:
    """
    `swap_to()` against a `Reserves` record.

    With `a_to_b` the input is asset a and the output asset b; otherwise the
    direction is reversed. The outcome is always expressed source-first.
    """
    side = reserves if a_to_b else reserves.swapped()
    return swap_to(amp, source_amount, side.amount_a, side.amount_b, fee, profile=profile)


def compute_withdraw_one_or_raise(
    amp: AmpLike,
    pool_token_amount: int,
    pool_token_supply: int,
    swap_base_amount: int,
    swap_quote_amount: int,
    fee: FeeRatio,
    *,
    profile: Optional[SolverProfile] = None,
) -> WithdrawOutcome:
    """
    Amount of the base asset received for burning `pool_token_amount` pool tokens,
    withdrawing the base side only.

    Inputs and outputs are u64. Returns `WithdrawOutcome(dy, dy_fee)`.
    """
    prof = _resolve(profile)
    amp = Amp.coerce(amp)
    return _kernel_compute_withdraw_one_v1(
        amp=amp.value,
        pool_token_amount=pool_token_amount,
        pool_token_supply=pool_token_supply,
        swap_base_amount=swap_base_amount,
        swap_quote_amount=swap_quote_amount,
        fee_numerator=fee.numerator,
        fee_denominator=fee.denominator,
        word=prof.word,
        boundary=prof.withdraw_boundary,
        max_iterations=prof.max_iterations,
    )


def compute_withdraw_one(
    amp: AmpLike,
    pool_token_amount: int,
    pool_token_supply: int,
    swap_base_amount: int,
    swap_quote_amount: int,
    fee: FeeRatio,
    *,
    profile: Optional[SolverProfile] = None,
) -> Optional[WithdrawOutcome]:
    """Like `compute_withdraw_one_or_raise()` but returns None instead of raising a StableSwapError."""
    try:
        return compute_withdraw_one_or_raise(
            amp,
            pool_token_amount,
            pool_token_supply,
            swap_base_amount,
            swap_quote_amount,
            fee,
            profile=profile,
        )
    except StableSwapError as exc:
        logger.debug("compute_withdraw_one rejected: %s", exc)
        return None
