"""
Pool-token kernel (v1 semantics).

- `token_rate`: proportional share of one reserve for a quantity of pool
  tokens, `floor(pool_tokens * reserve / supply)`.
- `compute_withdraw_one`: amount of the base asset received when burning pool
  tokens without touching the quote side, and the fee implied by the
  imbalance.

It is written as a small set of pure functions with explicit rounding rules
(floor everywhere, every subtraction checked non-negative).
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import StableSwapDomainError
from .stableswap_invariant_v1 import MAX_ITERATIONS, N_COINS, compute_d, compute_y
from .stableswap_swap_v1 import validate_fee
from .uint_v1 import U64, U128, Word


@dataclass(frozen=True)
class WithdrawOutcome:
    dy: int
    dy_fee: int


def token_rate(*, pool_tokens: int, reserve: int, supply: int, word: Word = U128) -> int:
    """
    Underlying tokens for `pool_tokens` pool tokens (floor rounding).
    """
    for name, v in (("pool_tokens", pool_tokens), ("reserve", reserve), ("supply", supply)):
        word.require(name, v)
    if supply == 0:
        raise StableSwapDomainError("supply must be positive")
    return word.mul_div(pool_tokens, reserve, supply)


def imbalance_fee_numerator(fee_numerator: int) -> int:
    """Per-coin fee applied to imbalanced liquidity: `fee * n / (4 * (n - 1))`."""
    return (fee_numerator * N_COINS) // (4 * (N_COINS - 1))


def compute_withdraw_one(
    *,
    amp: int,
    pool_token_amount: int,
    pool_token_supply: int,
    swap_base_amount: int,
    swap_quote_amount: int,
    fee_numerator: int,
    fee_denominator: int,
    word: Word = U128,
    boundary: Word = U64,
    max_iterations: int = MAX_ITERATIONS,
) -> WithdrawOutcome:
    """
    Single-sided withdrawal of the base asset.

    1. D0 from current reserves.
    2. D1 = D0 - pool_token_amount * D0 / supply.
    3. Solve the base reserve against the unchanged quote reserve at D1.
    4. Charge the imbalance fee on both sides' ideal deltas and solve again.

    Returns (dy, dy_fee): the amount received and the fee component relative to
    the fee-less amount.
    """
    for name, v in (
        ("pool_token_amount", pool_token_amount),
        ("pool_token_supply", pool_token_supply),
        ("swap_base_amount", swap_base_amount),
        ("swap_quote_amount", swap_quote_amount),
    ):
        boundary.require(name, v)
    validate_fee(fee_numerator=fee_numerator, fee_denominator=fee_denominator)
    boundary.require("fee_numerator", fee_numerator)
    boundary.require("fee_denominator", fee_denominator)

    if pool_token_supply == 0:
        raise StableSwapDomainError("pool_token_supply must be positive")
    if pool_token_amount > pool_token_supply:
        raise StableSwapDomainError("cannot burn more than pool_token_supply")

    solver = dict(amp=amp, word=word, max_iterations=max_iterations)

    d_0 = compute_d(amount_a=swap_base_amount, amount_b=swap_quote_amount, **solver)
    d_1 = word.sub(d_0, word.mul_div(pool_token_amount, d_0, pool_token_supply))
    new_y = compute_y(x=swap_quote_amount, d=d_1, **solver)

    fee = imbalance_fee_numerator(fee_numerator)
    expected_base_amount = word.sub(word.mul_div(swap_base_amount, d_1, d_0), new_y)
    expected_quote_amount = word.sub(swap_quote_amount, word.mul_div(swap_quote_amount, d_1, d_0))
    new_base_amount = word.sub(swap_base_amount, word.mul_div(expected_base_amount, fee, fee_denominator))
    new_quote_amount = word.sub(swap_quote_amount, word.mul_div(expected_quote_amount, fee, fee_denominator))

    dy = word.sub(new_base_amount, compute_y(x=new_quote_amount, d=d_1, **solver))
    dy_0 = word.sub(swap_base_amount, new_y)
    dy_fee = word.sub(dy_0, dy)

    return WithdrawOutcome(
        dy=boundary.check("compute_withdraw_one", dy),
        dy_fee=boundary.check("compute_withdraw_one", dy_fee),
    )
