"""
StableSwap swap kernel (v1 semantics).

Exact-in swap against a two-asset StableSwap pool:
- D is computed from the pre-trade reserves.
- y (the post-trade destination reserve) is solved with the source reserve
  raised by the input amount and D held fixed.
- The gross output `x_dst - y` is charged a proportional fee with floor
  rounding; the caller receives `gross - fee`.
- The fee is not removed from the pool: `new_destination_amount` only drops
  by the net amount.

The Newton solvers run in the intermediate `word`; reserves, input and the
assembled outcome are checked against the `boundary` word.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import StableSwapDomainError
from .stableswap_invariant_v1 import MAX_ITERATIONS, compute_d, compute_y
from .uint_v1 import U128, Word, require_int


@dataclass(frozen=True)
class SwapOutcome:
    new_source_amount: int
    new_destination_amount: int
    amount_swapped: int
    fee: int

    @property
    def gross_amount(self) -> int:
        return self.amount_swapped + self.fee


def validate_fee(*, fee_numerator: int, fee_denominator: int) -> None:
    require_int("fee_numerator", fee_numerator)
    require_int("fee_denominator", fee_denominator)
    if fee_denominator <= 0:
        raise StableSwapDomainError("fee_denominator must be positive")
    if not (0 <= fee_numerator <= fee_denominator):
        raise StableSwapDomainError(f"fee_numerator must be in [0, {fee_denominator}]: {fee_numerator}")


def swap_to(
    *,
    amp: int,
    source_amount: int,
    swap_source_amount: int,
    swap_destination_amount: int,
    fee_numerator: int,
    fee_denominator: int,
    word: Word = U128,
    boundary: Word = U128,
    max_iterations: int = MAX_ITERATIONS,
) -> SwapOutcome:
    """
    Exact-in swap quote + post-state.

    Raises StableSwapDomainError on invalid inputs or when the trade produces no
    output, StableSwapOverflowError when an intermediate leaves its word.
    """
    for name, v in (
        ("source_amount", source_amount),
        ("swap_source_amount", swap_source_amount),
        ("swap_destination_amount", swap_destination_amount),
    ):
        boundary.require(name, v)
    validate_fee(fee_numerator=fee_numerator, fee_denominator=fee_denominator)
    boundary.require("fee_numerator", fee_numerator)
    boundary.require("fee_denominator", fee_denominator)

    if source_amount == 0:
        raise StableSwapDomainError("source_amount must be positive")
    if swap_source_amount == 0 or swap_destination_amount == 0:
        raise StableSwapDomainError("cannot swap against an empty reserve")

    d = compute_d(
        amp=amp,
        amount_a=swap_source_amount,
        amount_b=swap_destination_amount,
        word=word,
        max_iterations=max_iterations,
    )
    x = word.add(swap_source_amount, source_amount)
    y = compute_y(amp=amp, x=x, d=d, word=word, max_iterations=max_iterations)

    gross = boundary.sub(swap_destination_amount, y)
    if gross == 0:
        raise StableSwapDomainError("amount_swapped is zero (trade too small)")

    fee = boundary.mul_div(gross, fee_numerator, fee_denominator)
    amount_swapped = gross - fee

    new_destination_amount = boundary.sub(swap_destination_amount, amount_swapped)
    new_source_amount = boundary.add(swap_source_amount, source_amount)

    return SwapOutcome(
        new_source_amount=new_source_amount,
        new_destination_amount=new_destination_amount,
        amount_swapped=amount_swapped,
        fee=fee,
    )
