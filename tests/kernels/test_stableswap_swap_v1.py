# [TESTER] v1

from __future__ import annotations

import pytest

from stableswap.errors import StableSwapDomainError, StableSwapOverflowError
from stableswap.kernels.python.stableswap_swap_v1 import SwapOutcome, swap_to, validate_fee
from stableswap.kernels.python.uint_v1 import U128, U128_MAX, U256
from tests.stableswap_reference import StableSwapModel


def _swap(**overrides: object) -> SwapOutcome:
    args = dict(
        amp=1,
        source_amount=10,
        swap_source_amount=100,
        swap_destination_amount=100,
        fee_numerator=0,
        fee_denominator=1,
    )
    args.update(overrides)
    return swap_to(**args)


def test_small_swap_pins_rounding() -> None:
    # D = 200; y converges 200 -> 119 -> 93 -> 90 -> 90 for x = 110.
    res = _swap()
    assert res == SwapOutcome(new_source_amount=110, new_destination_amount=90, amount_swapped=10, fee=0)


def test_fee_stays_in_the_pool() -> None:
    res = _swap(fee_numerator=1, fee_denominator=10)
    assert res.fee == 1
    assert res.amount_swapped == 9
    assert res.gross_amount == 10
    # Only the net amount leaves the destination reserve.
    assert res.new_destination_amount == 91


@pytest.mark.parametrize("amp", [1, 10, 100, 1000, 10_000])
def test_swap_matches_reference_model(amp: int) -> None:
    source_amount = 10_000_000_000
    swap_source_amount = 50_000_000_000
    swap_destination_amount = 50_000_000_000
    res = swap_to(
        amp=amp,
        source_amount=source_amount,
        swap_source_amount=swap_source_amount,
        swap_destination_amount=swap_destination_amount,
        fee_numerator=25,
        fee_denominator=10_000,
    )
    model = StableSwapModel(
        amp,
        [swap_source_amount, swap_destination_amount],
        fee_numerator=25,
        fee_denominator=10_000,
    )
    expected_out, _expected_fee = model.exchange(source_amount)

    assert abs(res.amount_swapped - expected_out) <= 1
    assert res.new_source_amount == swap_source_amount + source_amount
    assert res.new_destination_amount == swap_destination_amount - res.amount_swapped
    assert res.amount_swapped < source_amount


def test_full_fee_swaps_nothing_out() -> None:
    res = _swap(fee_numerator=7, fee_denominator=7)
    assert res.amount_swapped == 0
    assert res.fee == res.gross_amount
    assert res.new_destination_amount == 100


@pytest.mark.parametrize(
    "fee_numerator, fee_denominator, match",
    [
        (0, 0, "fee_denominator must be positive"),
        (11, 10, "fee_numerator must be in"),
    ],
)
def test_invalid_fee_is_a_domain_error(fee_numerator: int, fee_denominator: int, match: str) -> None:
    with pytest.raises(StableSwapDomainError, match=match):
        validate_fee(fee_numerator=fee_numerator, fee_denominator=fee_denominator)
    with pytest.raises(StableSwapDomainError, match=match):
        _swap(fee_numerator=fee_numerator, fee_denominator=fee_denominator)


def test_fee_terms_must_fit_the_boundary_word() -> None:
    with pytest.raises(StableSwapDomainError, match="fee_denominator must be in"):
        _swap(fee_numerator=0, fee_denominator=2**200)
    with pytest.raises(StableSwapDomainError, match="fee_numerator must be in"):
        _swap(fee_numerator=U128_MAX + 1, fee_denominator=2**200)
    # The widest representable fee is still accepted.
    assert _swap(fee_numerator=0, fee_denominator=U128_MAX).fee == 0


def test_rejects_empty_reserves_and_zero_input() -> None:
    with pytest.raises(StableSwapDomainError, match="empty reserve"):
        _swap(swap_destination_amount=0)
    with pytest.raises(StableSwapDomainError, match="source_amount must be positive"):
        _swap(source_amount=0)


def test_input_wider_than_boundary_is_rejected() -> None:
    with pytest.raises(StableSwapDomainError, match="source_amount"):
        _swap(source_amount=U128_MAX + 1)


def test_max_input_overflows_u128() -> None:
    with pytest.raises(StableSwapOverflowError):
        _swap(source_amount=U128_MAX)


def test_max_input_overflows_boundary_with_wide_word() -> None:
    # The solver has room in 256 bits; the new source reserve does not fit u128.
    with pytest.raises(StableSwapOverflowError, match="u128 overflow in add"):
        _swap(source_amount=U128_MAX, word=U256, boundary=U128)
