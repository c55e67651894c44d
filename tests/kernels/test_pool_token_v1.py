# [TESTER] v1

from __future__ import annotations

import pytest

from stableswap.errors import StableSwapDomainError, StableSwapOverflowError
from stableswap.kernels.python.pool_token_v1 import (
    WithdrawOutcome,
    compute_withdraw_one,
    imbalance_fee_numerator,
    token_rate,
)
from stableswap.kernels.python.uint_v1 import U64, U128_MAX
from tests.stableswap_reference import StableSwapModel


@pytest.mark.parametrize(
    "reserve, pool_tokens, supply, expected",
    [
        (2, 5, 10, 1),
        (10, 5, 10, 5),
        (5, 5, 10, 2),
    ],
)
def test_token_rate_is_floor_of_share(reserve: int, pool_tokens: int, supply: int, expected: int) -> None:
    assert token_rate(pool_tokens=pool_tokens, reserve=reserve, supply=supply) == expected


def test_token_rate_overflow_and_zero_supply() -> None:
    with pytest.raises(StableSwapOverflowError):
        token_rate(pool_tokens=5, reserve=U128_MAX, supply=10)
    with pytest.raises(StableSwapDomainError, match="supply must be positive"):
        token_rate(pool_tokens=5, reserve=5, supply=0)


def test_imbalance_fee_is_half_the_swap_fee_for_two_coins() -> None:
    assert imbalance_fee_numerator(25) == 12
    assert imbalance_fee_numerator(1) == 0
    assert imbalance_fee_numerator(1000) == 500


def _withdraw(**overrides: int) -> WithdrawOutcome:
    args = dict(
        amp=1,
        pool_token_amount=20,
        pool_token_supply=200,
        swap_base_amount=100,
        swap_quote_amount=100,
        fee_numerator=0,
        fee_denominator=1,
    )
    args.update(overrides)
    return compute_withdraw_one(**args)


def test_withdraw_one_without_fee() -> None:
    # D0 = 200, D1 = 180, new_y = 80: the whole ideal amount is paid out.
    assert _withdraw() == WithdrawOutcome(dy=20, dy_fee=0)


def test_withdraw_one_with_fee() -> None:
    # fee' = 500/1000; both sides lose 5, y(95, 180) = 85 -> dy = 95 - 85.
    assert _withdraw(fee_numerator=1000, fee_denominator=1000) == WithdrawOutcome(dy=10, dy_fee=10)


def test_small_fee_rounds_to_fee_free_withdrawal() -> None:
    # e_base * fee' / den = 10 * 50 // 1000 == 0 on both sides.
    assert _withdraw(fee_numerator=100, fee_denominator=1000) == WithdrawOutcome(dy=20, dy_fee=0)


def test_withdraw_one_near_boundary() -> None:
    res = _withdraw(
        pool_token_amount=1,
        pool_token_supply=2,
        swap_base_amount=1,
        swap_quote_amount=1,
        fee_numerator=25,
        fee_denominator=10_000,
    )
    assert res.dy in (0, 1)
    assert res.dy_fee >= 0


@pytest.mark.parametrize("amp", [1, 10, 100])
def test_withdraw_one_matches_reference_model(amp: int) -> None:
    base, quote, supply = 1_000_000, 1_300_000, 2_200_000
    model = StableSwapModel(amp, [base, quote], fee_numerator=4, fee_denominator=1000, supply=supply)
    for burn in (1000, 10_000, 500_000):
        res = _withdraw(
            amp=amp,
            pool_token_amount=burn,
            pool_token_supply=supply,
            swap_base_amount=base,
            swap_quote_amount=quote,
            fee_numerator=4,
            fee_denominator=1000,
        )
        dy, dy_fee = model.calc_withdraw_one_coin(burn)
        assert abs(res.dy - dy) <= 1
        assert abs(res.dy_fee - dy_fee) <= 1


def test_withdraw_one_rejects_bad_supply() -> None:
    with pytest.raises(StableSwapDomainError, match="pool_token_supply must be positive"):
        _withdraw(pool_token_supply=0)
    with pytest.raises(StableSwapDomainError, match="cannot burn more"):
        _withdraw(pool_token_amount=201)


def test_withdraw_one_inputs_are_u64() -> None:
    with pytest.raises(StableSwapDomainError, match="swap_base_amount"):
        _withdraw(swap_base_amount=U64.max + 1)


def test_withdraw_everything_from_balanced_pool() -> None:
    res = _withdraw(pool_token_amount=200)
    assert res == WithdrawOutcome(dy=100, dy_fee=0)
