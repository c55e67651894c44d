"""
StableSwap invariant solvers (v1 semantics, n = 2).

Invariant:
  A * sum(x_i) * n**n + D = A * D * n**n + D**(n+1) / (n**n * prod(x_i))

Both unknowns are found with integer Newton iterations:
- `solve_d` starts at D = x_a + x_b and iterates
    D' = (Ann*S + D_p*n) * D / ((Ann - 1)*D + (n + 1)*D_p)
  with D_p = D**3 / (n**n * x_a * x_b) evaluated as two successive floor divisions.
- `solve_y` holds D fixed and solves y**2 + (b - D)*y = c by
    y' = (y**2 + c) / (2*y + b - D)
  starting at y = D.

Rounding: every division is floor. A loop stops once two successive iterates
differ by at most 1. Hitting the iteration cap is not an error: the last
iterate is returned (and a warning is logged).

All arithmetic runs through a checked `Word`, so an intermediate that leaves
the word raises `StableSwapOverflowError` instead of silently widening.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...errors import StableSwapDomainError
from .uint_v1 import U128, Word, require_int


logger = logging.getLogger(__name__)

N_COINS = 2
MAX_ITERATIONS = 128


@dataclass(frozen=True)
class NewtonSolution:
    value: int
    iterations: int
    converged: bool


def _within_one(a: int, b: int) -> bool:
    return abs(a - b) <= 1


def _check_args(word: Word, max_iterations: int, **values: int) -> None:
    require_int("max_iterations", max_iterations)
    if max_iterations <= 0:
        raise ValueError("max_iterations must be positive")
    for name, v in values.items():
        word.require(name, v)
    if values["amp"] < 1:
        raise StableSwapDomainError("amp must be at least 1")


def solve_d(
    *,
    amp: int,
    amount_a: int,
    amount_b: int,
    word: Word = U128,
    max_iterations: int = MAX_ITERATIONS,
) -> NewtonSolution:
    """
    Newton solve for the invariant D of reserves (amount_a, amount_b).

    Both reserves zero gives D = 0. Exactly one zero reserve has no solution
    (the product term divides by it) and raises StableSwapDomainError.
    """
    _check_args(word, max_iterations, amp=amp, amount_a=amount_a, amount_b=amount_b)

    sum_x = word.add(amount_a, amount_b)
    if sum_x == 0:
        return NewtonSolution(value=0, iterations=0, converged=True)
    if amount_a == 0 or amount_b == 0:
        raise StableSwapDomainError("compute_d needs both reserves positive or both zero")

    leverage = word.mul(amp, N_COINS)  # A * n
    prod_a = word.mul(amount_a, N_COINS)
    prod_b = word.mul(amount_b, N_COINS)

    d = sum_x
    for i in range(max_iterations):
        d_p = word.mul_div(d, d, prod_a)
        d_p = word.mul_div(d_p, d, prod_b)
        d_prev = d
        numerator = word.mul(word.add(word.mul(leverage, sum_x), word.mul(d_p, N_COINS)), d)
        denominator = word.add(word.mul(leverage - 1, d), word.mul(N_COINS + 1, d_p))
        d = word.div(numerator, denominator)
        if _within_one(d, d_prev):
            return NewtonSolution(value=d, iterations=i + 1, converged=True)

    logger.warning(
        "compute_d did not converge after %d iterations (amp=%d, amount_a=%d, amount_b=%d); returning D=%d",
        max_iterations,
        amp,
        amount_a,
        amount_b,
        d,
    )
    return NewtonSolution(value=d, iterations=max_iterations, converged=False)


def solve_y(
    *,
    amp: int,
    x: int,
    d: int,
    word: Word = U128,
    max_iterations: int = MAX_ITERATIONS,
) -> NewtonSolution:
    """
    Newton solve for the reserve y on the other side when one side is x and the invariant is d.
    """
    _check_args(word, max_iterations, amp=amp, x=x, d=d)
    if x == 0:
        raise StableSwapDomainError("compute_y needs x > 0")

    leverage = word.mul(amp, N_COINS)

    # sum' = prod' = x
    # c = D**(n+1) / (n**(2n) * prod' * A), written with Ann = A*n as D**3 / (x * n * n * Ann)
    c = word.div(
        word.mul(word.mul(d, d), d),
        word.mul(word.mul(word.mul(x, N_COINS), N_COINS), leverage),
    )
    # b = sum' + D / Ann; D itself is subtracted in the denominator below
    b = word.add(x, word.div(d, leverage))

    y = d
    for i in range(max_iterations):
        y_prev = y
        numerator = word.add(word.mul(y, y), c)
        denominator = word.sub(word.add(word.mul(2, y), b), d)
        y = word.div(numerator, denominator)
        if _within_one(y, y_prev):
            return NewtonSolution(value=y, iterations=i + 1, converged=True)

    logger.warning(
        "compute_y did not converge after %d iterations (amp=%d, x=%d, d=%d); returning y=%d",
        max_iterations,
        amp,
        x,
        d,
        y,
    )
    return NewtonSolution(value=y, iterations=max_iterations, converged=False)


def compute_d(
    *,
    amp: int,
    amount_a: int,
    amount_b: int,
    word: Word = U128,
    max_iterations: int = MAX_ITERATIONS,
) -> int:
    return solve_d(amp=amp, amount_a=amount_a, amount_b=amount_b, word=word, max_iterations=max_iterations).value


def compute_y(
    *,
    amp: int,
    x: int,
    d: int,
    word: Word = U128,
    max_iterations: int = MAX_ITERATIONS,
) -> int:
    return solve_y(amp=amp, x=x, d=d, word=word, max_iterations=max_iterations).value
