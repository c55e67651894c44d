"""Value records for the StableSwap core.

All types are frozen dataclasses created by the caller per operation.
Amounts are plain non-negative ints; widths are enforced by the kernels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..errors import StableSwapDomainError
from ..kernels.python.uint_v1 import U64_MAX, require_int


BPS_DENOM = 10_000


@dataclass(frozen=True)
class Amp:
    """Amplification coefficient A, a u64 that must be at least 1."""

    value: int

    def __post_init__(self) -> None:
        require_int("amp", self.value)
        if not (1 <= self.value <= U64_MAX):
            raise StableSwapDomainError(f"amp must be in [1, 2**64 - 1]: {self.value}")

    @classmethod
    def coerce(cls, amp: Union["Amp", int]) -> "Amp":
        return amp if isinstance(amp, Amp) else cls(amp)


@dataclass(frozen=True)
class FeeRatio:
    """
    Proportional fee `numerator / denominator`.

    Only types and signs are checked here; a zero denominator or a numerator
    above the denominator is rejected by the operation that applies the fee.
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        for name, v in (("numerator", self.numerator), ("denominator", self.denominator)):
            require_int(name, v)
            if v < 0:
                raise StableSwapDomainError(f"fee {name} must be non-negative: {v}")

    @classmethod
    def from_bps(cls, fee_bps: int) -> "FeeRatio":
        return cls(numerator=fee_bps, denominator=BPS_DENOM)

    @classmethod
    def zero(cls) -> "FeeRatio":
        return cls(numerator=0, denominator=1)


@dataclass(frozen=True)
class Reserves:
    amount_a: int
    amount_b: int

    def __post_init__(self) -> None:
        for name, v in (("amount_a", self.amount_a), ("amount_b", self.amount_b)):
            require_int(name, v)
            if v < 0:
                raise StableSwapDomainError(f"{name} must be non-negative: {v}")

    def swapped(self) -> "Reserves":
        """Same pool seen from the other side (b becomes the source)."""
        return Reserves(amount_a=self.amount_b, amount_b=self.amount_a)


@dataclass(frozen=True)
class PoolState:
    """LP token supply alongside the pool reserves."""

    supply: int
    amount_a: int
    amount_b: int

    def __post_init__(self) -> None:
        for name, v in (("supply", self.supply), ("amount_a", self.amount_a), ("amount_b", self.amount_b)):
            require_int(name, v)
            if v < 0:
                raise StableSwapDomainError(f"{name} must be non-negative: {v}")

    @property
    def reserves(self) -> Reserves:
        return Reserves(amount_a=self.amount_a, amount_b=self.amount_b)
