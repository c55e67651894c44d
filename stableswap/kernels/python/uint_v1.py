"""
Checked fixed-width unsigned arithmetic.

Python ints never overflow, so the word width of the kernels is enforced here:
every operation checks that its result lies in [0, 2**bits - 1] and raises
`StableSwapOverflowError` otherwise. Division is floor division and rejects a
zero divisor with `StableSwapDomainError`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import StableSwapDomainError, StableSwapOverflowError


U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1
U256_MAX = (1 << 256) - 1


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class Word:
    """An unsigned machine word of `bits` bits."""

    bits: int

    def __post_init__(self) -> None:
        require_int("bits", self.bits)
        if self.bits <= 0 or self.bits % 8 != 0:
            raise ValueError(f"bits must be a positive multiple of 8: {self.bits}")

    @property
    def max(self) -> int:
        return (1 << self.bits) - 1

    def fits(self, value: int) -> bool:
        return 0 <= value <= self.max

    def check(self, operation: str, value: int) -> int:
        if not self.fits(value):
            raise StableSwapOverflowError(operation, self.bits, value)
        return value

    def require(self, name: str, value: int) -> int:
        """Boundary check for caller-supplied values: a too-wide input is a domain error."""
        require_int(name, value)
        if not self.fits(value):
            raise StableSwapDomainError(f"{name} must be in [0, 2**{self.bits} - 1]: {value}")
        return value

    def add(self, a: int, b: int) -> int:
        return self.check("add", a + b)

    def sub(self, a: int, b: int) -> int:
        return self.check("sub", a - b)

    def mul(self, a: int, b: int) -> int:
        return self.check("mul", a * b)

    def div(self, a: int, b: int) -> int:
        if b == 0:
            raise StableSwapDomainError("division by zero")
        return self.check("div", a // b)

    def mul_div(self, a: int, b: int, d: int) -> int:
        """floor(a * b / d) where the product must itself fit the word."""
        return self.div(self.mul(a, b), d)


U64 = Word(64)
U128 = Word(128)
U256 = Word(256)
