"""Exception types for the StableSwap kernels.

Kernels raise these; the functional core in ``stableswap.core.stableswap_amm``
turns them into ``None`` for callers that prefer an absent value, and
propagates them from the ``*_or_raise`` variants.
"""

from __future__ import annotations


class StableSwapError(Exception):
    """Base class for every error raised by the StableSwap core."""


class StableSwapOverflowError(StableSwapError, ArithmeticError):
    """Raised when an intermediate leaves the non-negative range of the working word."""

    def __init__(self, operation: str, bits: int, value: int) -> None:
        self.operation = operation
        self.bits = bits
        self.value = value
        kind = "underflow" if value < 0 else "overflow"
        super().__init__(f"u{bits} {kind} in {operation}")


class StableSwapDomainError(StableSwapError, ValueError):
    """Raised when an argument is outside the domain of an operation."""
