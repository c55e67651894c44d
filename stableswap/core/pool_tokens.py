"""
Pool token <-> underlying conversions.

A converter is built from the LP supply and both reserves and answers how much
of each reserve a quantity of pool tokens is worth:
    token_a_rate(p) = floor(p * token_a / supply)
Rates are absent (None) when supply is zero or the product overflows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import StableSwapError
from ..kernels.python.pool_token_v1 import token_rate as _kernel_token_rate_v1
from .profile import SolverProfile, get_profile
from .types import PoolState


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoolTokenConverter:
    supply: int
    token_a: int
    token_b: int

    @classmethod
    def from_pool_state(cls, pool: PoolState) -> "PoolTokenConverter":
        return cls(supply=pool.supply, token_a=pool.amount_a, token_b=pool.amount_b)

    def _rate(self, side: str, reserve: int, pool_tokens: int, profile: Optional[SolverProfile]) -> Optional[int]:
        prof = get_profile() if profile is None else profile
        try:
            return _kernel_token_rate_v1(
                pool_tokens=pool_tokens,
                reserve=reserve,
                supply=self.supply,
                word=prof.boundary,
            )
        except StableSwapError as exc:
            logger.debug("token_%s_rate rejected: %s", side, exc)
            return None

    def token_a_rate(self, pool_tokens: int, *, profile: Optional[SolverProfile] = None) -> Optional[int]:
        """A tokens for `pool_tokens` pool tokens."""
        return self._rate("a", self.token_a, pool_tokens, profile)

    def token_b_rate(self, pool_tokens: int, *, profile: Optional[SolverProfile] = None) -> Optional[int]:
        """B tokens for `pool_tokens` pool tokens."""
        return self._rate("b", self.token_b, pool_tokens, profile)

    def token_rates(
        self, pool_tokens: int, *, profile: Optional[SolverProfile] = None
    ) -> Optional[Tuple[int, int]]:
        a = self.token_a_rate(pool_tokens, profile=profile)
        b = self.token_b_rate(pool_tokens, profile=profile)
        if a is None or b is None:
            return None
        return a, b
