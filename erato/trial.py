"""
Trial division by odd divisors up to the square root.

Divisors are tested in vectorised blocks: each block is an arithmetic
progression of candidates reduced against n in one numpy operation.
"""

import numpy as np
from typing import Optional, Tuple

from .base import PrimalityTest
from .numeric import UnsignedDomain, U64


DEFAULT_BLOCK_SIZE = 65_536


def scan_divisors(n: int, start: int, limit: int,
                  domain: UnsignedDomain = U64,
                  block_size: int = DEFAULT_BLOCK_SIZE,
                  step: int = 2) -> Tuple[Optional[int], int]:
    """
    Test d = start, start+step, ... while d <= limit.

    Returns (divisor, next_d): divisor is the first d that divides n, or
    None; next_d is the first untested candidate of the progression.
    """
    if block_size < 1:
        raise ValueError(f"block_size must be >= 1, got {block_size}")
    d = start
    n_s = domain.scalar(n)
    while d <= limit:
        stop = min(limit + 1, d + step * block_size)
        block = domain.divisor_block(d, stop, step)
        hits = np.flatnonzero(n_s % block == 0)
        if hits.size:
            return int(block[hits[0]]), int(block[hits[0]]) + step
        d += step * len(block)
    return None, d


class TrialDivision(PrimalityTest):
    """
    Exhaustive odd-divisor search. Deterministic over the whole domain,
    O(sqrt(n)) divisions.
    """

    float_bounds = True

    def __init__(self, domain: UnsignedDomain = U64,
                 block_size: int = DEFAULT_BLOCK_SIZE):
        super().__init__(domain)
        if block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {block_size}")
        self.block_size = block_size

    def name(self) -> str:
        return "Trial Division"

    def _test(self, n: int) -> bool:
        if n <= 1:
            return False
        if n == 2:
            return True
        if n % 2 == 0:
            return False
        limit = self._domain.isqrt_bound(n)
        divisor, _ = scan_divisors(n, 3, limit, self._domain, self.block_size)
        # limit < n for every odd n >= 5, so n never divides itself here.
        return divisor is None


def is_prime_trial(n, domain: UnsignedDomain = U64) -> bool:
    """Trial division with default settings."""
    return TrialDivision(domain).is_prime(n)
