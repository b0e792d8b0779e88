"""
Sampled running count of primes.

Walks 2..limit, asks a primality test about every candidate, and keeps
(n, pi(n)) at a stride that widens with the bound. The last point is
always (limit, pi(limit)).
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .base import PrimalityTest
from .spectral import ZetaSpectral


@dataclass
class PrimeCountTrace:
    n_values: np.ndarray
    counts: np.ndarray
    limit: int
    stride: int
    algorithm: str

    @property
    def final_count(self) -> int:
        return int(self.counts[-1]) if len(self.counts) else 0

    def pairs(self) -> List[Tuple[int, int]]:
        return [(int(n), int(c)) for n, c in zip(self.n_values, self.counts)]

    def count_at(self, n: int) -> int:
        """pi(n) for a sampled n."""
        idx = np.flatnonzero(self.n_values == n)
        if not idx.size:
            raise KeyError(f"{n} was not sampled (stride {self.stride})")
        return int(self.counts[idx[0]])


def sample_stride(limit: int) -> int:
    if limit < 1000:
        return 1
    if limit < 10000:
        return 10
    return 100


def prime_count_samples(limit: int,
                        test: Optional[PrimalityTest] = None) -> PrimeCountTrace:
    """
    Running prime count up to limit, sampled every 1, 10 or 100 values
    for limits below 1000, below 10000, or larger.
    """
    if test is None:
        test = ZetaSpectral()
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    stride = sample_stride(limit)
    n_values = []
    counts = []
    count = 0
    for n in range(2, limit + 1):
        if test.is_prime(n):
            count += 1
        if n % stride == 0 or n == limit:
            n_values.append(n)
            counts.append(count)

    return PrimeCountTrace(
        n_values=np.array(n_values, dtype=np.int64),
        counts=np.array(counts, dtype=np.int64),
        limit=limit,
        stride=stride,
        algorithm=test.name(),
    )
