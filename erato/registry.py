"""
Ordered collection of primality tests.

Populate once, then read. Names are unique by convention only: lookup
returns the first match in insertion order.
"""

from typing import Iterator, Optional, Tuple

from .base import PrimalityTest
from .numeric import UnsignedDomain, U64
from .spectral import ZetaSpectral
from .trial import TrialDivision
from .witness import MillerRabin


class PrimalityRegistry:
    """
    Usage:
        registry = PrimalityRegistry.with_all_algorithms()
        for algo in registry.algorithms():
            print(algo.name(), algo.is_prime(97))
    """

    def __init__(self):
        self._algorithms = []

    @classmethod
    def new(cls) -> "PrimalityRegistry":
        return cls()

    @classmethod
    def with_all_algorithms(cls, domain: UnsignedDomain = U64) -> "PrimalityRegistry":
        """Trial division, Miller-Rabin and the zeta spectral test, in that order."""
        registry = cls()
        registry.register(TrialDivision(domain))
        registry.register(MillerRabin(domain))
        registry.register(ZetaSpectral(domain))
        return registry

    def register(self, algorithm: PrimalityTest) -> None:
        self._algorithms.append(algorithm)

    def algorithms(self) -> Tuple[PrimalityTest, ...]:
        return tuple(self._algorithms)

    def get_by_name(self, name: str) -> Optional[PrimalityTest]:
        for algorithm in self._algorithms:
            if algorithm.name() == name:
                return algorithm
        return None

    def names(self) -> Tuple[str, ...]:
        return tuple(a.name() for a in self._algorithms)

    def __iter__(self) -> Iterator[PrimalityTest]:
        return iter(tuple(self._algorithms))

    def __len__(self) -> int:
        return len(self._algorithms)

    def __repr__(self) -> str:
        return f"PrimalityRegistry({list(self.names())})"
