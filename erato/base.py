"""
Shared contract for primality tests.

Every algorithm answers is_prime(n) for candidates of one UnsignedDomain
and carries a stable, human-readable name used for registry lookup.
A conforming test never reports a prime as composite.
"""

import warnings
from abc import ABC, abstractmethod

from .config import PrecisionWarning
from .numeric import UnsignedDomain, U64, FLOAT_EXACT_LIMIT


class PrimalityTest(ABC):
    """
    Base class for primality tests.

    Subclasses implement name() and _test(n); is_prime() validates the
    candidate against the domain before delegating. Set float_bounds to
    True when the test derives loop bounds from float square roots.
    """

    float_bounds = False

    def __init__(self, domain: UnsignedDomain = U64):
        self._domain = domain

    @property
    def domain(self) -> UnsignedDomain:
        return self._domain

    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def _test(self, n: int) -> bool:
        ...

    def is_prime(self, n) -> bool:
        value = self._domain.coerce(n)
        if self.float_bounds and value > FLOAT_EXACT_LIMIT:
            warnings.warn(
                f"{self.name()}: {value} exceeds 2^53; square-root and "
                f"logarithm estimates are rounded at this magnitude.",
                PrecisionWarning,
                stacklevel=2,
            )
        return bool(self._test(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domain={self._domain.name})"
