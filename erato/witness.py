"""
Deterministic Miller-Rabin test.

With the twelve prime bases 2..37 the strong-pseudoprime test has no
counterexample below 3.18 * 10^23, which covers every 64-bit candidate.
Any other base set is accepted only through WitnessConfig, which warns.
"""

import logging
import warnings
from typing import Optional

from .base import PrimalityTest
from .config import WitnessConfig, WitnessSetWarning
from .modular import mul_mod, pow_mod, split_power_of_two
from .numeric import UnsignedDomain, U64


_logger = logging.getLogger(__name__)

# Bases 2..37 are proven sufficient below this bound.
DETERMINISTIC_LIMIT = 318_665_857_834_031_151_167_461


def passes_witness(a: int, d: int, r: int, n: int,
                   domain: UnsignedDomain = U64) -> bool:
    """
    Strong-probable-prime round for base a, where n - 1 = d * 2^r.

    Returns True if a fails to prove n composite.
    """
    x = pow_mod(a, d, n, domain)
    if x == 1 or x == n - 1:
        return True
    for _ in range(r - 1):
        x = mul_mod(x, x, n, domain)
        if x == n - 1:
            return True
    return False


class MillerRabin(PrimalityTest):
    """Deterministic Miller-Rabin over a fixed witness set."""

    def __init__(self, domain: UnsignedDomain = U64,
                 config: Optional[WitnessConfig] = None):
        super().__init__(domain)
        if config is None:
            config = WitnessConfig.standard()
        self.config = config
        if config.is_standard and domain.max_value >= DETERMINISTIC_LIMIT:
            warnings.warn(
                f"{domain.name} exceeds the range where the standard witness "
                f"set is deterministic; composites above "
                f"{DETERMINISTIC_LIMIT} may pass.",
                WitnessSetWarning,
                stacklevel=2,
            )

    @property
    def witnesses(self):
        return self.config.witnesses

    def name(self) -> str:
        return "Miller-Rabin"

    def _test(self, n: int) -> bool:
        if n <= 1:
            return False
        if n <= 3:
            return True
        if n % 2 == 0:
            return False

        d, r = split_power_of_two(n - 1)
        for a in self.config.witnesses:
            if a >= n:
                continue
            if not passes_witness(a, d, r, n, self._domain):
                _logger.debug("witness %d proves %d composite", a, n)
                return False
        return True


def is_prime_miller_rabin(n, rounds: int = 20,
                          domain: UnsignedDomain = U64) -> bool:
    """
    Deterministic Miller-Rabin with the standard witnesses.
    rounds is accepted for call compatibility and ignored.
    """
    return MillerRabin(domain).is_prime(n)

