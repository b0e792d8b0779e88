"""
Erato -- pluggable primality testing.

Trial division, deterministic Miller-Rabin and a zeta-zero spectral
heuristic behind one contract, collected in an ordered registry.
"""

__version__ = "1.0.0"

from .numeric import UnsignedDomain, U32, U64
from .config import SpectralConfig, WitnessConfig, STANDARD_WITNESSES
from .base import PrimalityTest
from .trial import TrialDivision, is_prime_trial
from .witness import MillerRabin, is_prime_miller_rabin
from .spectral import ZetaSpectral, is_prime_zeta
from .registry import PrimalityRegistry
from .sampling import PrimeCountTrace, prime_count_samples
from .invariants import run_all_invariants


def is_prime(n) -> bool:
    """Default entry point: the zeta spectral test on 64-bit candidates."""
    return is_prime_zeta(n)
