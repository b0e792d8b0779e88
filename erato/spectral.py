"""
Zeta spectral primality test.

Scores a candidate by the oscillatory signature of the first 20-40 zeta
zeros, then uses the score to choose how trial division is ordered:

    score > high_threshold   quick pass to 1000, then on to sqrt(n)
    score < low_threshold    quick pass to 5000, then on to sqrt(n)
    otherwise                single pass to sqrt(n) with oscillation-guided
                             skips

The high and low paths always finish at the full square-root bound. The
guided skip in the middle path advances the divisor by
max(10, sqrt(n)/50) when the local oscillation is quiet, and can step
over a factor. It is reproduced as-is; SpectralConfig.verified() turns
it off.
"""

import logging
import numpy as np
from typing import Optional

from .base import PrimalityTest
from .config import SpectralConfig
from .numeric import UnsignedDomain, U64
from .trial import scan_divisors, DEFAULT_BLOCK_SIZE
from .zeros import SpectralScore, oscillation, prime_score


_logger = logging.getLogger(__name__)

# The 25 primes below 100.
SMALL_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
)

SCREEN, HIGH, LOW, MEDIUM = "screen", "high", "low", "medium"


class ZetaSpectral(PrimalityTest):
    """Zeta-zero scoring that orders, never replaces, trial division."""

    float_bounds = True

    def __init__(self, domain: UnsignedDomain = U64,
                 config: Optional[SpectralConfig] = None,
                 block_size: int = DEFAULT_BLOCK_SIZE):
        super().__init__(domain)
        if config is None:
            config = SpectralConfig.default()
        if block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {block_size}")
        self.config = config
        self.block_size = block_size

    def name(self) -> str:
        return "Riemann Zeta"

    # --- inspection ---

    def score(self, n) -> SpectralScore:
        """Heuristic score of n; needs n >= 2."""
        value = self._domain.coerce(n)
        if value < 2:
            raise ValueError(f"score needs n >= 2, got {value}")
        return prime_score(self._domain.to_float(value),
                           self.config.zeros_for(value),
                           self.config.coherence_zeros)

    def branch(self, n) -> str:
        """Which path is_prime(n) takes: screen, high, low or medium."""
        value = self._domain.coerce(n)
        if self._screen(value) is not None:
            return SCREEN
        return self._classify(self.score(value).value)

    # --- query ---

    def _test(self, n: int) -> bool:
        verdict = self._screen(n)
        if verdict is not None:
            return verdict

        result = self.score(n)
        path = self._classify(result.value)
        _logger.debug("n=%d score=%.4f zeros=%d path=%s",
                      n, result.value, result.num_zeros, path)

        sqrt_n = np.sqrt(self._domain.to_float(n))
        if path == HIGH:
            return self._two_pass(n, min(int(sqrt_n), self.config.high_quick_limit))
        if path == LOW:
            return self._two_pass(n, min(int(sqrt_n), self.config.low_quick_limit))
        return self._guided_pass(n, sqrt_n)

    def _screen(self, n: int) -> Optional[bool]:
        """Verdict for trivial, small and small-factor candidates, else None."""
        if n <= 1:
            return False
        if n == 2:
            return True
        if n % 2 == 0:
            return False
        if n == 3:
            return True
        if n < 100:
            divisor, _ = scan_divisors(n, 3, self._domain.isqrt_bound(n),
                                       self._domain, self.block_size)
            return divisor is None
        for p in SMALL_PRIMES:
            if n == p:
                return True
            if n % p == 0:
                return False
        return None

    def _classify(self, value: float) -> str:
        if value > self.config.high_threshold:
            return HIGH
        if value < self.config.low_threshold:
            return LOW
        return MEDIUM

    def _two_pass(self, n: int, quick_limit: int) -> bool:
        divisor, d = scan_divisors(n, self.config.first_divisor, quick_limit,
                                   self._domain, self.block_size)
        if divisor is not None:
            return False
        divisor, _ = scan_divisors(n, d, self._domain.isqrt_bound(n),
                                   self._domain, self.block_size)
        return divisor is None

    def _guided_pass(self, n: int, sqrt_n: float) -> bool:
        cfg = self.config
        limit = int(sqrt_n) + 1
        stride = cfg.skip_stride(sqrt_n)
        n_s = self._domain.scalar(n)
        d = cfg.first_divisor

        while d <= limit:
            stop = min(limit + 1, d + 2 * self.block_size)
            block = self._domain.divisor_block(d, stop, 2)
            hits = np.flatnonzero(n_s % block == 0)
            first_hit = int(hits[0]) if hits.size else None

            skip_at = None
            if cfg.guided_skip:
                skip_at = self._first_quiet_probe(block, first_hit)
            if skip_at is not None:
                probe = int(block[skip_at])
                _logger.warning(
                    "guided skip on n=%d: divisors %d..%d not tested",
                    n, probe + 1, probe + stride - 1)
                d = probe + stride
                continue
            if first_hit is not None:
                return False
            d += 2 * len(block)
        return True

    def _first_quiet_probe(self, block: np.ndarray,
                           first_hit: Optional[int]) -> Optional[int]:
        """
        Index of the first divisor in block where the short oscillation
        check fires, considering only divisors tested before first_hit.
        """
        cfg = self.config
        probes = np.flatnonzero((block > cfg.probe_start)
                                & (block % cfg.probe_modulus == 0))
        if first_hit is not None:
            probes = probes[probes < first_hit]
        if not probes.size:
            return None
        local = oscillation(block[probes].astype(np.float64), cfg.probe_zeros)
        quiet = np.flatnonzero(np.abs(local) < cfg.quiet_threshold)
        if not quiet.size:
            return None
        return int(probes[quiet[0]])


def is_prime_zeta(n, domain: UnsignedDomain = U64) -> bool:
    """Zeta spectral test with the default configuration."""
    return ZetaSpectral(domain).is_prime(n)
