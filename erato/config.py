"""
Algorithm configuration.

Collects the dials of the two non-trivial algorithms: the witness set of
the Miller-Rabin test and the thresholds, limits and zero tiers of the
zeta spectral heuristic. Both are validated on construction. Settings
that are legal but weaken a guarantee emit a warning instead of failing.
"""

import warnings
from dataclasses import dataclass, field, replace
from typing import Tuple


# Published minimal deterministic base set for every n < 2^64.
STANDARD_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

NUM_STORED_ZEROS = 50


class WitnessSetWarning(UserWarning):
    """A witness set other than STANDARD_WITNESSES is in use."""


class PrecisionWarning(UserWarning):
    """A candidate exceeds the range where float64 bounds are exact."""


@dataclass(frozen=True)
class WitnessConfig:
    witnesses: Tuple[int, ...] = STANDARD_WITNESSES

    def __post_init__(self):
        witnesses = tuple(self.witnesses)
        object.__setattr__(self, "witnesses", witnesses)
        if not witnesses:
            raise ValueError("witness set must not be empty")
        for a in witnesses:
            if isinstance(a, bool) or not isinstance(a, int) or a < 2:
                raise ValueError(f"witnesses must be integers >= 2, got {a!r}")

        if witnesses != STANDARD_WITNESSES:
            warnings.warn(
                f"Non-standard witness set {witnesses}: the Miller-Rabin test is "
                f"only proven deterministic below 2^64 with {STANDARD_WITNESSES}. "
                f"Results for composite inputs may be wrong.",
                WitnessSetWarning,
                stacklevel=3,
            )

    @property
    def is_standard(self) -> bool:
        return self.witnesses == STANDARD_WITNESSES

    @classmethod
    def standard(cls) -> "WitnessConfig":
        return cls()


@dataclass(frozen=True)
class SpectralConfig:
    high_threshold: float = 5.5
    low_threshold: float = 3.0
    quiet_threshold: float = 0.01
    first_divisor: int = 101
    high_quick_limit: int = 1000
    low_quick_limit: int = 5000
    probe_start: int = 1000
    probe_modulus: int = 100
    probe_zeros: int = 10
    skip_floor: int = 10
    skip_divisor: float = 50.0
    coherence_zeros: int = 20
    zero_tiers: Tuple[Tuple[int, int], ...] = field(
        default=((1000, 20), (10000, 30)))
    default_zeros: int = 40
    guided_skip: bool = True

    def __post_init__(self):
        if self.low_threshold >= self.high_threshold:
            raise ValueError(
                f"low_threshold ({self.low_threshold}) must be below "
                f"high_threshold ({self.high_threshold})"
            )
        if self.quiet_threshold < 0:
            raise ValueError(f"quiet_threshold must be >= 0, got {self.quiet_threshold}")
        if self.first_divisor < 3 or self.first_divisor % 2 == 0:
            raise ValueError(f"first_divisor must be odd and >= 3, got {self.first_divisor}")
        for name in ("high_quick_limit", "low_quick_limit", "probe_modulus",
                     "skip_floor"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.skip_divisor <= 0:
            raise ValueError(f"skip_divisor must be positive, got {self.skip_divisor}")

        tiers = tuple((int(bound), int(count)) for bound, count in self.zero_tiers)
        object.__setattr__(self, "zero_tiers", tiers)
        bounds = [bound for bound, _ in tiers]
        if bounds != sorted(bounds) or len(set(bounds)) != len(bounds):
            raise ValueError(f"zero_tiers bounds must be strictly ascending, got {bounds}")
        counts = [count for _, count in tiers] + [
            self.default_zeros, self.probe_zeros, self.coherence_zeros]
        for count in counts:
            if not 1 <= count <= NUM_STORED_ZEROS:
                raise ValueError(
                    f"zero counts must lie in [1, {NUM_STORED_ZEROS}], got {count}"
                )

    def zeros_for(self, n) -> int:
        """Number of zeta zeros used to score n."""
        for bound, count in self.zero_tiers:
            if n < bound:
                return count
        return self.default_zeros

    def skip_stride(self, sqrt_n: float) -> int:
        return max(int(sqrt_n / self.skip_divisor), self.skip_floor)

    @classmethod
    def default(cls) -> "SpectralConfig":
        return cls()

    @classmethod
    def verified(cls) -> "SpectralConfig":
        """Default constants with the oscillation-guided skip disabled."""
        return replace(cls(), guided_skip=False)
