"""
Nontrivial zeta zeros and the oscillatory terms built from them.

Under the Riemann Hypothesis every nontrivial zero is rho = 1/2 + i*gamma,
and the explicit formula for psi(x) carries the oscillation

    sum over gamma of x^rho / rho  ~  sqrt(x) * sum cos(gamma log x) / |rho|

The functions here evaluate truncated versions of that sum. They feed a
heuristic score only; nothing in this module proves primality.
"""

import numpy as np
from dataclasses import dataclass


# Imaginary parts of the first 50 nontrivial zeros, ascending.
ZETA_ZEROS = np.array([
    14.134725142, 21.022039639, 25.010857580, 30.424876126, 32.935061588,
    37.586178159, 40.918719012, 43.327073281, 48.005150881, 49.773832478,
    52.970321478, 56.446247697, 59.347044003, 60.831778525, 65.112544048,
    67.079810529, 69.546401711, 72.067157674, 75.704690699, 77.144840069,
    79.337375020, 82.910380854, 84.735492981, 87.425274613, 88.809111208,
    92.491899271, 94.651344041, 95.870634228, 98.831194218, 101.317851006,
    103.725538040, 105.446623052, 107.168611184, 111.029535543, 111.874659177,
    114.320220915, 116.226680321, 118.790782866, 121.370125002, 122.946829294,
    124.256818554, 127.516683880, 129.578704200, 131.087688531, 133.497737203,
    134.756509753, 138.116042055, 139.736208952, 141.123707404, 143.111845808,
])
ZETA_ZEROS.setflags(write=False)

# 1 / |rho| = 1 / sqrt(gamma^2 + 1/4)
_ZERO_MAGNITUDES = 1.0 / np.sqrt(ZETA_ZEROS ** 2 + 0.25)
_ZERO_MAGNITUDES.setflags(write=False)

# Lower zeros dominate for small x: weight 1 / (1 + i/10).
_SPECTRAL_WEIGHTS = 1.0 / (1.0 + 0.1 * np.arange(len(ZETA_ZEROS)))
_SPECTRAL_WEIGHTS.setflags(write=False)


def _count(num_zeros: int) -> int:
    if num_zeros < 1:
        raise ValueError(f"num_zeros must be >= 1, got {num_zeros}")
    return min(int(num_zeros), len(ZETA_ZEROS))


def oscillation(x, num_zeros: int):
    """
    sum_{k < num_zeros} cos(gamma_k log x) / |rho_k|, divided by sqrt(x).

    Accepts a scalar or an array of x > 0; returns the same shape.
    """
    k = _count(num_zeros)
    x = np.asarray(x, dtype=np.float64)
    phases = np.multiply.outer(np.log(x), ZETA_ZEROS[:k])
    total = np.cos(phases) @ _ZERO_MAGNITUDES[:k]
    result = total / np.sqrt(x)
    return float(result) if result.ndim == 0 else result


def psi_jump_estimate(n: float, num_zeros: int) -> float:
    """
    Jump of psi across n: the unit main term plus the oscillatory
    correction between n - 1/2 and n + 1/2.
    """
    return 1.0 + oscillation(n + 0.5, num_zeros) - oscillation(n - 0.5, num_zeros)


def phase_coherence(n: float, num_zeros: int) -> float:
    """Mean |cos(gamma log n)| over the first num_zeros zeros."""
    k = _count(num_zeros)
    phases = ZETA_ZEROS[:k] * np.log(n)
    return float(np.sum(np.abs(np.cos(phases))) / k)


def spectral_signature(n: float, num_zeros: int) -> float:
    """Weighted power cos^2(gamma log n) over the first num_zeros zeros."""
    k = _count(num_zeros)
    c = np.cos(ZETA_ZEROS[:k] * np.log(n))
    return float(np.sum(_SPECTRAL_WEIGHTS[:k] * c * c) / k)


@dataclass(frozen=True)
class SpectralScore:
    value: float
    num_zeros: int
    jump_ratio: float
    extremum: float
    coherence: float
    spectral_power: float


def prime_score(n: float, num_zeros: int, coherence_zeros: int = 20) -> SpectralScore:
    """
    Combined heuristic score for n:

        2 * |psi jump / log n| + extremum bonus
          + 1.5 * phase coherence + spectral power

    The extremum bonus is 1.5 when the oscillation at n is a strict local
    maximum or minimum against n - 1 and n + 1, else 0.5.
    """
    log_n = np.log(n)
    jump = psi_jump_estimate(n, num_zeros)
    jump_ratio = abs(jump / log_n) if log_n > 0 else 0.0

    osc_prev, osc_n, osc_next = oscillation(
        np.array([n - 1.0, n, n + 1.0]), num_zeros)
    is_extremum = ((osc_n > osc_prev and osc_n > osc_next)
                   or (osc_n < osc_prev and osc_n < osc_next))
    extremum = 1.5 if is_extremum else 0.5

    coherence = phase_coherence(n, min(num_zeros, coherence_zeros))
    power = spectral_signature(n, num_zeros)

    value = jump_ratio * 2.0 + extremum + coherence * 1.5 + power * 1.0
    return SpectralScore(
        value=float(value),
        num_zeros=int(num_zeros),
        jump_ratio=float(jump_ratio),
        extremum=extremum,
        coherence=coherence,
        spectral_power=power,
    )
