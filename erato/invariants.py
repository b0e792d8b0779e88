"""
Invariant validators for a primality registry.

These are the guarantees every registered test must keep:

1. No false negatives: known primes, small through 10^11, are prime.
2. No false positives: Carmichael numbers and even numbers are composite.
3. Agreement: all tests return the same verdict on a shared sample.
4. Witness integrity: Miller-Rabin runs on the standard base set.

Checks 3 and 4 are hard failures and raise.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .config import STANDARD_WITNESSES
from .registry import PrimalityRegistry
from .witness import MillerRabin


_logger = logging.getLogger(__name__)

KNOWN_PRIMES = (2, 3, 5, 7, 97, 1009, 10007, 100003, 1000003,
                1_000_000_007, 10_000_000_019, 100_000_000_003)

KNOWN_COMPOSITES = (4, 100, 1_000_000_000, 1_000_000_007 * 3)

CARMICHAEL_NUMBERS = (561, 1105, 1729, 2465, 2821, 6601, 8911,
                      10585, 15841, 29341)

AGREEMENT_SAMPLE = (0, 1, 2, 3, 4, 5, 17, 100, 561, 1009, 10007,
                    100003, 1000003)


class DisagreementError(Exception):
    """Raised when registered tests return different verdicts."""

    def __init__(self, value: int, verdicts: Dict[str, bool]):
        self.value = value
        self.verdicts = verdicts
        listing = ", ".join(f"{k}={v}" for k, v in verdicts.items())
        super().__init__(f"Algorithms disagree on {value}: {listing}")


class WitnessSetError(Exception):
    """Raised when a Miller-Rabin test does not use the standard witness set."""


@dataclass
class InvariantResult:
    name: str
    passed: bool
    details: Dict[str, object]
    message: str


def _verdicts(registry: PrimalityRegistry, n: int) -> Dict[str, bool]:
    return {a.name(): a.is_prime(n) for a in registry.algorithms()}


def _in_range(registry: PrimalityRegistry, values: Iterable[int]) -> List[int]:
    return [v for v in values
            if all(a.domain.contains(v) for a in registry.algorithms())]


def _expect(registry: PrimalityRegistry, name: str, values: Iterable[int],
            expected: bool, label: str) -> InvariantResult:
    values = _in_range(registry, values)
    failures = []
    for n in values:
        for algo, verdict in _verdicts(registry, n).items():
            if verdict != expected:
                failures.append((algo, n))
    passed = not failures
    if not passed:
        _logger.error("%s failed: %s", name, failures)
    return InvariantResult(
        name=name,
        passed=passed,
        details={"checked": len(values), "failures": failures},
        message=(
            f"{len(values)} values reported {label} by {len(registry)} algorithms"
            if passed else
            f"{len(failures)} wrong verdicts, first: {failures[0][0]} on {failures[0][1]}"
        ),
    )


def check_known_primes(registry: PrimalityRegistry,
                       primes: Iterable[int] = KNOWN_PRIMES) -> InvariantResult:
    return _expect(registry, "Known Primes", primes, True, "prime")


def check_known_composites(registry: PrimalityRegistry,
                           values: Iterable[int] = KNOWN_COMPOSITES
                           ) -> InvariantResult:
    return _expect(registry, "Known Composites", values, False, "composite")


def check_carmichael_composites(registry: PrimalityRegistry,
                                values: Iterable[int] = CARMICHAEL_NUMBERS
                                ) -> InvariantResult:
    """Carmichael numbers fool Fermat tests; none may be reported prime."""
    return _expect(registry, "Carmichael Composites", values, False, "composite")


def check_even_composites(registry: PrimalityRegistry,
                          upper: int = 1000) -> InvariantResult:
    return _expect(registry, "Even Composites", range(4, upper + 1, 2),
                   False, "composite")


def check_boundary_values(registry: PrimalityRegistry) -> InvariantResult:
    """Verdicts on 0..4 and on the largest value of each domain must agree."""
    values = [0, 1, 2, 3, 4]
    values += sorted({a.domain.max_value for a in registry.algorithms()})
    values = _in_range(registry, values)
    split = {n: v for n, v in ((n, _verdicts(registry, n)) for n in values)
             if len(set(v.values())) > 1}
    passed = not split
    return InvariantResult(
        name="Boundary Values",
        passed=passed,
        details={"values": values, "split": split},
        message=(
            f"Agreement on {values}" if passed
            else f"Split verdicts on {sorted(split)}"
        ),
    )


def check_registry_names(registry: PrimalityRegistry) -> InvariantResult:
    """Every name is non-empty, distinct, and resolves to its own algorithm."""
    names = registry.names()
    resolvable = all(registry.get_by_name(n) is a
                     for n, a in zip(names, registry.algorithms()))
    passed = (all(names) and len(set(names)) == len(names) and resolvable)
    return InvariantResult(
        name="Registry Names",
        passed=passed,
        details={"names": list(names)},
        message=f"{len(names)} algorithms: {', '.join(names)}",
    )


def check_agreement(registry: PrimalityRegistry,
                    values: Iterable[int] = AGREEMENT_SAMPLE) -> InvariantResult:
    """
    Every algorithm must return the same verdict for every value.
    This is a HARD FAILURE: raises DisagreementError on the first split.
    """
    values = _in_range(registry, values)
    vector = []
    for n in values:
        verdicts = _verdicts(registry, n)
        if len(set(verdicts.values())) > 1:
            _logger.error("Agreement failed on %d: %s", n, verdicts)
            raise DisagreementError(n, verdicts)
        vector.append(next(iter(verdicts.values()), None))

    return InvariantResult(
        name="Cross-Algorithm Agreement",
        passed=True,
        details={"values": values, "verdicts": vector},
        message=f"{len(values)} values, {sum(bool(v) for v in vector)} prime",
    )


def check_witness_set(registry: PrimalityRegistry) -> InvariantResult:
    """
    Every registered Miller-Rabin test must use STANDARD_WITNESSES.
    Raises WitnessSetError otherwise.
    """
    tests = [a for a in registry.algorithms() if isinstance(a, MillerRabin)]
    for algo in tests:
        if tuple(algo.witnesses) != STANDARD_WITNESSES:
            raise WitnessSetError(
                f"{algo.name()} uses witnesses {tuple(algo.witnesses)}; "
                f"deterministic results need {STANDARD_WITNESSES}"
            )
    return InvariantResult(
        name="Witness Set",
        passed=True,
        details={"tests": len(tests), "witnesses": list(STANDARD_WITNESSES)},
        message=f"{len(tests)} Miller-Rabin tests on the standard 12-base set",
    )


def run_all_invariants(registry: Optional[PrimalityRegistry] = None) -> list:
    """
    Run all invariant checks. Returns list of InvariantResult.
    Raises DisagreementError or WitnessSetError on hard failures.
    """
    if registry is None:
        registry = PrimalityRegistry.with_all_algorithms()

    _logger.info("Running invariants over %s", list(registry.names()))
    results = []
    results.append(check_registry_names(registry))
    results.append(check_witness_set(registry))  # Raises on failure
    results.append(check_known_primes(registry))
    results.append(check_known_composites(registry))
    results.append(check_carmichael_composites(registry))
    results.append(check_even_composites(registry))
    results.append(check_boundary_values(registry))
    results.append(check_agreement(registry))  # Raises on failure
    _logger.info("Invariants: %d/%d passed",
                 sum(r.passed for r in results), len(results))
    return results
