import pytest

from erato import PrimalityRegistry, PrimalityTest, MillerRabin, TrialDivision, U32
from erato.config import WitnessConfig, WitnessSetWarning
from erato.invariants import (
    DisagreementError, WitnessSetError, InvariantResult,
    check_agreement, check_boundary_values, check_carmichael_composites,
    check_even_composites, check_known_composites, check_known_primes,
    check_registry_names, check_witness_set, run_all_invariants,
)


class AlwaysPrime(PrimalityTest):
    def name(self):
        return "Always Prime"

    def _test(self, n):
        return True


class NeverPrime(PrimalityTest):
    def name(self):
        return "Never Prime"

    def _test(self, n):
        return False


def test_all_invariants_hold(registry):
    results = run_all_invariants(registry)
    assert all(isinstance(r, InvariantResult) for r in results)
    assert all(r.passed for r in results), [r.message for r in results if not r.passed]
    assert {r.name for r in results} >= {
        "Known Primes", "Carmichael Composites", "Cross-Algorithm Agreement",
        "Witness Set", "Registry Names",
    }


def test_default_registry_is_built():
    results = run_all_invariants()
    assert all(r.passed for r in results)


def test_u32_registry_skips_wide_values():
    registry = PrimalityRegistry.with_all_algorithms(U32)
    result = check_known_primes(registry)
    assert result.passed
    assert result.details["checked"] == 10


def test_false_negative_is_reported():
    registry = PrimalityRegistry()
    registry.register(NeverPrime())
    result = check_known_primes(registry)
    assert not result.passed
    assert ("Never Prime", 2) in result.details["failures"]


def test_false_positive_is_reported():
    registry = PrimalityRegistry()
    registry.register(AlwaysPrime())
    assert not check_carmichael_composites(registry).passed
    assert not check_even_composites(registry, upper=10).passed
    assert not check_known_composites(registry).passed


def test_disagreement_raises():
    registry = PrimalityRegistry()
    registry.register(TrialDivision())
    registry.register(AlwaysPrime())
    with pytest.raises(DisagreementError) as info:
        check_agreement(registry)
    assert info.value.value == 0
    assert info.value.verdicts == {"Trial Division": False, "Always Prime": True}


def test_boundary_split_is_reported():
    registry = PrimalityRegistry()
    registry.register(TrialDivision())
    registry.register(AlwaysPrime())
    result = check_boundary_values(registry)
    assert not result.passed
    assert 0 in result.details["split"]


def test_non_standard_witness_set_raises():
    with pytest.warns(WitnessSetWarning):
        config = WitnessConfig((2, 3, 5, 7))
    registry = PrimalityRegistry()
    registry.register(MillerRabin(config=config))
    with pytest.raises(WitnessSetError):
        check_witness_set(registry)


def test_duplicate_names_fail():
    registry = PrimalityRegistry()
    registry.register(TrialDivision())
    registry.register(TrialDivision())
    assert not check_registry_names(registry).passed
