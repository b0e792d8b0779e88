import pytest

from erato import PrimalityRegistry, PrimalityTest, TrialDivision, prime_count_samples
from erato.display import (
    format_agreement_table, format_invariant_report, format_prime_counts,
    plot_prime_counts,
)
from erato.invariants import InvariantResult, run_all_invariants


class AlwaysPrime(PrimalityTest):
    def name(self):
        return "Always Prime"

    def _test(self, n):
        return True


def test_invariant_report_all_pass(registry):
    report = format_invariant_report(run_all_invariants(registry))
    assert "INVARIANT VALIDATION REPORT" in report
    assert "[X]" not in report
    assert "Every invariant holds" in report


def test_invariant_report_with_failure():
    results = [
        InvariantResult("A", True, {}, "fine"),
        InvariantResult("B", False, {}, "broken"),
    ]
    report = format_invariant_report(results)
    assert " [X] B: FAIL" in report
    assert "REGISTRY COMPROMISED" in report


def test_agreement_table(registry):
    table = format_agreement_table(registry, [2, 4, 97])
    for name in registry.names():
        assert name in table
    assert "*" not in table
    assert len(table.splitlines()) == 5


def test_agreement_table_flags_split():
    registry = PrimalityRegistry()
    registry.register(TrialDivision())
    registry.register(AlwaysPrime())
    table = format_agreement_table(registry, [9])
    assert table.splitlines()[-1].endswith(" *")


def test_prime_count_summary():
    trace = prime_count_samples(100, TrialDivision())
    text = format_prime_counts(trace, max_rows=10)
    assert "limit=100" in text
    assert text.count("\n") < 20
    assert "25" in text.splitlines()[-2]


def test_prime_count_summary_empty():
    assert "No candidates" in format_prime_counts(prime_count_samples(1))


def test_plot_to_file(tmp_path):
    pytest.importorskip("matplotlib")
    trace = prime_count_samples(200, TrialDivision())
    out = tmp_path / "counts.png"
    plot_prime_counts(trace, output_path=str(out), show=False)
    assert out.exists()
