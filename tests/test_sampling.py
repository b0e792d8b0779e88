import pytest

from erato import MillerRabin, PrimalityTest, TrialDivision, prime_count_samples
from erato.sampling import sample_stride


class Counting(PrimalityTest):
    def __init__(self):
        super().__init__()
        self.inner = MillerRabin()
        self.calls = []

    def name(self):
        return "Counting"

    def _test(self, n):
        self.calls.append(n)
        return self.inner.is_prime(n)


@pytest.mark.parametrize("limit, stride", [
    (0, 1), (999, 1), (1000, 10), (9999, 10), (10000, 100), (10 ** 6, 100),
])
def test_sample_stride(limit, stride):
    assert sample_stride(limit) == stride


def test_every_integer_below_1000(primes_below_2000):
    trace = prime_count_samples(100)
    assert trace.stride == 1
    assert trace.n_values.tolist() == list(range(2, 101))
    assert trace.final_count == 25
    assert trace.count_at(10) == 4
    assert trace.pairs()[0] == (2, 1)
    assert trace.algorithm == "Riemann Zeta"


def test_stride_ten_keeps_final_bound(primes_below_2000):
    trace = prime_count_samples(1234, MillerRabin())
    assert trace.stride == 10
    assert trace.n_values[0] == 10
    assert trace.n_values[-1] == 1234
    assert trace.n_values[-2] == 1230
    assert trace.final_count == len([p for p in primes_below_2000 if p <= 1234])
    assert trace.count_at(1000) == 168


def test_stride_hundred():
    trace = prime_count_samples(10000, TrialDivision())
    assert trace.stride == 100
    assert len(trace.n_values) == 100
    assert trace.final_count == 1229


def test_one_query_per_candidate():
    counting = Counting()
    prime_count_samples(50, counting)
    assert counting.calls == list(range(2, 51))


def test_limits_below_two():
    assert prime_count_samples(1).final_count == 0
    assert prime_count_samples(0).pairs() == []
    with pytest.raises(ValueError):
        prime_count_samples(-1)


def test_count_at_unsampled_value():
    trace = prime_count_samples(1500, MillerRabin())
    with pytest.raises(KeyError):
        trace.count_at(1001)
