import pytest

from erato import PrimalityRegistry, U64


@pytest.fixture
def registry():
    return PrimalityRegistry.with_all_algorithms(U64)


@pytest.fixture(scope="session")
def primes_below_2000():
    flags = [True] * 2000
    flags[0] = flags[1] = False
    for i in range(2, 45):
        if flags[i]:
            for j in range(i * i, 2000, i):
                flags[j] = False
    return {i for i, f in enumerate(flags) if f}
