import dataclasses

import pytest

from erato.config import (
    SpectralConfig, WitnessConfig, WitnessSetWarning, STANDARD_WITNESSES,
)


def test_spectral_defaults():
    cfg = SpectralConfig.default()
    assert (cfg.low_threshold, cfg.high_threshold) == (3.0, 5.5)
    assert cfg.quiet_threshold == 0.01
    assert cfg.first_divisor == 101
    assert (cfg.high_quick_limit, cfg.low_quick_limit) == (1000, 5000)
    assert cfg.guided_skip


def test_verified_preset_only_disables_skip():
    verified = SpectralConfig.verified()
    assert not verified.guided_skip
    assert dataclasses.replace(verified, guided_skip=True) == SpectralConfig()


@pytest.mark.parametrize("n, zeros", [
    (101, 20), (999, 20), (1000, 30), (9999, 30), (10000, 40), (2 ** 64 - 1, 40),
])
def test_zero_tiers(n, zeros):
    assert SpectralConfig().zeros_for(n) == zeros


def test_skip_stride():
    cfg = SpectralConfig()
    assert cfg.skip_stride(100.0) == 10
    assert cfg.skip_stride(1011.0) == 20
    assert cfg.skip_stride(4294967296.0) == 85899345


@pytest.mark.parametrize("kwargs", [
    {"low_threshold": 6.0},
    {"quiet_threshold": -1.0},
    {"first_divisor": 100},
    {"first_divisor": 1},
    {"high_quick_limit": 0},
    {"skip_divisor": 0},
    {"zero_tiers": ((10000, 30), (1000, 20))},
    {"default_zeros": 51},
    {"probe_zeros": 0},
])
def test_spectral_validation(kwargs):
    with pytest.raises(ValueError):
        SpectralConfig(**kwargs)


def test_spectral_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SpectralConfig().high_threshold = 1.0


def test_standard_witnesses():
    cfg = WitnessConfig.standard()
    assert cfg.witnesses == STANDARD_WITNESSES
    assert cfg.is_standard
    assert STANDARD_WITNESSES == (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


@pytest.mark.parametrize("witnesses", [
    (2, 3, 5),
    tuple(reversed(STANDARD_WITNESSES)),
    STANDARD_WITNESSES + (41,),
])
def test_non_standard_witnesses_warn(witnesses):
    with pytest.warns(WitnessSetWarning):
        cfg = WitnessConfig(witnesses)
    assert not cfg.is_standard


@pytest.mark.parametrize("witnesses", [(), (1,), (2, 2.5), (True,)])
def test_invalid_witnesses(witnesses):
    with pytest.raises(ValueError):
        WitnessConfig(witnesses)
