import pytest

from hexspigot.constants import DEFAULT_LIMITS, Limits, needs_confirmation, precision_regime


def test_default_limits():
    assert DEFAULT_LIMITS.direct_limit == 1_000_000
    assert DEFAULT_LIMITS.tail_epsilon == 1e-15
    assert DEFAULT_LIMITS.tail_max_terms == 100
    assert DEFAULT_LIMITS.warn_above == 10**12


def test_precision_regime():
    assert precision_regime(0) == "exact"
    assert precision_regime(999_999) == "exact"
    assert precision_regime(1_000_000) == "reduced"
    assert precision_regime(10**12) == "reduced"
    assert precision_regime(10**12 + 1) == "degraded"
    assert precision_regime(60, Limits(direct_limit=50)) == "reduced"
    with pytest.raises(ValueError):
        precision_regime(-1)


def test_needs_confirmation():
    assert not needs_confirmation(10**12)
    assert needs_confirmation(10**12 + 1)


def test_invalid_limits():
    with pytest.raises(ValueError):
        Limits(direct_limit=-1)
    with pytest.raises(ValueError):
        Limits(tail_epsilon=0)
