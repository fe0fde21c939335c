"""
Pytest configuration and shared fixtures.
"""

import pytest

from distviz.catalog.registry import DISTRIBUTIONS, list_distributions

ALL_NAMES = sorted(DISTRIBUTIONS)
CONTINUOUS_NAMES = [spec.name for spec in list_distributions("continuous")]
DISCRETE_NAMES = [spec.name for spec in list_distributions("discrete")]


@pytest.fixture(params=ALL_NAMES)
def distribution(request):
    """Every catalog entry, one test case each."""
    return DISTRIBUTIONS[request.param]


@pytest.fixture(params=CONTINUOUS_NAMES)
def continuous_distribution(request):
    """Every continuous catalog entry."""
    return DISTRIBUTIONS[request.param]


@pytest.fixture(params=DISCRETE_NAMES)
def discrete_distribution(request):
    """Every discrete catalog entry."""
    return DISTRIBUTIONS[request.param]


@pytest.fixture
def standard_normal_params():
    """Standard normal parameters."""
    return {"mu": 0.0, "sigma": 1.0}


@pytest.fixture
def fair_coin_binomial_params():
    """Ten trials of a fair coin."""
    return {"n": 10, "p": 0.5}
