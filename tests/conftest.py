"""
Pytest fixtures and configuration for statypes tests.
"""

import pytest
import numpy as np
from dataclasses import dataclass

from statypes.confidence import CL90, CL95, CL99


@dataclass
class TestConfig:
    """Tolerances used across the test tiers."""
    atol: float = 1e-10  # Absolute tolerance for exact formulas
    sigma_rtol: float = 1e-8  # Relative tolerance for sigma round trips


@pytest.fixture
def config():
    """Standard test configuration."""
    return TestConfig()


# Probabilities spanning the closed unit interval, edges included
PROBABILITIES = [0.0, 1e-12, 0.01, 0.05, 0.1, 0.3173, 0.5, 0.9, 0.99, 1.0]

# Probabilities outside [0, 1]
BAD_PROBABILITIES = [-1.0, -1e-9, 1.0 + 1e-9, 2.0, float("nan"), float("inf")]


@pytest.fixture(params=PROBABILITIES)
def prob(request):
    """Parametrized probability in [0, 1]."""
    return request.param


@pytest.fixture(params=BAD_PROBABILITIES)
def bad_prob(request):
    """Parametrized probability outside [0, 1]."""
    return request.param


@pytest.fixture(params=[0.5, 1.0, 2.0, 3.0, 5.0, 7.0])
def sigma_values(request):
    """Parametrized positive numbers of sigma."""
    return request.param


@pytest.fixture(params=[CL90, CL95, CL99], ids=["cl90", "cl95", "cl99"])
def standard_cl(request):
    """Parametrized standard confidence levels."""
    return request.param


@pytest.fixture(params=[-3.0, -1.0, -0.5, 0.0, 0.5, 2.0, 10.0])
def factor(request):
    """Parametrized scale factors, both signs and zero."""
    return request.param


# Pytest configuration
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "tier1: Tier 1 confidence level tests")
    config.addinivalue_line("markers", "tier2: Tier 2 estimate and limit tests")
    config.addinivalue_line("markers", "tier3: Tier 3 serialization and storage tests")
