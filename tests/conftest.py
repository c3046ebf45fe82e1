"""
Shared test fixtures: baseline input sets and a non-interactive plotting backend.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from sanitation_costs.parameters import default_inputs, create_vsl_inputs


@pytest.fixture
def baseline():
    """Hypothetical Malawi scenario (human capital valuation)."""
    return default_inputs()


@pytest.fixture
def vsl_baseline():
    return create_vsl_inputs()


@pytest.fixture
def rng():
    return np.random.default_rng(12345)
