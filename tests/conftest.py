"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def sample_holdings():
    """Two priced holdings and one still waiting for a quote."""
    return [
        {"symbol": "2330", "shares": 100, "avg_cost": 500.0},
        {"symbol": "2317", "shares": 200, "avg_cost": 100.0},
        {"symbol": "0050", "shares": 50, "avg_cost": 150.0},
    ]


@pytest.fixture
def sample_prices():
    return {"2330": 600.0, "2317": 90.0}
