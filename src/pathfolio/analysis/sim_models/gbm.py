"""Geometric Brownian Motion price path simulation."""

import logging

import numpy as np

from . import PricePoint, SimulationPath, UniformSource
from .normal import box_muller

logger = logging.getLogger(__name__)

TRADING_DAYS_PER_YEAR = 252
DT = 1.0 / TRADING_DAYS_PER_YEAR  # One trading day
ANNUAL_DRIFT = 0.08  # Assumed market return, not estimated from input


def simulate_price_paths(
    start_price: float,
    volatility: float,
    horizon_days: int,
    path_count: int,
    rng: UniformSource,
) -> np.ndarray:
    """Simulate GBM price paths as a (path_count, horizon_days + 1) array.

    Uses the exact log-normal step
    ``S_t = S_{t-1} * exp((mu - 0.5 * sigma^2) * dt + sigma * sqrt(dt) * Z)``
    with one fresh Box-Muller sample per path per step. Inputs are not
    validated; NaN or negative values propagate through the arithmetic.

    Args:
        start_price: Price at step 0.
        volatility: Annualised volatility (e.g. 0.30 for 30%).
        horizon_days: Number of trading days simulated beyond step 0.
        path_count: Number of independent paths.
        rng: Uniform source feeding the normal generator.

    Returns:
        Price array; column 0 equals start_price exactly.
    """
    if path_count == 0:
        logger.debug("GBM: zero paths requested")
    if horizon_days == 0:
        logger.debug("GBM: zero horizon, returning start prices only")
    if volatility == 0.0:
        logger.debug("GBM: zero volatility, paths follow pure drift")

    drift_term = (ANNUAL_DRIFT - 0.5 * volatility**2) * DT
    shocks = volatility * np.sqrt(DT) * box_muller(rng, (path_count, horizon_days))

    prices = np.empty((path_count, horizon_days + 1), dtype=float)
    prices[:, 0] = start_price
    for day in range(1, horizon_days + 1):
        prices[:, day] = prices[:, day - 1] * np.exp(drift_term + shocks[:, day - 1])

    return prices


def run_monte_carlo_simulation(
    start_price: float,
    volatility: float,
    horizon_days: int,
    path_count: int,
    rng: UniformSource | None = None,
) -> list[SimulationPath]:
    """Run the simulator and return labelled paths in generation order.

    Each call is independent: without an explicit ``rng`` a fresh unseeded
    generator is used.
    """
    if rng is None:
        rng = np.random.default_rng()

    prices = simulate_price_paths(start_price, volatility, horizon_days, path_count, rng)

    return [
        SimulationPath(
            label=f"Sim {i + 1}",
            points=[PricePoint(step=step, price=float(p)) for step, p in enumerate(row)],
        )
        for i, row in enumerate(prices)
    ]
