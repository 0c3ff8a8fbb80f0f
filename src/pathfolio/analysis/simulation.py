"""Monte Carlo simulation orchestrator.

Seeds the generator, runs the GBM path simulator and derives ending-price
statistics and chart rows for the presentation layer.
"""

import hashlib
import logging
from collections.abc import Mapping
from typing import Any

import numpy as np
from pydantic import ValidationError

from pathfolio.analysis.sim_models import SimulationPath
from pathfolio.analysis.sim_models.gbm import run_monte_carlo_simulation
from pathfolio.schemas import InvalidParameterError, PriceSummary, SimulationRequest

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_HORIZON_DAYS = 126  # ~6 months of trading days
DEFAULT_NUM_PATHS = 50
SUMMARY_PERCENTILES = (5, 25, 50, 75, 95)


def make_rng(seed: int | None = None, ticker: str | None = None) -> np.random.Generator:
    """Build a generator: explicit seed first, then a stable per-ticker seed."""
    if seed is None and ticker:
        # hashlib-based, not the session-dependent hash()
        seed = int(hashlib.sha256(ticker.upper().encode()).hexdigest(), 16) % (2**32)
    return np.random.default_rng(seed=seed)


def end_prices(paths: list[SimulationPath]) -> np.ndarray:
    return np.array([p["points"][-1]["price"] for p in paths], dtype=float)


def summarize_paths(paths: list[SimulationPath], start_price: float) -> dict[str, Any] | None:
    """Compute ending-price statistics across simulated paths.

    Returns:
        Dict with avg_end_price, p5..p95, expected_return_pct, upside_prob
        and is_positive, or None if there are no paths.
    """
    if not paths:
        logger.debug("No paths to summarize")
        return None

    terminal = end_prices(paths)
    avg_end = float(np.mean(terminal))
    pcts = np.percentile(terminal, SUMMARY_PERCENTILES)

    return {
        "avg_end_price": round(avg_end, 4),
        **{f"p{q}": round(float(v), 4) for q, v in zip(SUMMARY_PERCENTILES, pcts)},
        "expected_return_pct": round((avg_end / start_price - 1) * 100, 2),
        "upside_prob": round(float(np.mean(terminal > start_price)), 4),
        "is_positive": bool(avg_end > start_price),
    }


def to_chart_rows(paths: list[SimulationPath]) -> list[dict[str, float]]:
    """Pivot paths into one row per step keyed ``sim0``, ``sim1``, ..."""
    if not paths:
        return []

    rows = []
    for i in range(len(paths[0]["points"])):
        row: dict[str, float] = {"step": i}
        for idx, path in enumerate(paths):
            row[f"sim{idx}"] = path["points"][i]["price"]
        rows.append(row)
    return rows


def run_simulation(
    request: SimulationRequest | Mapping[str, Any],
    rng: np.random.Generator | None = None,
) -> dict[str, Any]:
    """Validate a request, then simulate and summarize.

    Opt-in strict counterpart to ``run_monte_carlo_simulation``: rejects
    non-finite values, non-positive prices and negative counts or volatility.

    Raises:
        InvalidParameterError: If the request fails validation.
    """
    if not isinstance(request, SimulationRequest):
        try:
            request = SimulationRequest.model_validate(request)
        except ValidationError as e:
            raise InvalidParameterError.from_validation_error(e) from e

    logger.info(
        "Simulating %d paths over %d days (price=%.4f, sigma=%.4f)",
        request.path_count,
        request.horizon_days,
        request.start_price,
        request.volatility,
    )

    paths = run_monte_carlo_simulation(
        request.start_price,
        request.volatility,
        request.horizon_days,
        request.path_count,
        rng=rng,
    )
    summary = summarize_paths(paths, request.start_price)

    return {
        "request": request.model_dump(),
        "paths": paths,
        "summary": PriceSummary(**summary).model_dump() if summary else None,
    }
