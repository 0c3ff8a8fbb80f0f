"""Holding valuation module.

Pure computation functions for market value, profit and percentage return.
No state - operates on prices and holdings passed as arguments.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypedDict

import numpy as np

logger = logging.getLogger(__name__)


class ProfitResult(TypedDict):
    market_value: float
    profit: float
    profit_percent: float


def calculate_profit(current_price: float, avg_cost: float, shares: float) -> ProfitResult:
    """Value one holding at ``current_price``.

    profit_percent is 0 (never NaN) when the cost basis is not positive.
    """
    market_value = current_price * shares
    cost_basis = avg_cost * shares
    profit = market_value - cost_basis
    profit_percent = (profit / cost_basis) * 100 if cost_basis > 0 else 0.0
    return ProfitResult(
        market_value=market_value,
        profit=profit,
        profit_percent=profit_percent,
    )


def summarize_portfolio(
    holdings: Iterable[Mapping[str, Any]],
    prices: Mapping[str, float],
    cash: float = 0.0,
    realized: Iterable[float] = (),
) -> dict[str, Any]:
    """Roll up unrealized, realized and total profit for a set of holdings.

    Holdings without a positive current price are left out of the
    unrealized figures so a pending quote does not show up as a loss.

    Args:
        holdings: Mappings with symbol, shares and avg_cost.
        prices: Current price per symbol.
        cash: Uninvested cash balance.
        realized: Realized P/L of closed trades.

    Returns:
        {
            market_value: float (priced holdings only),
            cost_basis: float (priced holdings only),
            unrealized_profit: float,
            unrealized_percent: float,
            total_market_value: float (missing prices count as 0),
            realized_profit: float,
            total_profit: float,
            total_assets: float (total_market_value + cash),
            priced_count: int
        }
    """
    market_value = 0.0
    cost_basis = 0.0
    total_market_value = 0.0
    priced_count = 0

    for item in holdings:
        price = prices.get(item["symbol"]) or 0.0
        total_market_value += price * item["shares"]
        if price > 0:
            market_value += price * item["shares"]
            cost_basis += item["avg_cost"] * item["shares"]
            priced_count += 1
        else:
            logger.debug("No current price for %s, excluded from unrealized P/L", item["symbol"])

    unrealized = market_value - cost_basis
    realized_profit = float(sum(realized))

    return {
        "market_value": market_value,
        "cost_basis": cost_basis,
        "unrealized_profit": unrealized,
        "unrealized_percent": (unrealized / cost_basis) * 100 if cost_basis > 0 else 0.0,
        "total_market_value": total_market_value,
        "realized_profit": realized_profit,
        "total_profit": unrealized + realized_profit,
        "total_assets": total_market_value + cash,
        "priced_count": priced_count,
    }


def project_holding(
    end_prices: Sequence[float] | np.ndarray,
    avg_cost: float,
    shares: float,
) -> dict[str, Any] | None:
    """Value a holding at each simulated ending price.

    Returns:
        Profit distribution stats, or None when there are no prices.
    """
    if len(end_prices) == 0:
        return None

    results = [calculate_profit(float(p), avg_cost, shares) for p in end_prices]
    profits = np.array([r["profit"] for r in results])
    percents = np.array([r["profit_percent"] for r in results])

    return {
        "mean_profit": float(np.mean(profits)),
        "median_profit": float(np.median(profits)),
        "p5_profit": float(np.percentile(profits, 5)),
        "p95_profit": float(np.percentile(profits, 95)),
        "mean_profit_percent": float(np.mean(percents)),
        "prob_profit": round(float(np.mean(profits > 0)), 4),
    }
