"""Buy and sell arithmetic for holdings, including broker fees."""

import logging
import math
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


class InvalidTradeError(ValueError):
    """Raised for trades that cannot be executed (e.g. selling unheld shares)."""


def estimate_fee(amount: float, fee_rate_pct: float) -> int:
    """Broker fee for a trade amount, rounded half-up to a whole unit.

    Args:
        amount: Trade value (price * shares).
        fee_rate_pct: Fee rate in percent, e.g. 0.1425.
    """
    return math.floor(amount * (fee_rate_pct / 100) + 0.5)


def record_buy(
    symbol: str,
    shares: float,
    price: float,
    fee: float | None = None,
    fee_rate_pct: float = 0.0,
) -> dict[str, Any]:
    """Compute the holding created by a buy; the fee is folded into avg_cost.

    Raises:
        InvalidTradeError: If shares is not positive or price is negative.
    """
    if not shares > 0:
        raise InvalidTradeError(f"Buy shares must be positive, got {shares}")
    if price < 0:
        raise InvalidTradeError(f"Buy price must not be negative, got {price}")

    if fee is None:
        fee = estimate_fee(price * shares, fee_rate_pct)

    total_cost = price * shares + fee
    return {
        "symbol": symbol.upper(),
        "shares": shares,
        "avg_cost": total_cost / shares,
        "fee": fee,
        "total_cost": total_cost,
        "cash_delta": -total_cost,
    }


def record_sell(
    holding: Mapping[str, Any],
    shares: float,
    price: float,
    fee: float | None = None,
    fee_rate_pct: float = 0.0,
) -> dict[str, Any]:
    """Realize P/L for selling part or all of a holding.

    Args:
        holding: Mapping with symbol, shares and avg_cost.
        shares: Shares to sell, 0 < shares <= holding["shares"].
        price: Sell price per share.
        fee: Explicit fee; estimated from fee_rate_pct when None.
        fee_rate_pct: Fee rate in percent.

    Raises:
        InvalidTradeError: If the share count is out of range.
    """
    held = holding["shares"]
    if shares <= 0 or shares > held:
        raise InvalidTradeError(f"Cannot sell {shares} shares of {held} held")

    if fee is None:
        fee = estimate_fee(price * shares, fee_rate_pct)

    revenue = price * shares - fee
    cost = holding["avg_cost"] * shares
    realized_pl = revenue - cost
    remaining = held - shares

    logger.debug("Sell %s x%s: realized %.2f", holding.get("symbol", "?"), shares, realized_pl)

    return {
        "symbol": holding.get("symbol"),
        "shares": shares,
        "price": price,
        "fee": fee,
        "revenue": revenue,
        "cost": cost,
        "realized_pl": realized_pl,
        "return_rate": (realized_pl / cost) * 100 if cost > 0 else 0.0,
        "remaining_shares": remaining,
        "closed": remaining == 0,
        "cash_delta": revenue,
    }
