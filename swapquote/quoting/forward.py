"""Forward quote: input amount -> output amount."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from swapquote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from swapquote.models.types import format_amount, parse_amount
from swapquote.quoting.impact import calculate_price_impact

if TYPE_CHECKING:
    from swapquote.market.snapshot import MarketSnapshot

logger = structlog.get_logger()


def simulate_output(
    market: MarketSnapshot,
    from_symbol: str,
    to_symbol: str,
    amount_in: float,
    rate: float,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> tuple[float, float]:
    """Apply the pricing model to an input amount.

    Formula: amount_out = amount_in * rate * (1 - impact)

    Args:
        market: Snapshot holding prices and pools
        from_symbol: Token being sold
        to_symbol: Token being bought
        amount_in: Input amount (>= 0)
        rate: Mid-price rate from the snapshot (> 0)
        config: Impact model parameters

    Returns:
        Tuple of (amount_out, impact)
    """
    trade_value = market.trade_value(from_symbol, amount_in)
    impact = calculate_price_impact(market, from_symbol, to_symbol, trade_value, config)
    return amount_in * rate * (1 - impact), impact


def quote_forward(
    market: MarketSnapshot,
    from_symbol: str,
    to_symbol: str,
    input_amount: Any,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> str:
    """Quote the output amount for an exact input.

    Args:
        market: Snapshot holding prices and pools
        from_symbol: Token being sold
        to_symbol: Token being bought
        input_amount: Amount of from_symbol, as typed (string) or a number
        config: Quote parameters

    Returns:
        The output formatted with config.amount_decimals digits, "0" when
        it rounds to zero, or "" when no quote is available (bad amount or
        missing price)
    """
    amount_in = parse_amount(input_amount)
    if amount_in is None or amount_in <= 0:
        return ""

    rate = market.exchange_rate(from_symbol, to_symbol)
    if rate == 0:
        logger.debug("quote_unavailable", from_symbol=from_symbol, to_symbol=to_symbol)
        return ""

    amount_out, _ = simulate_output(market, from_symbol, to_symbol, amount_in, rate, config)
    formatted = format_amount(amount_out, config.amount_decimals)
    if float(formatted) == 0:
        return "0"
    return formatted
