"""Price impact model.

Impact grows with the square root of the trade's share of pool depth:

    impact = sqrt(trade_value / (tvl / 2)) * impact_scale

rounded half-up to `impact_decimals` places so comparisons and display are
not disturbed by float noise. Pairs without a pool have no modelled impact.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from swapquote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig

if TYPE_CHECKING:
    from swapquote.market.snapshot import MarketSnapshot


def round_impact(value: float, decimals: int) -> float:
    """Round half-up to a fixed number of decimal places."""
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


def impact_for_depth(
    trade_value: float,
    tvl: float,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> float:
    """Impact of a trade against a pool of the given depth.

    Returns 0.0 for empty trades and pools without liquidity. The result is
    capped at 1.0: a trade cannot lose more than its whole value.
    """
    if trade_value <= 0 or tvl <= 0:
        return 0.0
    raw = math.sqrt(trade_value / (tvl / 2)) * config.impact_scale
    return min(round_impact(raw, config.impact_decimals), 1.0)


def calculate_price_impact(
    market: MarketSnapshot,
    from_symbol: str,
    to_symbol: str,
    trade_value: float,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> float:
    """Price impact fraction of a trade between two tokens.

    Args:
        market: Snapshot holding the pool registry
        from_symbol: Token being sold
        to_symbol: Token being bought
        trade_value: Trade size in the quote currency
            (amount * price of from_symbol)
        config: Impact model parameters

    Returns:
        Impact as a fraction in [0, 1]; 0.0 when no pool matches the pair
    """
    pool = market.get_pool(from_symbol, to_symbol)
    if pool is None:
        return 0.0
    return impact_for_depth(trade_value, pool.tvl, config)
