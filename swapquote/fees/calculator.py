"""Fee lookup for a token pair.

Fees are fractions in [0, 1] everywhere in the engine. Conversion to a
percentage happens only in swapquote.form.display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from swapquote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig

if TYPE_CHECKING:
    from swapquote.market.snapshot import MarketSnapshot

logger = structlog.get_logger()


def fee_fraction(
    market: MarketSnapshot,
    token_a: str,
    token_b: str,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> float:
    """Swap fee for a pair as a fraction.

    Args:
        market: Snapshot holding the pool registry
        token_a: One token of the pair
        token_b: The other token (order does not matter)
        config: Supplies the fallback fee

    Returns:
        The pool's fee, or config.default_fee_fraction (0.003) when no pool
        is registered for the pair
    """
    pool = market.get_pool(token_a, token_b)
    if pool is None:
        logger.debug(
            "fee_default_used",
            token_a=token_a,
            token_b=token_b,
            fee=config.default_fee_fraction,
        )
        return config.default_fee_fraction
    return pool.fee
