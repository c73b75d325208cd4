"""Test helpers module for shared test utilities.

- constants: Token symbols and prices
- factories: Price, pool and market snapshot factory functions
"""

from tests.helpers.constants import (
    DEFAULT_TVL,
    GALA,
    PRICES,
    UNKNOWN,
    USDC,
    USDT,
    WBTC,
    WETH,
)
from tests.helpers.factories import make_market, make_pool, make_prices

__all__ = [
    # Constants
    "GALA",
    "USDC",
    "USDT",
    "WBTC",
    "WETH",
    "UNKNOWN",
    "PRICES",
    "DEFAULT_TVL",
    # Factories
    "make_prices",
    "make_pool",
    "make_market",
]
