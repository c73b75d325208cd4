"""Market data: snapshots, the caching data service and static sources.

Usage:
    from swapquote.market import MarketDataService, StaticMarketDataSource

    service = MarketDataService(StaticMarketDataSource(prices, pools))
    snapshot = service.snapshot()
"""

from swapquote.market.service import MarketDataService, MarketDataSource
from swapquote.market.remote import RemoteMarketDataSource
from swapquote.market.snapshot import MarketSnapshot
from swapquote.market.static import (
    DEMO_TOKEN_PRICES,
    StaticMarketDataSource,
    load_market_file,
)

__all__ = [
    "MarketSnapshot",
    "MarketDataSource",
    "MarketDataService",
    "StaticMarketDataSource",
    "RemoteMarketDataSource",
    "DEMO_TOKEN_PRICES",
    "load_market_file",
]
