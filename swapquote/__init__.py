"""Swap Quote Engine - forward quotes, inverse solves and swap form state."""

__version__ = "0.1.0"

from swapquote.market import MarketDataService, MarketSnapshot
from swapquote.quoting import QuoteEngine, quote_forward, quote_inverse

__all__ = [
    "MarketDataService",
    "MarketSnapshot",
    "QuoteEngine",
    "quote_forward",
    "quote_inverse",
    "__version__",
]
