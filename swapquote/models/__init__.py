"""Data models for the swap quote engine."""

from swapquote.models.market import LiquidityPool, TokenPrice
from swapquote.models.quote import (
    QuoteDirection,
    QuoteError,
    SwapQuoteRequest,
    SwapQuoteResult,
)
from swapquote.models.types import (
    format_amount,
    normalize_symbol,
    pair_key,
    parse_amount,
    split_pair,
)

__all__ = [
    # Market data
    "TokenPrice",
    "LiquidityPool",
    # Quotes
    "QuoteDirection",
    "QuoteError",
    "SwapQuoteRequest",
    "SwapQuoteResult",
    # Helpers
    "format_amount",
    "normalize_symbol",
    "pair_key",
    "parse_amount",
    "split_pair",
]
