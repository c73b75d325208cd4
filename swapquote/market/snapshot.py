"""Immutable market snapshot the quoting functions read from.

A snapshot bundles the latest token prices with the pool registry. It is
built once per refresh by the market data service (or directly from
fixtures in tests) and passed into every quoting call, so the engine never
holds price data in module state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from swapquote.models.market import LiquidityPool, TokenPrice
from swapquote.models.types import normalize_symbol
from swapquote.pools import PoolRegistry


@dataclass(frozen=True)
class MarketSnapshot:
    """Token prices and liquidity pools at one point in time."""

    prices: Mapping[str, TokenPrice] = field(default_factory=dict)
    pools: PoolRegistry = field(default_factory=PoolRegistry)

    def __post_init__(self) -> None:
        normalized = {normalize_symbol(symbol): price for symbol, price in self.prices.items()}
        object.__setattr__(self, "prices", MappingProxyType(normalized))

    @classmethod
    def build(
        cls,
        prices: Mapping[str, TokenPrice] | Iterable[TokenPrice],
        pools: Iterable[LiquidityPool] = (),
    ) -> MarketSnapshot:
        """Build a snapshot from raw accessor output.

        Args:
            prices: Either a symbol -> TokenPrice mapping or an iterable of
                TokenPrice (keyed by their own symbol)
            pools: Liquidity pools in any pair order
        """
        if not isinstance(prices, Mapping):
            prices = {price.symbol: price for price in prices}
        return cls(prices=prices, pools=PoolRegistry(pools))

    def price_of(self, symbol: str) -> float:
        """Unit price of a token, or 0.0 when the oracle has no price for it."""
        token_price = self.prices.get(normalize_symbol(symbol))
        if token_price is None:
            return 0.0
        return token_price.price

    def exchange_rate(self, from_symbol: str, to_symbol: str) -> float:
        """Mid-price rate: units of to_symbol per unit of from_symbol.

        Returns 0.0 when either price is missing or zero, which callers
        treat as "no quote available".
        """
        from_price = self.price_of(from_symbol)
        to_price = self.price_of(to_symbol)
        if from_price <= 0 or to_price <= 0:
            return 0.0
        return from_price / to_price

    def trade_value(self, symbol: str, amount: float) -> float:
        """Value of an amount of a token in the quote currency (0.0 if unpriced)."""
        if amount <= 0:
            return 0.0
        return amount * self.price_of(symbol)

    def get_pool(self, token_a: str, token_b: str) -> LiquidityPool | None:
        return self.pools.get_pool(token_a, token_b)


__all__ = ["MarketSnapshot"]
