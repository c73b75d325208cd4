"""Market data service: cached price and pool snapshots.

The quote engine has no freshness policy of its own and trusts whatever
snapshot it is handed. This service owns that policy on its behalf:

1. Serve the cached snapshot while it is younger than its TTL
2. Otherwise refetch from the source
3. If the fetch fails, keep serving the last good snapshot
4. With nothing cached, fall back to demo prices (prices) or no pools (pools)
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping, Sequence
from typing import Protocol

import structlog

from swapquote.config import DEFAULT_SERVICE_CONFIG, ServiceConfig
from swapquote.market.snapshot import MarketSnapshot
from swapquote.market.static import DEMO_TOKEN_PRICES
from swapquote.models.market import LiquidityPool, TokenPrice

logger = structlog.get_logger()


class MarketDataSource(Protocol):
    """Protocol for the external price oracle and pool registry.

    Implementations may serve stale data; the service only controls how
    often it asks.
    """

    def fetch_token_prices(self) -> Mapping[str, TokenPrice]:
        """Return the current symbol -> TokenPrice mapping."""
        ...

    def fetch_liquidity_pools(self) -> Sequence[LiquidityPool]:
        """Return the current list of liquidity pools."""
        ...


class MarketDataService:
    """Caching front for a MarketDataSource.

    Attributes:
        config: TTLs for the price and pool snapshots
    """

    def __init__(
        self,
        source: MarketDataSource,
        config: ServiceConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the service.

        Args:
            source: Where prices and pools are fetched from
            config: Service configuration. Uses DEFAULT_SERVICE_CONFIG if not provided.
            clock: Monotonic time source in seconds (injectable for tests)
        """
        self.config = config or DEFAULT_SERVICE_CONFIG
        self._source = source
        self._clock = clock
        self._prices: dict[str, TokenPrice] | None = None
        self._prices_fetched_at: float | None = None
        self._pools: list[LiquidityPool] | None = None
        self._pools_fetched_at: float | None = None

    def _is_fresh(self, fetched_at: float | None, ttl: float) -> bool:
        return fetched_at is not None and self._clock() - fetched_at < ttl

    def get_token_prices(self) -> dict[str, TokenPrice]:
        """Latest token prices keyed by symbol."""
        if self._prices is not None and self._is_fresh(
            self._prices_fetched_at, self.config.price_ttl_seconds
        ):
            return dict(self._prices)

        try:
            prices = dict(self._source.fetch_token_prices())
        except Exception:
            logger.exception(
                "token_price_fetch_failed",
                has_cached=self._prices is not None,
            )
            if self._prices is not None:
                return dict(self._prices)
            return dict(DEMO_TOKEN_PRICES)

        self._prices = prices
        self._prices_fetched_at = self._clock()
        logger.debug("token_prices_refreshed", token_count=len(prices))
        return dict(prices)

    def get_liquidity_pools(self) -> list[LiquidityPool]:
        """Latest liquidity pools."""
        if self._pools is not None and self._is_fresh(
            self._pools_fetched_at, self.config.pool_ttl_seconds
        ):
            return list(self._pools)

        try:
            pools = list(self._source.fetch_liquidity_pools())
        except Exception:
            logger.exception(
                "liquidity_pool_fetch_failed",
                has_cached=self._pools is not None,
            )
            if self._pools is not None:
                return list(self._pools)
            return []

        self._pools = pools
        self._pools_fetched_at = self._clock()
        logger.debug("liquidity_pools_refreshed", pool_count=len(pools))
        return list(pools)

    def snapshot(self) -> MarketSnapshot:
        """Build an immutable snapshot from the current prices and pools."""
        return MarketSnapshot.build(self.get_token_prices(), self.get_liquidity_pools())

    def close(self) -> None:
        """Close the source if it holds resources (such as an HTTP client)."""
        close = getattr(self._source, "close", None)
        if close is not None:
            close()

    def invalidate(self) -> None:
        """Force the next read of each snapshot to refetch."""
        self._prices_fetched_at = None
        self._pools_fetched_at = None


__all__ = ["MarketDataSource", "MarketDataService"]
