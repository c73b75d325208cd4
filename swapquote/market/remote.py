"""Market data source backed by a remote HTTP price and pool feed.

The feed exposes two JSON documents under a base URL:

    GET {base_url}/prices -> {"GALA": {"price": 0.025, "change24h": 2.5}, ...}
    GET {base_url}/pools  -> [{"pair": "GALA/USDC", "tvl": 1000000, ...}, ...]

Errors are not handled here. MarketDataService catches them and falls back
to its cached or demo data.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import httpx
import structlog

from swapquote.models.market import LiquidityPool, TokenPrice

logger = structlog.get_logger()

DEFAULT_TIMEOUT = 10.0


class RemoteMarketDataSource:
    """Fetches prices and pools from an HTTP feed.

    Usage:
        source = RemoteMarketDataSource("https://example.org/market")
        service = MarketDataService(source)

    Args:
        base_url: URL the /prices and /pools paths are resolved against
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def _get(self, path: str) -> object:
        response = self._client.get(path)
        response.raise_for_status()
        return response.json()

    def fetch_token_prices(self) -> Mapping[str, TokenPrice]:
        data = self._get("/prices")
        if not isinstance(data, dict):
            raise ValueError(f"Expected a symbol -> price object from {self.base_url}/prices")
        prices = {
            symbol: TokenPrice.model_validate({"symbol": symbol, **entry})
            for symbol, entry in data.items()
        }
        logger.debug("remote_prices_fetched", url=self.base_url, token_count=len(prices))
        return prices

    def fetch_liquidity_pools(self) -> Sequence[LiquidityPool]:
        data = self._get("/pools")
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of pools from {self.base_url}/pools")
        pools = [LiquidityPool.model_validate(entry) for entry in data]
        logger.debug("remote_pools_fetched", url=self.base_url, pool_count=len(pools))
        return pools

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RemoteMarketDataSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
