"""Tests for the HTTP market data source."""

import httpx
import pytest

from swapquote.market import MarketDataService, RemoteMarketDataSource

PRICES = {
    "GALA": {"price": 0.025, "change24h": 2.5},
    "USDC": {"price": 1.0, "change24h": 0.1},
}
POOLS = [{"pair": "GALA/USDC", "tvl": 1_000_000, "fee": 0.003}]


def make_transport(prices=PRICES, pools=POOLS, status_code=200):
    """Mock transport serving the feed; records requested paths."""
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        if status_code != 200:
            return httpx.Response(status_code)
        if request.url.path.endswith("/prices"):
            return httpx.Response(200, json=prices)
        if request.url.path.endswith("/pools"):
            return httpx.Response(200, json=pools)
        return httpx.Response(404)

    transport = httpx.MockTransport(handler)
    transport.requested = requested
    return transport


class TestRemoteMarketDataSource:
    """Tests for RemoteMarketDataSource."""

    def test_fetches_prices(self):
        transport = make_transport()
        source = RemoteMarketDataSource("https://feed.test/market/", transport=transport)

        prices = source.fetch_token_prices()

        assert set(prices) == {"GALA", "USDC"}
        assert prices["GALA"].price == 0.025
        assert prices["GALA"].change_24h == 2.5
        assert transport.requested == ["/market/prices"]

    def test_fetches_pools(self):
        source = RemoteMarketDataSource("https://feed.test/market", transport=make_transport())

        pools = source.fetch_liquidity_pools()

        assert len(pools) == 1
        assert pools[0].tvl == 1_000_000

    def test_http_error_raises(self):
        source = RemoteMarketDataSource(
            "https://feed.test", transport=make_transport(status_code=503)
        )

        with pytest.raises(httpx.HTTPStatusError):
            source.fetch_token_prices()

    def test_malformed_prices_raise(self):
        source = RemoteMarketDataSource(
            "https://feed.test", transport=make_transport(prices=["GALA"])
        )

        with pytest.raises(ValueError, match="symbol -> price"):
            source.fetch_token_prices()

    def test_malformed_pools_raise(self):
        source = RemoteMarketDataSource(
            "https://feed.test", transport=make_transport(pools={"pair": "GALA/USDC"})
        )

        with pytest.raises(ValueError, match="list of pools"):
            source.fetch_liquidity_pools()


class TestServiceWithRemoteSource:
    """The service falls back when the feed is down."""

    def test_snapshot_from_feed(self):
        source = RemoteMarketDataSource("https://feed.test", transport=make_transport())
        snapshot = MarketDataService(source).snapshot()

        assert snapshot.exchange_rate("GALA", "USDC") == pytest.approx(0.025)
        assert snapshot.get_pool("USDC", "GALA") is not None

    def test_feed_down_uses_demo_prices(self):
        source = RemoteMarketDataSource(
            "https://feed.test", transport=make_transport(status_code=500)
        )
        service = MarketDataService(source)

        assert "WBTC" in service.get_token_prices()
        assert service.get_liquidity_pools() == []


class TestClose:
    """Tests for closing the HTTP client."""

    def test_close(self):
        source = RemoteMarketDataSource("https://feed.test", transport=make_transport())
        source.close()

        with pytest.raises(RuntimeError):
            source.fetch_token_prices()

    def test_context_manager_closes_client(self):
        with RemoteMarketDataSource("https://feed.test", transport=make_transport()) as source:
            assert len(source.fetch_liquidity_pools()) == 1

        with pytest.raises(RuntimeError):
            source.fetch_liquidity_pools()

    def test_service_close_closes_client(self):
        source = RemoteMarketDataSource("https://feed.test", transport=make_transport())
        MarketDataService(source).close()

        with pytest.raises(RuntimeError):
            source.fetch_token_prices()
