"""Fixed market data: demo fallback prices and JSON fixture loading."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path

from swapquote.models.market import LiquidityPool, TokenPrice

# Served when the price oracle cannot be reached and nothing was cached yet
DEMO_TOKEN_PRICES: dict[str, TokenPrice] = {
    "GALA": TokenPrice(symbol="GALA", price=0.025, change24h=2.5),
    "USDC": TokenPrice(symbol="USDC", price=1.0, change24h=0.1),
    "USDT": TokenPrice(symbol="USDT", price=1.0, change24h=-0.05),
    "WBTC": TokenPrice(symbol="WBTC", price=100000, change24h=1.8),
    "WETH": TokenPrice(symbol="WETH", price=3333, change24h=3.2),
}


class StaticMarketDataSource:
    """Market data source that always returns the same data.

    Usage:
        source = StaticMarketDataSource(prices=DEMO_TOKEN_PRICES, pools=[pool])
        service = MarketDataService(source)
    """

    def __init__(
        self,
        prices: Mapping[str, TokenPrice] | None = None,
        pools: Sequence[LiquidityPool] | None = None,
    ) -> None:
        self._prices = dict(prices or {})
        self._pools = list(pools or [])

    def fetch_token_prices(self) -> Mapping[str, TokenPrice]:
        return dict(self._prices)

    def fetch_liquidity_pools(self) -> Sequence[LiquidityPool]:
        return list(self._pools)


def load_market_file(path: Path | str) -> StaticMarketDataSource:
    """Load a market fixture from a JSON file.

    The document has the shape:
        {
            "prices": {"GALA": {"symbol": "GALA", "price": 0.025, "change24h": 2.5}},
            "pools": [{"pair": "GALA/USDC", "tvl": 1000000, "fee": 0.003}]
        }

    Args:
        path: Path to the JSON document

    Returns:
        A StaticMarketDataSource serving the file's data

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or not shaped as above
        pydantic.ValidationError: If a price or pool entry is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Market file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = json.load(fp)

    if not isinstance(data, dict):
        raise ValueError(f"Market file must hold a JSON object: {path}")
    raw_prices = data.get("prices", {})
    raw_pools = data.get("pools", [])
    if not isinstance(raw_prices, dict) or not isinstance(raw_pools, list):
        raise ValueError(f"Market file needs a \"prices\" object and a \"pools\" list: {path}")
    if not all(isinstance(entry, dict) for entry in raw_prices.values()):
        raise ValueError(f"Each price entry must be a JSON object: {path}")

    prices = {
        symbol: TokenPrice.model_validate({"symbol": symbol, **entry})
        for symbol, entry in raw_prices.items()
    }
    pools = [LiquidityPool.model_validate(entry) for entry in raw_pools]
    return StaticMarketDataSource(prices=prices, pools=pools)
