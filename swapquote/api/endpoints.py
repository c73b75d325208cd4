"""API endpoints for the swap quote engine."""

from __future__ import annotations

import asyncio
import os

import structlog
from fastapi import APIRouter, Depends

from swapquote.market import (
    DEMO_TOKEN_PRICES,
    MarketDataService,
    RemoteMarketDataSource,
    StaticMarketDataSource,
    load_market_file,
)
from swapquote.models.market import TokenPrice
from swapquote.models.quote import QuoteError, SwapQuoteRequest, SwapQuoteResult
from swapquote.quoting.engine import QuoteEngine

logger = structlog.get_logger()

router = APIRouter()

_default_service: MarketDataService | None = None
_default_engine = QuoteEngine()


def _create_default_service() -> MarketDataService:
    """Create the market data service the server quotes against.

    Sources, first match wins:
    - SWAPQUOTE_MARKET_FILE: prices and pools read from a JSON fixture
    - SWAPQUOTE_MARKET_URL: prices and pools fetched from an HTTP feed
    - otherwise the demo prices with no pools, so quotes carry no impact
    """
    market_file = os.environ.get("SWAPQUOTE_MARKET_FILE")
    if market_file:
        logger.info("market_file_enabled", path=market_file)
        return MarketDataService(load_market_file(market_file))
    market_url = os.environ.get("SWAPQUOTE_MARKET_URL")
    if market_url:
        logger.info("market_feed_enabled", url=market_url)
        return MarketDataService(RemoteMarketDataSource(market_url))
    logger.info("market_source_default", reason="no market file or feed configured")
    return MarketDataService(StaticMarketDataSource(prices=DEMO_TOKEN_PRICES))


def get_market_service() -> MarketDataService:
    """Dependency provider for the market data service.

    Override this in tests to inject fixed market data:
        app.dependency_overrides[get_market_service] = lambda: service
    """
    global _default_service
    if _default_service is None:
        _default_service = _create_default_service()
    return _default_service


def close_market_service() -> None:
    """Release the default market data service (called on app shutdown)."""
    global _default_service
    if _default_service is not None:
        _default_service.close()
        _default_service = None


def get_engine() -> QuoteEngine:
    """Dependency provider for the quote engine."""
    return _default_engine


@router.get("/prices")
async def prices(
    service: MarketDataService = Depends(get_market_service),
) -> dict[str, TokenPrice]:
    """Latest token prices keyed by symbol."""
    # Refetching a stale cache blocks on the source
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, service.get_token_prices)


@router.post("/quote", response_model_exclude_none=True)
async def quote(
    request: SwapQuoteRequest,
    service: MarketDataService = Depends(get_market_service),
    engine: QuoteEngine = Depends(get_engine),
) -> SwapQuoteResult:
    """Quote a swap in the direction the request specifies.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Missing prices: Returns a result with error "no_price" and an
          empty solved-for amount
        - Engine exception: Logs error, returns an unavailable result
    """
    logger.info(
        "received_quote_request",
        from_symbol=request.from_symbol,
        to_symbol=request.to_symbol,
        direction=request.direction.value,
        amount=request.amount,
    )

    try:
        loop = asyncio.get_event_loop()
        market = await loop.run_in_executor(None, service.snapshot)
        return engine.quote(market, request)
    except Exception:
        logger.exception(
            "quote_error",
            from_symbol=request.from_symbol,
            to_symbol=request.to_symbol,
            message="Engine raised an exception, returning unavailable quote",
        )
        return SwapQuoteResult(
            from_symbol=request.from_symbol,
            to_symbol=request.to_symbol,
            direction=request.direction,
            input_amount="",
            output_amount="",
            error=QuoteError.NO_PRICE,
        )
