"""FastAPI application exposing the swap quote engine."""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from swapquote import __version__
from swapquote.api.endpoints import close_market_service, router
from swapquote.log import configure_logging

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("SWAPQUOTE_HOST", "127.0.0.1")
PORT = int(os.environ.get("SWAPQUOTE_PORT", "8000"))
DEBUG = os.environ.get("SWAPQUOTE_DEBUG", "false").lower() in ("true", "1", "yes")


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Close the market data source when the server stops."""
    yield
    close_market_service()


app = FastAPI(
    title="Swap Quote Engine",
    description="Forward quotes and inverse solves for token swaps",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - SWAPQUOTE_HOST: Host to bind to (default: 127.0.0.1)
    - SWAPQUOTE_PORT: Port to bind to (default: 8000)
    - SWAPQUOTE_DEBUG: Enable debug logging and reload mode (default: false)
    - SWAPQUOTE_MARKET_FILE: JSON market fixture to quote against (optional)
    - SWAPQUOTE_MARKET_URL: HTTP feed serving /prices and /pools (optional)
    """
    configure_logging(verbose=DEBUG)
    uvicorn.run(
        "swapquote.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
