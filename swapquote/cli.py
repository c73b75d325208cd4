"""Command line quoting.

Usage:
    swapquote GALA USDC --amount 1000
    swapquote GALA USDC --amount 25 --exact-out --market market.json
    swapquote WETH USDC --amount 1 --market-url https://example.org/market
"""

from __future__ import annotations

import argparse
import sys

import structlog
from pydantic import ValidationError as PydanticValidationError

from swapquote.log import configure_logging
from swapquote.market import (
    DEMO_TOKEN_PRICES,
    MarketDataService,
    RemoteMarketDataSource,
    StaticMarketDataSource,
    load_market_file,
)
from swapquote.models.quote import SwapQuoteRequest
from swapquote.quoting.engine import QuoteEngine

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swapquote",
        description="Quote a token swap against a market snapshot",
    )
    parser.add_argument("from_symbol", help="Token to sell (e.g. GALA)")
    parser.add_argument("to_symbol", help="Token to buy (e.g. USDC)")
    parser.add_argument(
        "--amount",
        "-a",
        type=float,
        required=True,
        help="Amount to sell, or amount to receive with --exact-out",
    )
    parser.add_argument(
        "--exact-out",
        action="store_true",
        help="Treat --amount as the desired output and solve for the input",
    )
    parser.add_argument(
        "--market",
        "-m",
        help="JSON market fixture with prices and pools (default: demo prices, no pools)",
    )
    parser.add_argument(
        "--market-url",
        help="Base URL of an HTTP feed serving /prices and /pools",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    amount_field = "output_amount" if args.exact_out else "input_amount"
    try:
        request = SwapQuoteRequest(
            from_symbol=args.from_symbol,
            to_symbol=args.to_symbol,
            **{amount_field: args.amount},
        )
    except PydanticValidationError as err:
        print(f"Error: {err.errors()[0]['msg']}", file=sys.stderr)
        return 1

    if args.market:
        try:
            source = load_market_file(args.market)
        except FileNotFoundError:
            logger.error("market_file_not_found", path=args.market)
            print(f"Error: Market file not found: {args.market}", file=sys.stderr)
            return 1
        except ValueError as err:
            # json.JSONDecodeError and pydantic.ValidationError are ValueErrors
            logger.error("market_file_invalid", path=args.market, error=str(err))
            print(f"Error: Invalid market file {args.market}: {err}", file=sys.stderr)
            return 1
    elif args.market_url:
        source = RemoteMarketDataSource(args.market_url)
    else:
        source = StaticMarketDataSource(prices=DEMO_TOKEN_PRICES)

    service = MarketDataService(source)
    try:
        result = QuoteEngine().quote(service.snapshot(), request)
    finally:
        service.close()
    print(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    return 0 if result.is_available else 2


if __name__ == "__main__":
    sys.exit(main())
