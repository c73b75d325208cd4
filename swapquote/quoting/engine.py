"""Quote engine: combines rate, impact and fee into a SwapQuoteResult.

The engine is stateless. Market data is passed in with every call as a
MarketSnapshot, so one engine can serve any number of forms and requests.
"""

from __future__ import annotations

from typing import Any

import structlog

from swapquote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from swapquote.fees.calculator import fee_fraction
from swapquote.market.snapshot import MarketSnapshot
from swapquote.models.quote import (
    QuoteDirection,
    QuoteError,
    SwapQuoteRequest,
    SwapQuoteResult,
)
from swapquote.models.types import format_amount, normalize_symbol, parse_amount
from swapquote.quoting.forward import quote_forward
from swapquote.quoting.impact import calculate_price_impact
from swapquote.quoting.inverse import solve_inverse

logger = structlog.get_logger()


class QuoteEngine:
    """Produces quotes in either direction over an injected market snapshot.

    Attributes:
        config: Quote configuration settings
    """

    def __init__(self, config: QuoteConfig | None = None) -> None:
        """Initialize with optional configuration.

        Args:
            config: Quote configuration. Uses DEFAULT_QUOTE_CONFIG if not provided.
        """
        self.config = config or DEFAULT_QUOTE_CONFIG

    def quote(self, market: MarketSnapshot, request: SwapQuoteRequest) -> SwapQuoteResult:
        """Quote a request in the direction it specifies."""
        if request.direction == QuoteDirection.EXACT_IN:
            return self.quote_exact_in(
                market, request.from_symbol, request.to_symbol, request.input_amount
            )
        return self.quote_exact_out(
            market, request.from_symbol, request.to_symbol, request.output_amount
        )

    def quote_exact_in(
        self,
        market: MarketSnapshot,
        from_symbol: str,
        to_symbol: str,
        input_amount: Any,
    ) -> SwapQuoteResult:
        """Quote the output for an exact input amount."""
        from_symbol, to_symbol = normalize_symbol(from_symbol), normalize_symbol(to_symbol)
        fee = fee_fraction(market, from_symbol, to_symbol, self.config)
        result = SwapQuoteResult(
            from_symbol=from_symbol,
            to_symbol=to_symbol,
            direction=QuoteDirection.EXACT_IN,
            input_amount="",
            output_amount="",
            fee=fee,
        )

        amount_in = parse_amount(input_amount)
        if amount_in is None or amount_in <= 0:
            return result.model_copy(update={"error": QuoteError.INVALID_AMOUNT})

        input_str = format_amount(amount_in, self.config.amount_decimals)
        rate = market.exchange_rate(from_symbol, to_symbol)
        if rate == 0:
            return self._unavailable(result.model_copy(update={"input_amount": input_str}))

        trade_value = market.trade_value(from_symbol, amount_in)
        impact = calculate_price_impact(market, from_symbol, to_symbol, trade_value, self.config)
        output_str = quote_forward(market, from_symbol, to_symbol, amount_in, self.config)

        logger.debug(
            "quote_computed",
            direction=QuoteDirection.EXACT_IN.value,
            from_symbol=from_symbol,
            to_symbol=to_symbol,
            amount_in=input_str,
            amount_out=output_str,
            impact=impact,
        )
        return result.model_copy(
            update={
                "input_amount": input_str,
                "output_amount": output_str,
                "exchange_rate": rate,
                "price_impact": impact,
            }
        )

    def quote_exact_out(
        self,
        market: MarketSnapshot,
        from_symbol: str,
        to_symbol: str,
        output_amount: Any,
    ) -> SwapQuoteResult:
        """Quote the input required for an exact output amount."""
        from_symbol, to_symbol = normalize_symbol(from_symbol), normalize_symbol(to_symbol)
        fee = fee_fraction(market, from_symbol, to_symbol, self.config)
        result = SwapQuoteResult(
            from_symbol=from_symbol,
            to_symbol=to_symbol,
            direction=QuoteDirection.EXACT_OUT,
            input_amount="",
            output_amount="",
            fee=fee,
        )

        amount_out = parse_amount(output_amount)
        if amount_out is None or amount_out < 0:
            return result.model_copy(update={"error": QuoteError.INVALID_AMOUNT})

        output_str = format_amount(amount_out, self.config.amount_decimals)
        rate = market.exchange_rate(from_symbol, to_symbol)
        if rate == 0:
            return self._unavailable(result.model_copy(update={"output_amount": output_str}))

        solution = solve_inverse(market, from_symbol, to_symbol, amount_out, rate, self.config)
        input_str = format_amount(solution.amount_in, self.config.amount_decimals)

        logger.debug(
            "quote_computed",
            direction=QuoteDirection.EXACT_OUT.value,
            from_symbol=from_symbol,
            to_symbol=to_symbol,
            amount_in=input_str,
            amount_out=output_str,
            impact=solution.impact,
            iterations=solution.iterations,
            converged=solution.converged,
        )
        return result.model_copy(
            update={
                "input_amount": input_str,
                "output_amount": output_str,
                "exchange_rate": rate,
                "price_impact": solution.impact,
            }
        )

    def _unavailable(self, result: SwapQuoteResult) -> SwapQuoteResult:
        logger.info(
            "quote_unavailable",
            from_symbol=result.from_symbol,
            to_symbol=result.to_symbol,
            reason=QuoteError.NO_PRICE.value,
        )
        return result.model_copy(update={"error": QuoteError.NO_PRICE})


__all__ = ["QuoteEngine"]
