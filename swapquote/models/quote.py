"""Request and result models for swap quotes."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from swapquote.models.types import normalize_symbol


class QuoteDirection(str, Enum):
    """Which side of the swap the caller fixed."""

    EXACT_IN = "exact_in"
    EXACT_OUT = "exact_out"


class QuoteError(str, Enum):
    """Reasons a quote could not be produced."""

    NO_PRICE = "no_price"
    INVALID_AMOUNT = "invalid_amount"


class SwapQuoteRequest(BaseModel):
    """A request for a quote in one direction.

    Exactly one of input_amount (exact in) and output_amount (exact out)
    must be supplied.
    """

    from_symbol: str = Field(alias="fromSymbol", min_length=1)
    to_symbol: str = Field(alias="toSymbol", min_length=1)
    input_amount: float | None = Field(default=None, alias="inputAmount")
    output_amount: float | None = Field(default=None, alias="outputAmount")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _check_request(self) -> "SwapQuoteRequest":
        if (self.input_amount is None) == (self.output_amount is None):
            raise ValueError("Exactly one of inputAmount and outputAmount must be supplied")
        if normalize_symbol(self.from_symbol) == normalize_symbol(self.to_symbol):
            raise ValueError(f"Cannot quote {self.from_symbol} against itself")
        return self

    @property
    def direction(self) -> QuoteDirection:
        if self.input_amount is not None:
            return QuoteDirection.EXACT_IN
        return QuoteDirection.EXACT_OUT

    @property
    def amount(self) -> float:
        """The supplied amount, whichever side it is on."""
        if self.input_amount is not None:
            return self.input_amount
        if self.output_amount is not None:
            return self.output_amount
        raise ValueError("Request carries no amount")


class SwapQuoteResult(BaseModel):
    """Result of a quote, consumed immediately by the presentation layer.

    The solved-for amount is an empty string when no quote is available;
    a legitimate zero quote is never empty.

    Attributes:
        input_amount: Amount of from_symbol paid (given or solved for)
        output_amount: Amount of to_symbol received (given or solved for)
        exchange_rate: Mid-price rate, units of to_symbol per from_symbol
        price_impact: Impact fraction applied to the trade
        fee: Pool fee fraction for the pair
        error: Set when no quote could be produced
    """

    from_symbol: str = Field(alias="fromSymbol")
    to_symbol: str = Field(alias="toSymbol")
    direction: QuoteDirection
    input_amount: str = Field(alias="inputAmount")
    output_amount: str = Field(alias="outputAmount")
    exchange_rate: float = Field(default=0.0, alias="exchangeRate")
    price_impact: float = Field(default=0.0, alias="priceImpact")
    fee: float = 0.0
    error: QuoteError | None = None

    model_config = {"populate_by_name": True}

    @property
    def is_available(self) -> bool:
        """True if both amounts are known."""
        return self.error is None and self.input_amount != "" and self.output_amount != ""

    @property
    def solved_amount(self) -> str:
        """The amount the engine computed (output for exact in, input for exact out)."""
        if self.direction == QuoteDirection.EXACT_IN:
            return self.output_amount
        return self.input_amount
