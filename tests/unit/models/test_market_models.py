"""Tests for market data models and amount helpers."""

import math

import pytest
from pydantic import ValidationError

from swapquote.models import (
    LiquidityPool,
    QuoteDirection,
    SwapQuoteRequest,
    TokenPrice,
    format_amount,
    pair_key,
    parse_amount,
    split_pair,
)


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1000", 1000.0),
            (" 12.5 ", 12.5),
            (7, 7.0),
            (0.25, 0.25),
            ("-3", -3.0),
            ("0", 0.0),
        ],
    )
    def test_numeric_values(self, value, expected):
        assert parse_amount(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "abc", "1,000", "nan", "inf", True, [1]])
    def test_non_numeric_values_return_none(self, value):
        assert parse_amount(value) is None

    def test_float_nan_returns_none(self):
        assert parse_amount(math.nan) is None


class TestFormatAmount:
    """Tests for format_amount."""

    def test_six_decimals(self):
        assert format_amount(25) == "25.000000"
        assert format_amount(0.0000004) == "0.000000"

    def test_negative_residue_renders_as_zero(self):
        assert format_amount(-1e-12) == "0.000000"

    def test_custom_decimals(self):
        assert format_amount(1.23456, decimals=2) == "1.23"


class TestPairs:
    """Tests for pair helpers."""

    def test_split_pair_normalizes(self):
        assert split_pair(" gala/Usdc ") == ("GALA", "USDC")

    @pytest.mark.parametrize("pair", ["GALAUSDC", "GALA/", "/USDC", "A/B/C", "GALA/gala"])
    def test_split_pair_rejects_malformed(self, pair):
        with pytest.raises(ValueError):
            split_pair(pair)

    def test_pair_key_is_undirected(self):
        assert pair_key("GALA", "USDC") == pair_key("usdc", "gala")


class TestTokenPrice:
    """Tests for the TokenPrice model."""

    def test_alias_and_normalization(self):
        price = TokenPrice.model_validate({"symbol": "gala", "price": 0.025, "change24h": 2.5})
        assert price.symbol == "GALA"
        assert price.change_24h == 2.5

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            TokenPrice(symbol="GALA", price=-1)

    def test_is_frozen(self):
        price = TokenPrice(symbol="GALA", price=0.025)
        with pytest.raises(ValidationError):
            price.price = 1.0


class TestLiquidityPool:
    """Tests for the LiquidityPool model."""

    def test_pair_normalized(self):
        pool = LiquidityPool(pair="usdc/gala", tvl=1000)
        assert pool.pair == "USDC/GALA"
        assert pool.tokens == ("USDC", "GALA")

    def test_default_fee(self):
        assert LiquidityPool(pair="GALA/USDC", tvl=1000).fee == 0.003

    def test_fee_must_be_fraction(self):
        with pytest.raises(ValidationError):
            LiquidityPool(pair="GALA/USDC", tvl=1000, fee=30)

    def test_negative_tvl_rejected(self):
        with pytest.raises(ValidationError):
            LiquidityPool(pair="GALA/USDC", tvl=-1)

    def test_malformed_pair_rejected(self):
        with pytest.raises(ValidationError):
            LiquidityPool(pair="GALA-USDC", tvl=1000)

    def test_reserve_of(self):
        pool = LiquidityPool(pair="GALA/USDC", tvl=1000, reserve0=40_000, reserve1=1_000)
        assert pool.reserve_of("gala") == 40_000
        assert pool.reserve_of("USDC") == 1_000
        with pytest.raises(ValueError, match="not in pool"):
            pool.reserve_of("WETH")


class TestSwapQuoteRequest:
    """Tests for SwapQuoteRequest validation."""

    def test_exact_in(self):
        request = SwapQuoteRequest(fromSymbol="GALA", toSymbol="USDC", inputAmount=1000)
        assert request.direction == QuoteDirection.EXACT_IN
        assert request.amount == 1000

    def test_exact_out(self):
        request = SwapQuoteRequest(from_symbol="GALA", to_symbol="USDC", output_amount=25)
        assert request.direction == QuoteDirection.EXACT_OUT
        assert request.amount == 25

    def test_both_amounts_rejected(self):
        with pytest.raises(ValidationError, match="Exactly one"):
            SwapQuoteRequest(from_symbol="GALA", to_symbol="USDC", input_amount=1, output_amount=1)

    def test_no_amount_rejected(self):
        with pytest.raises(ValidationError, match="Exactly one"):
            SwapQuoteRequest(from_symbol="GALA", to_symbol="USDC")

    def test_same_token_rejected(self):
        with pytest.raises(ValidationError, match="against itself"):
            SwapQuoteRequest(from_symbol="GALA", to_symbol="gala", input_amount=1)

    def test_amount_without_either_side_raises(self):
        """Unvalidated requests report the missing amount instead of returning None."""
        request = SwapQuoteRequest.model_construct(from_symbol="GALA", to_symbol="USDC")

        with pytest.raises(ValueError, match="no amount"):
            request.amount
