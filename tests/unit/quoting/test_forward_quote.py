"""Tests for the forward quote."""

import pytest

from swapquote.quoting import quote_forward
from tests.helpers import GALA, UNKNOWN, USDC, WBTC, make_market, make_prices


class TestQuoteForward:
    """Tests for quote_forward."""

    def test_no_pool_uses_mid_price(self, market_no_pools):
        """1000 GALA at 0.025 USDC each with no pool modelled."""
        assert quote_forward(market_no_pools, GALA, USDC, "1000") == "25.000000"

    def test_pool_applies_impact(self, market_with_pool):
        """10,000 GALA = 250 USDC of value, impact 0.000224 against 1M TVL."""
        assert quote_forward(market_with_pool, GALA, USDC, "10000") == "249.944000"

    def test_small_trade_against_pool(self, market_with_pool):
        assert quote_forward(market_with_pool, GALA, USDC, "1000") == "24.998225"

    def test_reverse_direction(self, market_no_pools):
        assert quote_forward(market_no_pools, USDC, GALA, "25") == "1000.000000"

    def test_numeric_input(self, market_no_pools):
        assert quote_forward(market_no_pools, GALA, USDC, 1000) == "25.000000"

    @pytest.mark.parametrize("amount", ["", "  ", "abc", "0", "-5", "nan", None])
    def test_invalid_amount_returns_empty(self, market_with_pool, amount):
        assert quote_forward(market_with_pool, GALA, USDC, amount) == ""

    def test_missing_to_price_returns_empty(self, market_no_pools):
        assert quote_forward(market_no_pools, GALA, UNKNOWN, "1000") == ""

    def test_missing_from_price_returns_empty(self, market_no_pools):
        assert quote_forward(market_no_pools, UNKNOWN, GALA, "1000") == ""

    def test_zero_price_returns_empty(self):
        market = make_market(prices=make_prices(USDC=0.0))
        assert quote_forward(market, GALA, USDC, "1000") == ""

    def test_tiny_output_is_zero_not_empty(self):
        market = make_market(prices=make_prices(DUST=1e-9))
        assert quote_forward(market, "DUST", WBTC, "1") == "0"

    def test_output_never_exceeds_mid_price(self, market_with_pool):
        for amount in ["1", "100", "10000", "1000000"]:
            quoted = float(quote_forward(market_with_pool, GALA, USDC, amount))
            assert quoted <= float(amount) * 0.025
