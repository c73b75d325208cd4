"""Tests for the price impact model."""

import math

import pytest

from swapquote.config import QuoteConfig
from swapquote.quoting import calculate_price_impact, impact_for_depth
from swapquote.quoting.impact import round_impact
from tests.helpers import GALA, USDC, WETH, make_market, make_pool


class TestImpactForDepth:
    """Tests for the depth formula."""

    def test_formula_rounded_to_six_places(self):
        # sqrt(250 / 500_000) * 0.01 = 0.00022360... -> 0.000224
        assert impact_for_depth(250, 1_000_000) == pytest.approx(0.000224)

    def test_small_trade(self):
        # sqrt(25 / 500_000) * 0.01 = 0.0000707... -> 0.000071
        assert impact_for_depth(25, 1_000_000) == pytest.approx(0.000071)

    def test_zero_trade_value_is_exactly_zero(self):
        assert impact_for_depth(0, 1_000_000) == 0.0

    def test_negative_trade_value_is_zero(self):
        assert impact_for_depth(-10, 1_000_000) == 0.0

    def test_zero_tvl_is_zero(self):
        assert impact_for_depth(250, 0) == 0.0

    def test_capped_at_one(self):
        assert impact_for_depth(1e12, 1) == 1.0

    def test_custom_scale(self):
        config = QuoteConfig(impact_scale=0.02)
        assert impact_for_depth(250, 1_000_000, config) == pytest.approx(0.000447)

    @pytest.mark.parametrize("tvl", [100_000, 1_000_000, 25_000_000])
    def test_monotonic_in_trade_value(self, tvl):
        values = [0, 0.5, 1, 10, 100, 1_000, 10_000, 100_000, 1_000_000]
        impacts = [impact_for_depth(v, tvl) for v in values]
        assert impacts == sorted(impacts)

    @pytest.mark.parametrize("trade_value", [10, 250, 5_000, 100_000])
    @pytest.mark.parametrize("tvl", [100_000, 1_000_000, 10_000_000])
    def test_deeper_pool_reduces_impact(self, trade_value, tvl):
        shallow = impact_for_depth(trade_value, tvl)
        deep = impact_for_depth(trade_value, tvl * 2)
        assert shallow > 0
        assert deep < shallow


class TestRoundImpact:
    """Tests for half-up rounding."""

    def test_rounds_half_up(self):
        assert round_impact(2.5, 0) == 3
        assert round_impact(0.5, 0) == 1
        assert round_impact(0.25, 1) == pytest.approx(0.3)

    def test_removes_float_noise(self):
        assert round_impact(0.1 + 0.2, 6) == 0.3


class TestCalculatePriceImpact:
    """Tests for pool-backed impact lookup."""

    def test_zero_trade_value(self, market_with_pool):
        assert calculate_price_impact(market_with_pool, GALA, USDC, 0) == 0.0

    def test_no_pool_means_no_impact(self, market_no_pools):
        assert calculate_price_impact(market_no_pools, GALA, USDC, 1_000_000) == 0.0

    def test_pool_found_in_either_order(self, market_with_pool):
        forward = calculate_price_impact(market_with_pool, GALA, USDC, 250)
        backward = calculate_price_impact(market_with_pool, USDC, GALA, 250)
        assert forward == backward == pytest.approx(0.000224)

    def test_empty_pool(self):
        market = make_market(pools=[make_pool("GALA/WETH", tvl=0)])
        assert calculate_price_impact(market, GALA, WETH, 250) == 0.0

    def test_matches_closed_form(self, market_with_pool):
        expected = math.floor(math.sqrt(5_000 / 500_000) * 0.01 * 1e6 + 0.5) / 1e6
        assert calculate_price_impact(market_with_pool, GALA, USDC, 5_000) == expected
