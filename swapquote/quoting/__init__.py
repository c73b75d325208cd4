"""Quoting package: price impact, forward quotes and the inverse solver.

The functions here are pure: they read a MarketSnapshot and return values
without touching any state.

Usage:
    from swapquote.quoting import QuoteEngine, quote_forward, quote_inverse

    out = quote_forward(snapshot, "GALA", "USDC", "1000")   # "25.000000"
    needed = quote_inverse(snapshot, "GALA", "USDC", out)   # "1000.000000"
"""

from swapquote.quoting.engine import QuoteEngine
from swapquote.quoting.forward import quote_forward, simulate_output
from swapquote.quoting.impact import calculate_price_impact, impact_for_depth
from swapquote.quoting.inverse import InverseSolution, quote_inverse, solve_inverse

__all__ = [
    "QuoteEngine",
    "InverseSolution",
    "calculate_price_impact",
    "impact_for_depth",
    "quote_forward",
    "quote_inverse",
    "simulate_output",
    "solve_inverse",
]
