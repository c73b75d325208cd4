"""Inverse quote: desired output amount -> required input amount.

Impact depends on the input amount, which is the unknown, so there is no
closed form once a pool is involved. The solver starts from the
impact-free mid-price estimate and applies first-order corrections:

    estimate <- estimate - error / (rate * (1 - impact))

for at most `max_solver_iterations` rounds, stopping once the simulated
output is within `solver_tolerance` of the target. The bound is fixed, so
the solve always terminates; for very large trades against shallow pools
the result may carry residual error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from swapquote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from swapquote.models.types import format_amount, parse_amount
from swapquote.quoting.forward import simulate_output
from swapquote.quoting.impact import calculate_price_impact

if TYPE_CHECKING:
    from swapquote.market.snapshot import MarketSnapshot

logger = structlog.get_logger()


@dataclass(frozen=True)
class InverseSolution:
    """Outcome of an inverse solve.

    Attributes:
        amount_in: Required input amount (never negative)
        impact: Impact fraction at amount_in
        iterations: Number of model evaluations performed
        converged: Whether the output error fell below the tolerance
    """

    amount_in: float
    impact: float
    iterations: int
    converged: bool


def solve_inverse(
    market: MarketSnapshot,
    from_symbol: str,
    to_symbol: str,
    amount_out: float,
    rate: float,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> InverseSolution:
    """Find the input amount whose simulated output equals amount_out.

    Args:
        market: Snapshot holding prices and pools
        from_symbol: Token being sold
        to_symbol: Token being bought
        amount_out: Desired output (>= 0)
        rate: Mid-price rate from the snapshot (> 0)
        config: Solver bounds and impact parameters

    Returns:
        InverseSolution with the last estimate
    """
    estimate = amount_out / rate
    impact = 0.0

    for iteration in range(1, config.max_solver_iterations + 1):
        computed, impact = simulate_output(market, from_symbol, to_symbol, estimate, rate, config)
        error = computed - amount_out
        if abs(error) < config.solver_tolerance:
            return InverseSolution(estimate, impact, iteration, converged=True)

        slope = rate * (1 - impact)
        if slope <= 0:
            # Impact saturated at 1.0; no correction can reach the target
            break
        estimate = max(0.0, estimate - error / slope)

    trade_value = market.trade_value(from_symbol, estimate)
    impact = calculate_price_impact(market, from_symbol, to_symbol, trade_value, config)
    logger.debug(
        "inverse_solve_not_converged",
        from_symbol=from_symbol,
        to_symbol=to_symbol,
        amount_out=amount_out,
        estimate=estimate,
        max_iterations=config.max_solver_iterations,
    )
    return InverseSolution(estimate, impact, config.max_solver_iterations, converged=False)


def quote_inverse(
    market: MarketSnapshot,
    from_symbol: str,
    to_symbol: str,
    desired_output: Any,
    config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
) -> str:
    """Quote the input amount required for an exact output.

    Args:
        market: Snapshot holding prices and pools
        from_symbol: Token being sold
        to_symbol: Token being bought
        desired_output: Amount of to_symbol wanted, as typed or a number
        config: Quote parameters

    Returns:
        The input formatted with config.amount_decimals digits ("0.000000"
        for a zero target), or "" when no quote is available (bad amount
        or missing price)
    """
    amount_out = parse_amount(desired_output)
    if amount_out is None or amount_out < 0:
        return ""

    rate = market.exchange_rate(from_symbol, to_symbol)
    if rate == 0:
        logger.debug("quote_unavailable", from_symbol=from_symbol, to_symbol=to_symbol)
        return ""

    solution = solve_inverse(market, from_symbol, to_symbol, amount_out, rate, config)
    return format_amount(solution.amount_in, config.amount_decimals)
