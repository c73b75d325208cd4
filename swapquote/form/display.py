"""Presentation values derived from the form state.

This is the one place fractions become percentages. Everything upstream
(pools, engine, form state) carries fees and impact as fractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from swapquote.constants import AMOUNT_DECIMALS, IMPACT_HIGH_THRESHOLD, IMPACT_WARNING_THRESHOLD
from swapquote.form.state import SwapFormState
from swapquote.models.quote import QuoteError
from swapquote.models.types import format_amount, parse_amount

CANNOT_CALCULATE = "Cannot calculate"


def to_percent(fraction: float) -> float:
    """Convert a fraction to a percentage (0.003 -> 0.3)."""
    return fraction * 100


def fee_percent(fraction: float) -> str:
    """Fee label, e.g. "0.30%"."""
    return f"{to_percent(fraction):.2f}%"


def impact_percent(fraction: float) -> str:
    """Price impact label, e.g. "0.007%"."""
    return f"{to_percent(fraction):.3f}%"


def impact_severity(fraction: float) -> str:
    """Badge level for a price impact: "high" above 5%, "medium" above 1%."""
    if abs(fraction) > IMPACT_HIGH_THRESHOLD:
        return "high"
    if abs(fraction) > IMPACT_WARNING_THRESHOLD:
        return "medium"
    return "low"


def format_exchange_rate(from_token: str, to_token: str, from_amount: str, to_amount: str) -> str:
    """Effective rate of the amounts on the form, e.g. "1 GALA = 0.025000 USDC".

    Returns "" unless both amounts are positive numbers.
    """
    amount_in = parse_amount(from_amount)
    amount_out = parse_amount(to_amount)
    if amount_in is None or amount_out is None or amount_in <= 0 or amount_out <= 0:
        return ""
    rate = amount_out / amount_in
    return f"1 {from_token} = {format_amount(rate, AMOUNT_DECIMALS)} {to_token}"


def minimum_received(to_amount: str, slippage_tolerance: float) -> str:
    """Smallest output accepted under the slippage tolerance ("" if unknown)."""
    amount_out = parse_amount(to_amount)
    if amount_out is None or amount_out <= 0:
        return ""
    return format_amount(amount_out * (1 - slippage_tolerance), AMOUNT_DECIMALS)


@dataclass(frozen=True)
class FormView:
    """Display strings for one render of the swap form."""

    from_token: str
    to_token: str
    from_amount: str
    to_amount: str
    exchange_rate: str
    fee: str
    price_impact: str
    impact_severity: str | None
    minimum_received: str
    slippage: str
    status: str
    can_submit: bool


def build_view(state: SwapFormState) -> FormView:
    """Derive everything the presentation layer shows from the form state."""
    quote = state.last_computed
    fee = fee_percent(quote.fee) if quote is not None else ""
    price_impact = ""
    severity = None
    status = ""
    if quote is not None and quote.error == QuoteError.NO_PRICE:
        status = CANNOT_CALCULATE
    elif quote is not None and quote.is_available:
        price_impact = impact_percent(quote.price_impact)
        severity = impact_severity(quote.price_impact)

    amount_in = parse_amount(state.from_amount)
    amount_out = parse_amount(state.to_amount)
    can_submit = (
        not state.is_submitting
        and amount_in is not None
        and amount_out is not None
        and amount_in > 0
        and amount_out > 0
    )

    return FormView(
        from_token=state.from_token,
        to_token=state.to_token,
        from_amount=state.from_amount,
        to_amount=state.to_amount,
        exchange_rate=format_exchange_rate(
            state.from_token, state.to_token, state.from_amount, state.to_amount
        ),
        fee=fee,
        price_impact=price_impact,
        impact_severity=severity,
        minimum_received=minimum_received(state.to_amount, state.slippage_tolerance),
        slippage=f"{to_percent(state.slippage_tolerance):g}%",
        status=status,
        can_submit=can_submit,
    )
