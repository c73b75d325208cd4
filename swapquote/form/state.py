"""Swap form state owned by SwapFormController."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from swapquote.constants import DEFAULT_SLIPPAGE
from swapquote.models.quote import SwapQuoteResult
from swapquote.models.types import normalize_symbol


class Side(str, Enum):
    """A side of the form: the amount field or token selector on it."""

    FROM = "from"
    TO = "to"


class FormPhase(str, Enum):
    """Where the form is in its lifecycle.

    COMPUTING is notional: quotes are synchronous and never block input.
    """

    IDLE = "idle"
    COMPUTING = "computing"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class SwapFormState:
    """Snapshot of the swap form.

    The controller replaces the whole state object on every transition, so
    a reader never sees a half-updated form.

    Attributes:
        from_token: Symbol being sold
        to_token: Symbol being bought (never equal to from_token)
        from_amount: From field as shown ("" when empty)
        to_amount: To field as shown ("" when empty)
        slippage_tolerance: Accepted deviation from the quote (fraction)
        phase: Lifecycle phase
        driving_field: The field the user last typed into; the other is derived
        last_computed: Latest quote behind the derived values, if any
    """

    from_token: str = "GALA"
    to_token: str = "USDC"
    from_amount: str = ""
    to_amount: str = ""
    slippage_tolerance: float = DEFAULT_SLIPPAGE
    phase: FormPhase = FormPhase.IDLE
    driving_field: Side = Side.FROM
    last_computed: SwapQuoteResult | None = None

    def __post_init__(self) -> None:
        if normalize_symbol(self.from_token) == normalize_symbol(self.to_token):
            raise ValueError(f"from_token and to_token must differ: {self.from_token}")

    @property
    def is_submitting(self) -> bool:
        return self.phase == FormPhase.SUBMITTING

    @property
    def driving_amount(self) -> str:
        return self.from_amount if self.driving_field == Side.FROM else self.to_amount

    def pair_and_amounts(self) -> tuple[str, str, str, str]:
        """(from_token, to_token, from_amount, to_amount)."""
        return self.from_token, self.to_token, self.from_amount, self.to_amount
