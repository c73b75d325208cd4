"""Swap form: state, controller and display helpers."""

from swapquote.form.controller import SwapFormController
from swapquote.form.display import FormView, build_view, fee_percent, impact_percent
from swapquote.form.state import FormPhase, Side, SwapFormState

__all__ = [
    "SwapFormController",
    "SwapFormState",
    "FormPhase",
    "Side",
    "FormView",
    "build_view",
    "fee_percent",
    "impact_percent",
]
