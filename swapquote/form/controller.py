"""Swap form state controller.

The only stateful component of the engine. It reacts to four user events
and keeps the form consistent:

- amount_changed: the typed field drives, the other side is derived
- token_changed: swap one symbol, re-derive from the driving field
- flip_direction: exchange sides and amounts atomically
- submit: validate, hand off to the executor, clear or preserve amounts

Each transition computes its new values first and then replaces the state
object in one assignment, so readers never observe a partial update.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator
from dataclasses import replace

import structlog

from swapquote.config import DEFAULT_SERVICE_CONFIG, ServiceConfig
from swapquote.errors import SubmissionInProgress, SwapError, ValidationError
from swapquote.form.state import FormPhase, Side, SwapFormState
from swapquote.market.snapshot import MarketSnapshot
from swapquote.models.quote import QuoteError, SwapQuoteResult
from swapquote.models.types import normalize_symbol, parse_amount
from swapquote.quoting.engine import QuoteEngine
from swapquote.trades.collaborators import (
    ExecutionResult,
    TradeExecutor,
    TradeRecord,
    TradeRecorder,
    TradeRequest,
    record_trade_safely,
)

logger = structlog.get_logger()


class SwapFormController:
    """Owns a SwapFormState and applies user events to it.

    Args:
        market: Callable returning the latest MarketSnapshot (for example
            MarketDataService.snapshot). Called once per transition.
        engine: Quote engine. A default QuoteEngine is created if None.
        executor: Trade execution collaborator, required for submit().
        recorder: Best-effort trade recorder. Recording is skipped if None.
        state: Initial state. Defaults to GALA -> USDC with empty amounts.
        config: Supplies the default slippage of a fresh form.
    """

    def __init__(
        self,
        market: Callable[[], MarketSnapshot],
        engine: QuoteEngine | None = None,
        executor: TradeExecutor | None = None,
        recorder: TradeRecorder | None = None,
        state: SwapFormState | None = None,
        config: ServiceConfig | None = None,
    ) -> None:
        config = config or DEFAULT_SERVICE_CONFIG
        self._market = market
        self._engine = engine or QuoteEngine()
        self._executor = executor
        self._recorder = recorder
        self._state = state or SwapFormState(slippage_tolerance=config.default_slippage)

    @property
    def state(self) -> SwapFormState:
        return self._state

    @contextlib.contextmanager
    def _computing(self) -> Iterator[None]:
        previous = self._state.phase
        if previous == FormPhase.IDLE:
            self._state = replace(self._state, phase=FormPhase.COMPUTING)
        try:
            yield
        finally:
            if self._state.phase == FormPhase.COMPUTING:
                self._state = replace(self._state, phase=FormPhase.IDLE)

    def _derive(
        self,
        from_token: str,
        to_token: str,
        driving_field: Side,
        value: str,
    ) -> tuple[str, SwapQuoteResult | None]:
        """Quote from the driving field; return (derived amount, quote)."""
        market = self._market()
        if driving_field == Side.FROM:
            result = self._engine.quote_exact_in(market, from_token, to_token, value)
        else:
            result = self._engine.quote_exact_out(market, from_token, to_token, value)

        if result.error == QuoteError.INVALID_AMOUNT:
            return "", None
        return result.solved_amount, result

    def amount_changed(self, field: Side, value: str) -> SwapFormState:
        """The user typed into one amount field.

        The typed field becomes the driving field; only the other field is
        overwritten.
        """
        field = Side(field)
        with self._computing():
            derived, quote = self._derive(
                self._state.from_token, self._state.to_token, field, value
            )
            if field == Side.FROM:
                changes = {"from_amount": value, "to_amount": derived}
            else:
                changes = {"to_amount": value, "from_amount": derived}
            self._state = replace(
                self._state, driving_field=field, last_computed=quote, **changes
            )
        return self._state

    def token_changed(self, side: Side, symbol: str) -> bool:
        """The user picked a token on one side.

        Returns:
            False (state untouched) if the symbol is empty or the pick would
            put the same token on both sides, True otherwise
        """
        side = Side(side)
        symbol = normalize_symbol(symbol)
        state = self._state
        other = state.to_token if side == Side.FROM else state.from_token
        if not symbol:
            logger.info("token_change_rejected", side=side.value, reason="empty_symbol")
            return False
        if symbol == normalize_symbol(other):
            logger.info("token_change_rejected", side=side.value, symbol=symbol)
            return False

        from_token = symbol if side == Side.FROM else state.from_token
        to_token = symbol if side == Side.TO else state.to_token

        with self._computing():
            driving_value = state.driving_amount
            changes: dict[str, object] = {"from_token": from_token, "to_token": to_token}
            if driving_value:
                derived, quote = self._derive(
                    from_token, to_token, state.driving_field, driving_value
                )
                dependent = "to_amount" if state.driving_field == Side.FROM else "from_amount"
                changes[dependent] = derived
                changes["last_computed"] = quote
            else:
                changes["last_computed"] = None
            self._state = replace(self._state, **changes)
        return True

    def flip_direction(self) -> SwapFormState:
        """Exchange the two sides of the form.

        Tokens and amounts swap together; fee, impact and rate are then
        recomputed for the new pair with the new from_amount driving. The
        amounts themselves are kept as swapped, so flipping twice restores
        the original form.
        """
        state = self._state
        from_token, to_token = state.to_token, state.from_token
        from_amount, to_amount = state.to_amount, state.from_amount

        with self._computing():
            quote = None
            if from_amount:
                _, quote = self._derive(from_token, to_token, Side.FROM, from_amount)
            self._state = replace(
                self._state,
                from_token=from_token,
                to_token=to_token,
                from_amount=from_amount,
                to_amount=to_amount,
                driving_field=Side.FROM,
                last_computed=quote,
            )
        return self._state

    def _validated_amounts(self) -> tuple[float, float]:
        state = self._state
        amount_in = parse_amount(state.from_amount)
        if amount_in is None or amount_in <= 0:
            raise ValidationError("from_amount", state.from_amount)
        amount_out = parse_amount(state.to_amount)
        if amount_out is None or amount_out <= 0:
            raise ValidationError("to_amount", state.to_amount)
        return amount_in, amount_out

    async def submit(self) -> ExecutionResult:
        """Validate the form and hand the trade to the executor.

        On success the amounts are cleared and the trade is recorded best
        effort. On failure the amounts are preserved so the user can retry.

        Returns:
            The executor's result (a failed result if the executor raised)

        Raises:
            ValidationError: If either amount is not a finite number > 0.
                The state is left unchanged.
            SubmissionInProgress: If a submission is already running
            SwapError: If no executor is configured
            asyncio.CancelledError: If the executor was cancelled. The form
                returns to IDLE with its amounts preserved.
        """
        if self._state.is_submitting:
            raise SubmissionInProgress("A swap is already being submitted")
        amount_in, amount_out = self._validated_amounts()
        if self._executor is None:
            raise SwapError("No trade executor configured")

        state = self._state
        quote = state.last_computed
        trade = TradeRequest(
            from_token=state.from_token,
            to_token=state.to_token,
            from_amount=amount_in,
            to_amount=amount_out,
            slippage_tolerance=state.slippage_tolerance,
            price_impact=quote.price_impact if quote is not None else 0.0,
            fee=quote.fee if quote is not None else 0.0,
        )

        self._state = replace(state, phase=FormPhase.SUBMITTING)
        logger.info(
            "swap_submitting",
            from_token=trade.from_token,
            to_token=trade.to_token,
            from_amount=trade.from_amount,
            to_amount=trade.to_amount,
        )

        try:
            result = await self._executor.execute(trade)
        except Exception as exc:
            logger.exception(
                "swap_execution_error",
                from_token=trade.from_token,
                to_token=trade.to_token,
            )
            result = ExecutionResult(success=False, error=str(exc))
        except BaseException:
            # Cancelled or interrupted: back to IDLE with the amounts kept
            logger.warning("swap_cancelled", from_token=trade.from_token, to_token=trade.to_token)
            self._state = replace(self._state, phase=FormPhase.IDLE)
            raise

        if not result.success:
            logger.warning("swap_failed", error=result.error)
            self._state = replace(self._state, phase=FormPhase.IDLE)
            return result

        record_trade_safely(
            self._recorder,
            TradeRecord(
                from_token=trade.from_token,
                to_token=trade.to_token,
                from_amount=trade.from_amount,
                to_amount=trade.to_amount,
                price_impact=trade.price_impact,
                fee=trade.fee,
                wallet=result.wallet,
                tx_hash=result.tx_hash,
            ),
        )
        logger.info("swap_succeeded", tx_hash=result.tx_hash)
        self._state = replace(
            self._state,
            phase=FormPhase.IDLE,
            from_amount="",
            to_amount="",
            driving_field=Side.FROM,
            last_computed=None,
        )
        return result
