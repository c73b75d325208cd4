"""Interfaces to the trade execution and trade recording collaborators.

Neither collaborator is implemented here: execution (signing, submission)
and persistence of trade history live outside the engine. The swap form
only depends on the narrow protocols below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class TradeRequest:
    """A validated trade handed to the execution collaborator.

    Attributes:
        from_token: Symbol being sold
        to_token: Symbol being bought
        from_amount: Amount of from_token
        to_amount: Quoted amount of to_token
        slippage_tolerance: Maximum accepted deviation from the quote (fraction)
        price_impact: Impact fraction of the quote
        fee: Pool fee fraction
    """

    from_token: str
    to_token: str
    from_amount: float
    to_amount: float
    slippage_tolerance: float
    price_impact: float
    fee: float


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome reported by the execution collaborator."""

    success: bool
    tx_hash: str | None = None
    wallet: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class TradeRecord:
    """A completed trade, as passed to the recording collaborator."""

    from_token: str
    to_token: str
    from_amount: float
    to_amount: float
    price_impact: float
    fee: float
    wallet: str | None = None
    tx_hash: str | None = None


class TradeExecutor(Protocol):
    """Protocol for the trade execution collaborator.

    Cancellation, retries and confirmation tracking belong to the
    implementation.
    """

    async def execute(self, trade: TradeRequest) -> ExecutionResult:
        """Submit a trade and report its outcome."""
        ...


class TradeRecorder(Protocol):
    """Protocol for the best-effort trade recording collaborator."""

    def record_trade(self, record: TradeRecord) -> None:
        """Store a completed trade. May raise; callers swallow failures."""
        ...


class LoggingTradeRecorder:
    """Trade recorder that only emits a structured log line per trade."""

    def record_trade(self, record: TradeRecord) -> None:
        logger.info(
            "trade_recorded",
            from_token=record.from_token,
            to_token=record.to_token,
            from_amount=record.from_amount,
            to_amount=record.to_amount,
            price_impact=record.price_impact,
            fee=record.fee,
            wallet=record.wallet,
            tx_hash=record.tx_hash,
        )


def record_trade_safely(recorder: TradeRecorder | None, record: TradeRecord) -> bool:
    """Record a trade without ever failing the swap.

    Args:
        recorder: The recording collaborator, or None to skip recording
        record: The trade to record

    Returns:
        True if the recorder accepted the trade, False if it was skipped or
        raised (the exception is logged)
    """
    if recorder is None:
        return False
    try:
        recorder.record_trade(record)
    except Exception:
        logger.exception(
            "trade_recording_failed",
            from_token=record.from_token,
            to_token=record.to_token,
            tx_hash=record.tx_hash,
        )
        return False
    return True
