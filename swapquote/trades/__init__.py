"""Trade execution and recording collaborator interfaces."""

from swapquote.trades.collaborators import (
    ExecutionResult,
    LoggingTradeRecorder,
    TradeExecutor,
    TradeRecord,
    TradeRecorder,
    TradeRequest,
    record_trade_safely,
)

__all__ = [
    "ExecutionResult",
    "LoggingTradeRecorder",
    "TradeExecutor",
    "TradeRecord",
    "TradeRecorder",
    "TradeRequest",
    "record_trade_safely",
]
