"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from swapquote.form import SwapFormController
from swapquote.market import MarketSnapshot
from swapquote.models.market import LiquidityPool
from swapquote.trades import ExecutionResult, TradeRecord, TradeRequest
from tests.helpers import make_market, make_pool

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def market_file() -> Path:
    """Path of the JSON market fixture."""
    return FIXTURES_DIR / "market.json"


# =============================================================================
# Mock collaborators
# =============================================================================


class MockTradeExecutor:
    """Mock trade executor with configurable outcome.

    Usage:
        # Always succeed
        executor = MockTradeExecutor()

        # Report failure
        executor = MockTradeExecutor(ExecutionResult(success=False, error="rejected"))

        # Raise from execute()
        executor = MockTradeExecutor(raises=RuntimeError("rpc down"))

        # Cancelled mid-flight
        executor = MockTradeExecutor(raises=asyncio.CancelledError())
    """

    def __init__(
        self,
        result: ExecutionResult | None = None,
        raises: BaseException | None = None,
    ) -> None:
        self.result = result or ExecutionResult(success=True, tx_hash="0xabc", wallet="client|1")
        self.raises = raises
        self.trades: list[TradeRequest] = []  # Track calls for assertions
        self.observed_phases: list[str] = []
        self.controller: SwapFormController | None = None

    async def execute(self, trade: TradeRequest) -> ExecutionResult:
        self.trades.append(trade)
        if self.controller is not None:
            self.observed_phases.append(self.controller.state.phase.value)
        if self.raises is not None:
            raise self.raises
        return self.result


class MockTradeRecorder:
    """Mock trade recorder that stores records, or raises if configured."""

    def __init__(self, raises: Exception | None = None) -> None:
        self.raises = raises
        self.records: list[TradeRecord] = []

    def record_trade(self, record: TradeRecord) -> None:
        if self.raises is not None:
            raise self.raises
        self.records.append(record)


# =============================================================================
# Pytest fixtures
# =============================================================================


@pytest.fixture
def gala_usdc_pool() -> LiquidityPool:
    """GALA/USDC pool with 1M TVL and the standard 0.3% fee."""
    return make_pool("GALA/USDC", tvl=1_000_000, fee=0.003)


@pytest.fixture
def market_no_pools() -> MarketSnapshot:
    """Default prices, no pools: quotes carry no price impact."""
    return make_market()


@pytest.fixture
def market_with_pool(gala_usdc_pool: LiquidityPool) -> MarketSnapshot:
    """Default prices and the GALA/USDC pool."""
    return make_market(pools=[gala_usdc_pool])


@pytest.fixture
def executor() -> MockTradeExecutor:
    return MockTradeExecutor()


@pytest.fixture
def recorder() -> MockTradeRecorder:
    return MockTradeRecorder()


@pytest.fixture
def controller(
    market_no_pools: MarketSnapshot,
    executor: MockTradeExecutor,
    recorder: MockTradeRecorder,
) -> SwapFormController:
    """A GALA -> USDC form quoting against the no-pool market."""
    form = SwapFormController(
        market=lambda: market_no_pools,
        executor=executor,
        recorder=recorder,
    )
    executor.controller = form
    return form
