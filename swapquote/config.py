"""Configuration for the quote engine and market data service."""

from dataclasses import dataclass

from swapquote.constants import (
    AMOUNT_DECIMALS,
    DEFAULT_FEE_FRACTION,
    DEFAULT_SLIPPAGE,
    IMPACT_DECIMALS,
    IMPACT_SCALE,
    MAX_SOLVER_ITERATIONS,
    POOL_REFRESH_SECONDS,
    PRICE_REFRESH_SECONDS,
    SOLVER_TOLERANCE,
)


@dataclass(frozen=True)
class QuoteConfig:
    """Centralized configuration for quote calculation.

    Every pure quoting function accepts an optional config, making it easy
    to test with different parameters while keeping the defaults consistent
    across the codebase.

    Attributes:
        default_fee_fraction: Fee used when no pool matches the pair (0.003)
        impact_scale: Multiplier of the square-root impact model (0.01)
        impact_decimals: Decimal places impact is rounded to (6)
        amount_decimals: Fractional digits of formatted amounts (6)
        max_solver_iterations: Iteration cap of the inverse solver (5)
        solver_tolerance: Absolute output error accepted by the solver (1e-6)
    """

    default_fee_fraction: float = DEFAULT_FEE_FRACTION
    impact_scale: float = IMPACT_SCALE
    impact_decimals: int = IMPACT_DECIMALS
    amount_decimals: int = AMOUNT_DECIMALS
    max_solver_iterations: int = MAX_SOLVER_ITERATIONS
    solver_tolerance: float = SOLVER_TOLERANCE


@dataclass(frozen=True)
class ServiceConfig:
    """Configuration for the market data service and swap form.

    Attributes:
        price_ttl_seconds: Age after which the price snapshot is refetched
        pool_ttl_seconds: Age after which the pool snapshot is refetched
        default_slippage: Slippage tolerance a new form starts with (fraction)
    """

    price_ttl_seconds: float = PRICE_REFRESH_SECONDS
    pool_ttl_seconds: float = POOL_REFRESH_SECONDS
    default_slippage: float = DEFAULT_SLIPPAGE


# Default configuration instances
DEFAULT_QUOTE_CONFIG = QuoteConfig()
DEFAULT_SERVICE_CONFIG = ServiceConfig()
