"""Shared token constants for tests.

Usage:
    from tests.helpers import GALA, USDC
    # or
    from tests.helpers.constants import GALA, USDC
"""

# =============================================================================
# Symbols
# =============================================================================

GALA = "GALA"
USDC = "USDC"
USDT = "USDT"
WBTC = "WBTC"
WETH = "WETH"

# Token the price oracle knows nothing about
UNKNOWN = "XYZ"

# =============================================================================
# Unit prices (quote currency: USD)
# =============================================================================

PRICES = {
    GALA: 0.025,
    USDC: 1.0,
    USDT: 1.0,
    WBTC: 100_000.0,
    WETH: 3333.0,
}

# Depth of the default GALA/USDC pool
DEFAULT_TVL = 1_000_000.0
