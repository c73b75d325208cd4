"""Engine constants.

Centralizes the numeric parameters of the quote model and the refresh
cadence of the market data collaborators.
"""

# Fee charged when no pool is registered for a pair (0.3%)
DEFAULT_FEE_FRACTION = 0.003

# Impact model: sqrt(trade_value / (tvl / 2)) * IMPACT_SCALE
IMPACT_SCALE = 0.01

# Impact is rounded to this many decimal places to suppress float noise
IMPACT_DECIMALS = 6

# Quoted amounts are formatted with this many fractional digits
AMOUNT_DECIMALS = 6

# Inverse solver bounds
MAX_SOLVER_ITERATIONS = 5
SOLVER_TOLERANCE = 1e-6

# Snapshot refresh cadence of the market data service (seconds)
PRICE_REFRESH_SECONDS = 5 * 60
POOL_REFRESH_SECONDS = 10 * 60

# Default slippage tolerance as a fraction (0.5%)
DEFAULT_SLIPPAGE = 0.005

# Impact severity thresholds as fractions (1% and 5%)
IMPACT_WARNING_THRESHOLD = 0.01
IMPACT_HIGH_THRESHOLD = 0.05

# Pair separator used by the pool registry ("GALA/USDC")
PAIR_SEPARATOR = "/"
