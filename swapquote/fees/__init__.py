"""Fee lookup module.

Usage:
    from swapquote.fees import fee_fraction

    fee = fee_fraction(snapshot, "GALA", "USDC")  # 0.003 when no pool
"""

from swapquote.fees.calculator import fee_fraction

__all__ = ["fee_fraction"]
