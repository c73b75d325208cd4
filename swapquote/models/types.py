"""Shared helpers for symbols, pair keys and amount strings.

Form fields carry amounts as strings and quotes are returned as strings,
so parsing and formatting live here in one place.
"""

import math
from typing import Any

from swapquote.constants import AMOUNT_DECIMALS, PAIR_SEPARATOR


def normalize_symbol(symbol: str) -> str:
    """Normalize a token symbol for lookups (trimmed, upper case).

    Args:
        symbol: A token symbol such as "gala" or " USDC "

    Returns:
        The canonical symbol ("GALA", "USDC")
    """
    return symbol.strip().upper()


def split_pair(pair: str) -> tuple[str, str]:
    """Split a pair string "A/B" into its two normalized symbols.

    Raises:
        ValueError: If the pair does not contain exactly two distinct symbols
    """
    parts = pair.split(PAIR_SEPARATOR)
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise ValueError(f"Pair must be formatted as 'A{PAIR_SEPARATOR}B': {pair!r}")
    token_a, token_b = normalize_symbol(parts[0]), normalize_symbol(parts[1])
    if token_a == token_b:
        raise ValueError(f"Pair must join two different tokens: {pair!r}")
    return token_a, token_b


def pair_key(token_a: str, token_b: str) -> frozenset[str]:
    """Undirected lookup key for a token pair."""
    return frozenset([normalize_symbol(token_a), normalize_symbol(token_b)])


def parse_amount(value: Any) -> float | None:
    """Parse a user supplied amount.

    Accepts numbers and numeric strings. Empty strings, None, booleans,
    non-numeric text and non-finite values (nan, inf) all yield None.
    Negative values are returned as-is; callers decide how to guard them.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def format_amount(value: float, decimals: int = AMOUNT_DECIMALS) -> str:
    """Format an amount with a fixed number of fractional digits."""
    # Avoid rendering "-0.000000" for tiny negative float residue
    if value == 0 or abs(value) < 0.5 * 10**-decimals:
        value = 0.0
    return f"{value:.{decimals}f}"
