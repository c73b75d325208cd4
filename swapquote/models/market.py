"""Pydantic models for market data snapshots.

Both models are immutable: the engine only reads the latest snapshot it is
handed and never mutates it.
"""

from pydantic import BaseModel, Field, field_validator

from swapquote.constants import DEFAULT_FEE_FRACTION
from swapquote.models.types import normalize_symbol, split_pair


class TokenPrice(BaseModel):
    """Current unit price of a token."""

    symbol: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    change_24h: float = Field(
        default=0.0,
        alias="change24h",
        description="Price change over the last 24 hours, in percent.",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("symbol")
    @classmethod
    def _normalize_symbol(cls, value: str) -> str:
        return normalize_symbol(value)


class LiquidityPool(BaseModel):
    """A liquidity pool as reported by the pool registry.

    The pair is formatted "A/B" but its order is not guaranteed, so pools
    are always looked up by the unordered pair.
    """

    pair: str
    token0: str | None = None
    token1: str | None = None
    tvl: float = Field(ge=0, allow_inf_nan=False, description="Total value locked.")
    fee: float = Field(
        default=DEFAULT_FEE_FRACTION,
        ge=0,
        le=1,
        description="Swap fee as a fraction (0.003 = 0.3%).",
    )
    volume_24h: float = Field(default=0.0, ge=0, alias="volume24h")
    apy: float = 0.0
    reserve0: float = Field(default=0.0, ge=0)
    reserve1: float = Field(default=0.0, ge=0)
    price: float | None = None

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("pair")
    @classmethod
    def _validate_pair(cls, value: str) -> str:
        token_a, token_b = split_pair(value)
        return f"{token_a}/{token_b}"

    @property
    def tokens(self) -> tuple[str, str]:
        """The two symbols of the pair, in the order the pair string lists them."""
        return split_pair(self.pair)

    def reserve_of(self, symbol: str) -> float:
        """Reserve held for a token of this pool.

        Raises:
            ValueError: If the token is not part of the pool
        """
        symbol_norm = normalize_symbol(symbol)
        token_a, token_b = self.tokens
        if symbol_norm == token_a:
            return self.reserve0
        elif symbol_norm == token_b:
            return self.reserve1
        else:
            raise ValueError(f"Token {symbol} not in pool {self.pair}")
