"""Pool registry: undirected lookup of liquidity pools by token pair.

Pools arrive from the pool registry accessor as a flat list whose pair
strings may list the tokens in either order. The registry indexes them by
the unordered pair so "GALA/USDC" and "USDC/GALA" resolve to the same pool.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from swapquote.models.market import LiquidityPool
from swapquote.models.types import pair_key

logger = structlog.get_logger()


class PoolRegistry:
    """Read-only index of liquidity pools keyed by unordered token pair.

    If the source lists more than one pool for a pair, the last one wins,
    matching how a refreshed pool list replaces stale entries.
    """

    def __init__(self, pools: Iterable[LiquidityPool] | None = None) -> None:
        """Initialize the registry with optional pools.

        Args:
            pools: Pools to index. If None, starts empty.
        """
        self._pools: dict[frozenset[str], LiquidityPool] = {}
        if pools:
            for pool in pools:
                self._add(pool)

    def _add(self, pool: LiquidityPool) -> None:
        key = pair_key(*pool.tokens)
        if key in self._pools:
            logger.debug(
                "pool_replaced",
                pair=pool.pair,
                old_tvl=self._pools[key].tvl,
                new_tvl=pool.tvl,
            )
        self._pools[key] = pool

    def get_pool(self, token_a: str, token_b: str) -> LiquidityPool | None:
        """Get the pool for a token pair (order independent).

        Args:
            token_a: First token symbol (any case)
            token_b: Second token symbol (any case)

        Returns:
            LiquidityPool if found, None otherwise
        """
        return self._pools.get(pair_key(token_a, token_b))

    def has_pool(self, token_a: str, token_b: str) -> bool:
        return pair_key(token_a, token_b) in self._pools

    @property
    def pool_count(self) -> int:
        return len(self._pools)

    def __iter__(self) -> Iterator[LiquidityPool]:
        return iter(self._pools.values())

    def __len__(self) -> int:
        return len(self._pools)


__all__ = ["PoolRegistry"]
