"""Pool management package.

Provides PoolRegistry for undirected pool lookups by token pair.
"""

from .registry import PoolRegistry

__all__ = ["PoolRegistry"]
