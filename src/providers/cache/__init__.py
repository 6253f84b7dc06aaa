"""Cache providers.

In-memory LRU + TTL cache of Songlink responses, keyed by the full upstream
request URL.  A hit skips the upstream call entirely; entries live for 30 days
by default and the store is bounded at 1000 entries.

MemoryCacheProvider is per-process.  Running several workers gives each its
own cache; a shared backend would implement ICacheProvider without touching
the orchestrator.
"""

from src.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
