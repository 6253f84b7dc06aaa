"""In-memory response cache built on ``cachetools.TTLCache``.

``TTLCache`` already combines the two policies the proxy needs: a hard size
bound with least-recently-used eviction, and a uniform time-to-live.  This
provider adds the ``asyncio.Lock`` that serializes access from concurrent
request coroutines and wraps payloads in :class:`CacheEntry` so every entry
carries its own expiry.

Eviction is not strict LRU.  Every write first purges all entries whose TTL
has run out, so when an expired entry exists it is dropped instead of the
live least-recently-used one.  Reads still check expiry lazily and never
return an expired payload.

State lives only in process memory and is lost on restart.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from typing import Any

import structlog
from cachetools import TTLCache

from src.interfaces.cache_provider import ICacheProvider
from src.models.cache import CacheEntry
from src.utils.errors import ConfigurationError

logger = structlog.get_logger(logger_name=__name__)

DEFAULT_MAX_SIZE = 1000
DEFAULT_TTL_SECONDS = 2_592_000  # 30 days


class MemoryCacheProvider(ICacheProvider):
    """Bounded LRU cache of upstream payloads with lazy TTL expiry.

    Parameters
    ----------
    max_size:
        Maximum number of entries.  Inserting a new key into a full cache
        evicts the least-recently-used entry (expired entries go first).
    ttl:
        Default time-to-live in seconds.  Also the ceiling for any per-call
        ``ttl`` passed to :meth:`put`, because ``TTLCache`` drops entries at
        its own uniform TTL.
    timer:
        Zero-argument clock returning seconds.  Injected in tests to move
        time forward without sleeping.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: float = DEFAULT_TTL_SECONDS,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_size <= 0:
            raise ConfigurationError(f"Cache max_size must be positive, got {max_size}")
        if ttl <= 0:
            raise ConfigurationError(f"Cache ttl must be positive, got {ttl}")

        self._max_size = max_size
        self._default_ttl = ttl
        self._timer = timer
        self._cache: TTLCache[str, CacheEntry] = TTLCache(maxsize=max_size, ttl=ttl, timer=timer)
        self._lock = asyncio.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    def __len__(self) -> int:
        return len(self._cache)

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def get(self, key: str) -> CacheEntry | None:
        """Return the live entry for *key*, or ``None`` if missing/expired.

        A hit moves *key* to the most-recently-used position.
        """
        async with self._lock:
            entry = self._cache.get(key)
            if entry is not None and entry.is_expired(self._timer()):
                entry = None

        if entry is None:
            logger.debug("cache_miss", key=key)
        else:
            logger.debug("cache_hit", key=key)
        return entry

    async def put(self, key: str, payload: Any, ttl: float | None = None) -> CacheEntry:
        """Store *payload* under *key*, replacing any existing entry.

        The entry's expiry is reset to ``now + ttl`` and the key becomes the
        most recently used.  Any already-expired entries are purged first;
        only when none exist does a full cache evict its least-recently-used
        live entry.
        """
        effective_ttl = self._default_ttl if ttl is None else min(ttl, self._default_ttl)

        async with self._lock:
            entry = CacheEntry(payload=payload, expires_at=self._timer() + effective_ttl)
            self._cache[key] = entry
            size = len(self._cache)

        logger.debug("cache_set", key=key, ttl=effective_ttl, size=size)
        return entry
