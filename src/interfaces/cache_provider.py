"""Abstract base class for response cache providers.

Defines the contract for the proxy's response cache: a bounded key-value
store of upstream payloads keyed by request URL, each entry carrying its own
expiry.  The only implementation today is in-memory; the adapter pattern
keeps the orchestrator unaware of the backing store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from src.models.cache import CacheEntry


class ICacheProvider(ABC):
    """Contract for response cache services.

    Operations are async so implementations can guard their state with an
    ``asyncio.Lock`` (or talk to a network store) without blocking the event
    loop.  Implementations must be safe for concurrent use by many request
    coroutines.
    """

    @abstractmethod
    async def get(self, key: str) -> CacheEntry | None:
        """Look up the entry stored under *key*.

        Parameters
        ----------
        key:
            The request key to look up.

        Returns
        -------
        CacheEntry or None
            The entry if present and not expired; ``None`` otherwise.  A hit
            marks the key as most recently used.
        """

    @abstractmethod
    async def put(self, key: str, payload: Any, ttl: float | None = None) -> CacheEntry:
        """Insert or replace the entry stored under *key*.

        Parameters
        ----------
        key:
            The request key.
        payload:
            The decoded upstream body.  Stored as-is and shared with readers.
        ttl:
            Time-to-live in seconds.  ``None`` uses the provider's default.

        Returns
        -------
        CacheEntry
            The entry now stored under *key*.
        """
