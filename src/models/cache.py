"""Cache entry model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """A cached upstream payload and the moment it goes stale.

    Attributes
    ----------
    payload:
        The decoded upstream JSON body.  Shared between every request that
        hits this entry, so callers must treat it as read-only.
    expires_at:
        Absolute timestamp on the owning cache's clock (``time.monotonic``
        unless a different timer was injected).
    """

    payload: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
