"""Link proxy domain models: re-exports all public model classes.

    - cache.py : CacheEntry (payload + expiry)
    - links.py : LinkLookupParams, UpstreamResponse, LinkLookupResult
"""

from __future__ import annotations

from src.models.cache import CacheEntry
from src.models.links import LinkLookupParams, LinkLookupResult, UpstreamResponse

__all__ = [
    "CacheEntry",
    "LinkLookupParams",
    "LinkLookupResult",
    "UpstreamResponse",
]
