"""Outbound header providers.

Two implementations of IHeaderProvider, selected by the RANDOMIZE_HEADERS
setting:

    1. StaticHeaderProvider      : fixed project user agent (default).
    2. RandomizedHeaderProvider  : browser-like user agent, Accept and
       Accept-Language values with shuffled header order per request.
"""

from src.providers.headers.randomized_headers import RandomizedHeaderProvider
from src.providers.headers.static_headers import StaticHeaderProvider

__all__ = ["RandomizedHeaderProvider", "StaticHeaderProvider"]
