"""Public interface definitions for the proxy's collaborators.

The orchestrator talks to the upstream API, the response cache and the
header decoration step only through the abstract base classes defined here.
Concrete adapters live in ``src/providers/`` and are wired together in
``src/main.py`` at startup; tests inject fakes instead.

CONCRETE PROVIDER MAP:
    Interface          →  Concrete implementations (in src/providers/)
    ─────────────────────────────────────────────────────────────────
    ILinkProvider      →  SonglinkProvider
    ICacheProvider     →  MemoryCacheProvider
    IHeaderProvider    →  StaticHeaderProvider, RandomizedHeaderProvider
"""

from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.header_provider import IHeaderProvider
from src.interfaces.link_provider import ILinkProvider

__all__ = [
    "ICacheProvider",
    "IHeaderProvider",
    "ILinkProvider",
]
