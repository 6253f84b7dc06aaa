"""Abstract base class for outbound header decoration.

The orchestrator asks a header provider for a fresh header set before every
upstream call.  Header choice is cosmetic traffic shaping and never takes
part in cache key construction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IHeaderProvider(ABC):
    """Contract for producing outbound request headers."""

    @abstractmethod
    def build_headers(self) -> dict[str, str]:
        """Return the headers for one upstream request.

        Dict order is the order the headers are sent in.
        """
