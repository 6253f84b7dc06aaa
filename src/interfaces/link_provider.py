"""Abstract base class for upstream link-resolution providers.

A link provider turns a fully built request URL into the upstream's decoded
JSON reply.  Songlink is the only upstream; the interface exists so the
orchestrator can be tested against a fake and so the HTTP client stays
injected rather than global.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from src.models.links import UpstreamResponse


class ILinkProvider(ABC):
    """Contract for the upstream music-link resolution service."""

    @abstractmethod
    async def fetch(
        self,
        request_url: str,
        headers: Mapping[str, str] | None = None,
    ) -> UpstreamResponse:
        """Issue one GET to *request_url* and decode the JSON body.

        Parameters
        ----------
        request_url:
            The complete upstream URL (the request key).
        headers:
            Outbound headers, in the order they should be sent.

        Returns
        -------
        UpstreamResponse
            The decoded body of a 2xx reply.

        Raises
        ------
        UpstreamRejectedError
            The upstream answered non-2xx with a JSON body.
        TransportFailureError
            The request failed, timed out, or the body was not JSON.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier used in logs and error messages."""
