"""Songlink (Odesli) API provider implementing ILinkProvider.

Performs exactly one GET per call against the already-built request URL and
classifies the outcome:

- 2xx with a JSON body      -> :class:`UpstreamResponse`
- non-2xx with a JSON body  -> :class:`UpstreamRejectedError` (relayed as-is)
- any transport error       -> :class:`TransportFailureError` (502)
- body that is not JSON     -> :class:`MalformedUpstreamBodyError` (502)

No retries are attempted.  The ``httpx.AsyncClient`` is injected so one
pooled client is shared across requests and tests can substitute a
``MockTransport``.
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from src.interfaces.link_provider import ILinkProvider
from src.models.links import UpstreamResponse
from src.utils.errors import (
    MalformedUpstreamBodyError,
    TransportFailureError,
    UpstreamRejectedError,
)
from src.utils.logging import get_logger

_PROVIDER_NAME = "songlink"

UPSTREAM_TIMEOUT_SECONDS = 30.0
_MAX_IDLE_CONNECTIONS = 10
_IDLE_CONNECTION_EXPIRY = 90.0


def build_http_client(
    timeout: float = UPSTREAM_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the shared upstream HTTP client.

    Redirects are followed.  httpx decompresses gzip and deflate bodies on
    its own, and brotli when the ``brotli`` package is installed.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        transport=transport,
        limits=httpx.Limits(
            max_keepalive_connections=_MAX_IDLE_CONNECTIONS,
            keepalive_expiry=_IDLE_CONNECTION_EXPIRY,
        ),
    )


class SonglinkProvider(ILinkProvider):
    """Upstream client for the Songlink links endpoint."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client
        self._logger = get_logger(__name__)

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    async def fetch(
        self,
        request_url: str,
        headers: Mapping[str, str] | None = None,
    ) -> UpstreamResponse:
        self._logger.debug("upstream_request", url=request_url)

        try:
            response = await self._http.get(request_url, headers=dict(headers or {}))
        except httpx.HTTPError as exc:
            self._logger.warning(
                "upstream_transport_failure",
                url=request_url,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise TransportFailureError(
                message=f"Failed to fetch from Songlink API: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            self._logger.warning(
                "upstream_malformed_body",
                url=request_url,
                status=response.status_code,
                error=str(exc),
            )
            raise MalformedUpstreamBodyError(
                message=f"Failed to parse response: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

        if not response.is_success:
            self._logger.info(
                "upstream_rejected",
                url=request_url,
                status=response.status_code,
            )
            raise UpstreamRejectedError(
                status_code=response.status_code,
                body=payload,
                provider_name=_PROVIDER_NAME,
            )

        return UpstreamResponse(status_code=response.status_code, payload=payload)
