"""Custom exception hierarchy for the link proxy.

All application exceptions inherit from :class:`LinkProxyError`, which
carries an optional ``provider_name`` (the external service involved, e.g.
``"songlink"``) and the HTTP ``status_code`` the error maps to when it
reaches the API layer.

    LinkProxyError               (base -- catch-all, 500)
    +-- ConfigurationError       (startup / invalid settings, fatal)
    +-- TransportFailureError    (upstream unreachable / timed out, 502)
    |   +-- MalformedUpstreamBodyError (upstream body is not JSON, 502)
    +-- UpstreamRejectedError    (upstream answered non-2xx, relayed verbatim)

None of these are retried.  Each one is isolated to the request that raised
it; only :class:`ConfigurationError` is fatal, and only at startup.
"""

from __future__ import annotations

from typing import Any


class LinkProxyError(Exception):
    """Base exception for all link proxy errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[songlink] Failed to fetch ...``.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ConfigurationError(LinkProxyError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Upstream errors
# ---------------------------------------------------------------------------


class TransportFailureError(LinkProxyError):
    """Raised when the upstream API cannot be reached or times out.

    Surfaced to the caller as a 502 with a generated message.  Never cached.
    """

    status_code = 502

    def __init__(
        self,
        message: str = "Upstream service is unavailable",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class MalformedUpstreamBodyError(TransportFailureError):
    """Raised when the upstream body cannot be decoded as JSON."""

    def __init__(
        self,
        message: str = "Failed to parse response",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class UpstreamRejectedError(LinkProxyError):
    """Raised when the upstream API answers with a non-2xx status.

    The upstream status and decoded body are kept so the API layer can relay
    them to the caller unchanged.
    """

    def __init__(
        self,
        status_code: int,
        body: Any,
        provider_name: str | None = None,
    ) -> None:
        super().__init__(
            message=f"Upstream responded with HTTP {status_code}",
            provider_name=provider_name,
        )
        self.status_code = status_code
        self._body = body

    @property
    def body(self) -> Any:
        return self._body
