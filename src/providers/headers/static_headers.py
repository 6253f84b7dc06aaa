"""Fixed outbound headers."""

from __future__ import annotations

from src.interfaces.header_provider import IHeaderProvider

_USER_AGENT = "songlink-cors-proxy/0.1.0"


class StaticHeaderProvider(IHeaderProvider):
    """Sends the same identifying headers on every upstream request."""

    def build_headers(self) -> dict[str, str]:
        return {
            "User-Agent": _USER_AGENT,
            "Accept": "application/json",
        }
