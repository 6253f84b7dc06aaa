"""Utility modules for the link proxy.

- **errors** -- Exception hierarchy rooted at LinkProxyError; each class
  knows the HTTP status it maps to.
- **logging** -- structlog setup with coloured console output in
  development and JSON in production.
- **url_normalizer** -- Rewrites TIDAL mirror hosts to listen.tidal.com.
- **request_key** -- Builds the Songlink request URL that doubles as the
  response cache key.
"""

from src.utils.errors import (
    ConfigurationError,
    LinkProxyError,
    MalformedUpstreamBodyError,
    TransportFailureError,
    UpstreamRejectedError,
)
from src.utils.logging import configure_logging, get_logger
from src.utils.request_key import SONGLINK_LINKS_ENDPOINT, build_request_key
from src.utils.url_normalizer import MIRROR_REWRITES, normalize_url

__all__ = [
    "ConfigurationError",
    "LinkProxyError",
    "MIRROR_REWRITES",
    "MalformedUpstreamBodyError",
    "SONGLINK_LINKS_ENDPOINT",
    "TransportFailureError",
    "UpstreamRejectedError",
    "build_request_key",
    "configure_logging",
    "get_logger",
    "normalize_url",
]
