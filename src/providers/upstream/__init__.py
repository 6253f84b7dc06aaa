"""Upstream link-resolution providers.

SonglinkProvider is the single upstream: it resolves a music link on one
platform to the matching links on every other platform Songlink knows.
"""

from src.providers.upstream.songlink_provider import SonglinkProvider, build_http_client

__all__ = ["SonglinkProvider", "build_http_client"]
