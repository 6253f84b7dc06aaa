"""Unit tests for the exception hierarchy."""

from __future__ import annotations

from src.utils.errors import (
    ConfigurationError,
    LinkProxyError,
    MalformedUpstreamBodyError,
    TransportFailureError,
    UpstreamRejectedError,
)


class TestLinkProxyError:
    def test_default_status_is_500(self) -> None:
        assert LinkProxyError().status_code == 500
        assert ConfigurationError().status_code == 500

    def test_str_prefixes_provider(self) -> None:
        exc = TransportFailureError("Connection refused", provider_name="songlink")
        assert str(exc) == "[songlink] Connection refused"
        assert exc.message == "Connection refused"

    def test_str_without_provider(self) -> None:
        assert str(ConfigurationError("bad")) == "bad"

    def test_malformed_body_is_transport_failure(self) -> None:
        exc = MalformedUpstreamBodyError()
        assert isinstance(exc, TransportFailureError)
        assert exc.status_code == 502

    def test_rejected_carries_status_and_body(self) -> None:
        exc = UpstreamRejectedError(429, {"error": "rate limited"}, provider_name="songlink")
        assert isinstance(exc, LinkProxyError)
        assert exc.status_code == 429
        assert exc.body == {"error": "rate limited"}
        assert "429" in exc.message
