"""Unit tests for outbound header providers."""

from __future__ import annotations

import random

from src.providers.headers import RandomizedHeaderProvider, StaticHeaderProvider
from src.providers.headers.randomized_headers import (
    ACCEPT_LANGUAGES,
    ACCEPT_VALUES,
    USER_AGENTS,
)


class TestStaticHeaderProvider:
    def test_fixed_headers(self) -> None:
        headers = StaticHeaderProvider().build_headers()
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"].startswith("songlink-cors-proxy/")

    def test_same_every_call(self) -> None:
        provider = StaticHeaderProvider()
        assert provider.build_headers() == provider.build_headers()


class TestRandomizedHeaderProvider:
    def test_values_drawn_from_pools(self) -> None:
        provider = RandomizedHeaderProvider(rng=random.Random(7))
        for _ in range(50):
            headers = provider.build_headers()
            assert headers["User-Agent"] in USER_AGENTS
            assert headers["Accept"] in ACCEPT_VALUES
            assert headers["Accept-Language"] in ACCEPT_LANGUAGES
            assert headers.get("DNT", "1") == "1"

    def test_seeded_rng_is_reproducible(self) -> None:
        first = RandomizedHeaderProvider(rng=random.Random(42))
        second = RandomizedHeaderProvider(rng=random.Random(42))
        for _ in range(10):
            a = first.build_headers()
            b = second.build_headers()
            assert a == b
            assert list(a) == list(b)

    def test_order_and_values_vary(self) -> None:
        provider = RandomizedHeaderProvider(rng=random.Random(1))
        samples = [provider.build_headers() for _ in range(100)]

        assert len({h["User-Agent"] for h in samples}) > 1
        assert len({tuple(h) for h in samples}) > 1
        assert any("DNT" in h for h in samples)
        assert any("DNT" not in h for h in samples)

    def test_default_rng(self) -> None:
        headers = RandomizedHeaderProvider().build_headers()
        assert {"User-Agent", "Accept", "Accept-Language"} <= set(headers)
