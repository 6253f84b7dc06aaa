"""Shared pytest fixtures for the link proxy test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from src.config.settings import Settings
from src.providers.cache.memory_cache import MemoryCacheProvider


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCacheProvider:
    return MemoryCacheProvider(max_size=3, ttl=60, timer=clock)


# ---------------------------------------------------------------------------
# Fake upstream
# ---------------------------------------------------------------------------


class FakeUpstream:
    """Records requests and answers them from a configurable responder.

    The default responder returns ``200 {"entityUniqueId": "X"}``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = self.json_response(
            200, {"entityUniqueId": "X"}
        )

    @staticmethod
    def json_response(status_code: int, body: Any) -> Callable[[httpx.Request], httpx.Response]:
        def _respond(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, content=json.dumps(body).encode())

        return _respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def mock_http_client(upstream: FakeUpstream) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the developer's environment and ``.env``."""
    return Settings(
        _env_file=None,
        strict_cors=False,
        cache_max_size=10,
        cache_ttl_seconds=60,
        randomize_headers=False,
        single_flight=False,
    )
