"""Songlink CORS proxy: FastAPI application entry point.

Wires the response cache, upstream client, header decoration and the link
proxy orchestrator together via dependency injection.  All process-scoped
state is built once inside the lifespan and stored on ``app.state``; routes
reach it through ``Depends`` helpers, never through module globals.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from src.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
    validation_error_handler,
)
from src.api.routes import router as api_router
from src.config.settings import Settings
from src.interfaces.header_provider import IHeaderProvider
from src.providers.cache.memory_cache import MemoryCacheProvider
from src.providers.headers import RandomizedHeaderProvider, StaticHeaderProvider
from src.providers.upstream.songlink_provider import SonglinkProvider, build_http_client
from src.services.link_proxy_service import LinkProxyService
from src.utils.logging import configure_logging, get_logger

_VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()

configure_logging(
    log_level=settings.log_level,
    json_output=(settings.app_env == "production"),
)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# DI assembly
# ---------------------------------------------------------------------------


def _build_header_provider(app_settings: Settings) -> IHeaderProvider:
    if app_settings.randomize_headers:
        return RandomizedHeaderProvider()
    return StaticHeaderProvider()


def _build_all(app_settings: Settings) -> dict[str, Any]:
    """Construct the process-scoped components.

    Returns a flat dict of named components to be stored on ``app.state``.
    Raises ``ConfigurationError`` for invalid cache settings, which aborts
    startup before the server accepts connections.
    """
    cache = MemoryCacheProvider(
        max_size=app_settings.cache_max_size,
        ttl=app_settings.cache_ttl_seconds,
    )
    http_client = build_http_client(timeout=app_settings.upstream_timeout)

    link_proxy = LinkProxyService(
        link_provider=SonglinkProvider(http_client=http_client),
        cache=cache,
        header_provider=_build_header_provider(app_settings),
        cache_ttl=app_settings.cache_ttl_seconds,
        base_url=app_settings.songlink_base_url,
        single_flight=app_settings.single_flight,
    )

    return {
        "http_client": http_client,
        "cache": cache,
        "link_proxy": link_proxy,
        "redirect_url": app_settings.redirect_url,
    }


# ---------------------------------------------------------------------------
# Application lifespan (startup / shutdown)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _lifespan(application: FastAPI):  # noqa: ANN201
    app_settings: Settings = application.state.settings
    components = _build_all(app_settings)

    for key, value in components.items():
        setattr(application.state, key, value)

    _logger.info(
        "app_startup",
        version=_VERSION,
        environment=app_settings.app_env,
        cache_max_size=app_settings.cache_max_size,
        cache_ttl_seconds=app_settings.cache_ttl_seconds,
        strict_cors=app_settings.strict_cors,
        randomize_headers=app_settings.randomize_headers,
        single_flight=app_settings.single_flight,
    )

    yield

    http_client: httpx.AsyncClient = components["http_client"]
    await http_client.aclose()
    _logger.info("app_shutdown", cache_entries=len(components["cache"]))


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    s = app_settings or settings

    application = FastAPI(
        title="Songlink CORS Proxy",
        version=_VERSION,
        description=(
            "CORS-enabled, caching proxy in front of the Songlink API. "
            "Normalizes TIDAL mirror links before lookup."
        ),
        lifespan=_lifespan,
    )
    application.state.settings = s

    # Last added runs first: CORS wraps logging, which wraps error handling.
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    configure_cors(application, strict=s.strict_cors, allowed_origins=s.cors_allowed_origins)

    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.include_router(api_router)

    return application


app = create_app()


def run() -> None:
    """Serve ``app`` under uvicorn on the configured host and port."""
    uvicorn.run(
        app,
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
