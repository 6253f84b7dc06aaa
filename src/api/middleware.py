"""API middleware: CORS, request logging, and error handling.

Starlette middleware is a stack: the last one added runs first.  ``main.py``
adds ErrorHandlingMiddleware, then RequestLoggingMiddleware, then CORS, so a
request flows

    Client -> CORS -> RequestLogging -> ErrorHandling -> route

and every response, including converted errors, passes back through the CORS
layer and picks up its headers.
"""

from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from src.api.schemas import ErrorResponse
from src.utils.errors import LinkProxyError, UpstreamRejectedError
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------


def configure_cors(
    app: FastAPI,
    *,
    strict: bool = False,
    allowed_origins: list[str] | None = None,
) -> None:
    """Add CORS middleware to the FastAPI application.

    Parameters
    ----------
    app:
        The FastAPI application instance.
    strict:
        When ``True`` only *allowed_origins* may call the API.  Otherwise
        any origin is accepted.
    allowed_origins:
        Origins accepted in strict mode.
    """
    origins = list(allowed_origins or []) if strict else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )


# ---------------------------------------------------------------------------
# Request Logging
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status code, and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None

        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            _logger.info(
                "http_request",
                method=request.method,
                path=str(request.url.path),
                status=response.status_code if response else 500,
                duration_ms=duration_ms,
            )


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Convert ``LinkProxyError`` subclasses into HTTP responses.

    Upstream rejections are relayed with the upstream's own status and body.
    Everything else becomes ``{"error": <message>, "status": <code>}`` using
    the exception's ``status_code`` (502 for transport failures).
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except UpstreamRejectedError as exc:
            return JSONResponse(status_code=exc.status_code, content=exc.body)
        except LinkProxyError as exc:
            _logger.error(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                provider=exc.provider_name,
                path=str(request.url.path),
            )
            body = ErrorResponse(error=exc.message, status=exc.status_code)
            return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed or incomplete query strings with a 400."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    body = ErrorResponse(error=f"Invalid query string: {details}", status=400)
    return JSONResponse(status_code=400, content=body.model_dump())
