"""FastAPI routes for the link proxy.

Endpoint          Method  Description
----------------  ------  ------------------------------------------------
/                 GET     307 redirect to the front-end
/health           GET     Liveness probe, plain-text ``OK``
/api/links        GET     Songlink lookup through the response cache

The orchestrator is resolved from ``app.state`` (populated in ``main.py``'s
lifespan) via ``Depends`` so tests can install their own instance.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from src.api.schemas import ErrorResponse
from src.models.links import LinkLookupParams
from src.services.link_proxy_service import LinkProxyService

router = APIRouter()


def _get_link_proxy(request: Request) -> LinkProxyService:
    """Return the shared link proxy service from application state."""
    return request.app.state.link_proxy


def _get_redirect_url(request: Request) -> str:
    return request.app.state.redirect_url


LinkProxyDep = Annotated[LinkProxyService, Depends(_get_link_proxy)]
RedirectUrlDep = Annotated[str, Depends(_get_redirect_url)]


@router.get("/", include_in_schema=False)
async def root_redirect(redirect_url: RedirectUrlDep) -> RedirectResponse:
    return RedirectResponse(url=redirect_url, status_code=307)


@router.get("/health", response_class=PlainTextResponse, summary="Liveness probe")
async def health_check() -> str:
    return "OK"


@router.get(
    "/api/links",
    summary="Resolve a music link via Songlink",
    responses={
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def get_links(
    link_proxy: LinkProxyDep,
    url: Annotated[str, Query(description="Music link to resolve")],
    user_country: Annotated[str | None, Query(alias="userCountry")] = None,
    song_if_single: Annotated[bool | None, Query(alias="songIfSingle")] = None,
    platform: Annotated[str | None, Query()] = None,
    entity_type: Annotated[str | None, Query(alias="type")] = None,
    id: Annotated[str | None, Query()] = None,  # noqa: A002
    key: Annotated[str | None, Query()] = None,
) -> JSONResponse:
    """Return the upstream JSON for *url*, from cache when possible.

    Upstream errors are converted by ``ErrorHandlingMiddleware``.
    """
    params = LinkLookupParams(
        url=url,
        user_country=user_country,
        song_if_single=song_if_single,
        platform=platform,
        entity_type=entity_type,
        id=id,
        key=key,
    )
    result = await link_proxy.resolve(params)
    return JSONResponse(status_code=result.status_code, content=result.payload)
