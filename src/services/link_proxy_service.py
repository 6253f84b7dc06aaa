"""Link lookup orchestration: normalize, key, cache, fetch.

Per request the service runs a short state machine:

    normalize URL -> build request key -> cache lookup
        hit  -> return cached payload (no upstream traffic)
        miss -> build headers -> upstream fetch
                  success -> write through to cache -> return payload
                  failure -> propagate error, cache untouched

The cache lock is held only inside ``cache.get`` / ``cache.put``; the upstream
call always runs unlocked.  Two concurrent misses for the same key therefore
both reach the upstream and both write the cache (last write wins) unless
``single_flight`` is enabled, in which case followers join the leader's
in-flight call.
"""

from __future__ import annotations

import asyncio

from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.header_provider import IHeaderProvider
from src.interfaces.link_provider import ILinkProvider
from src.models.links import LinkLookupParams, LinkLookupResult, UpstreamResponse
from src.utils.logging import get_logger
from src.utils.request_key import SONGLINK_LINKS_ENDPOINT, build_request_key
from src.utils.url_normalizer import normalize_url


class LinkProxyService:
    """Resolves link lookups through the response cache and the upstream.

    One instance is built at startup and shared by every request; it holds
    no per-request state.

    Parameters
    ----------
    link_provider:
        Upstream client used on cache misses.
    cache:
        Shared response cache.
    header_provider:
        Optional outbound header decoration step.  ``None`` sends the HTTP
        client's defaults.
    cache_ttl:
        TTL passed to every cache write; ``None`` uses the cache default.
    base_url:
        Songlink links endpoint used as the request key prefix.
    single_flight:
        De-duplicate concurrent upstream calls for the same key.
    """

    def __init__(
        self,
        link_provider: ILinkProvider,
        cache: ICacheProvider,
        header_provider: IHeaderProvider | None = None,
        cache_ttl: float | None = None,
        base_url: str = SONGLINK_LINKS_ENDPOINT,
        single_flight: bool = False,
    ) -> None:
        self._provider = link_provider
        self._cache = cache
        self._header_provider = header_provider
        self._cache_ttl = cache_ttl
        self._base_url = base_url
        self._single_flight = single_flight
        self._inflight: dict[str, asyncio.Future[UpstreamResponse]] = {}
        self._logger = get_logger(__name__)

    async def resolve(self, params: LinkLookupParams) -> LinkLookupResult:
        """Return the Songlink payload for *params*.

        Raises
        ------
        UpstreamRejectedError
            The upstream answered non-2xx.
        TransportFailureError
            The upstream could not be reached or returned a non-JSON body.
        """
        normalized = normalize_url(params.url)
        if normalized != params.url:
            self._logger.debug("url_normalized", original=params.url, normalized=normalized)
            params = params.with_url(normalized)

        request_key = build_request_key(params, base_url=self._base_url)

        entry = await self._cache.get(request_key)
        if entry is not None:
            return LinkLookupResult(payload=entry.payload, status_code=200, from_cache=True)

        if self._single_flight:
            response = await self._fetch_shared(request_key)
        else:
            response = await self._fetch_and_store(request_key)

        return LinkLookupResult(
            payload=response.payload,
            status_code=response.status_code,
            from_cache=False,
        )

    async def _fetch_and_store(self, request_key: str) -> UpstreamResponse:
        headers = self._header_provider.build_headers() if self._header_provider else None
        response = await self._provider.fetch(request_key, headers=headers)
        await self._cache.put(request_key, response.payload, ttl=self._cache_ttl)
        return response

    async def _fetch_shared(self, request_key: str) -> UpstreamResponse:
        task = self._inflight.get(request_key)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_store(request_key))
            self._inflight[request_key] = task
            task.add_done_callback(lambda done: self._forget_inflight(request_key, done))
        else:
            self._logger.debug("upstream_call_joined", key=request_key)

        # shield: one caller disconnecting must not cancel the call for the rest.
        return await asyncio.shield(task)

    def _forget_inflight(self, request_key: str, task: asyncio.Future[UpstreamResponse]) -> None:
        if self._inflight.get(request_key) is task:
            del self._inflight[request_key]
        if not task.cancelled():
            # Marks the exception as retrieved when every waiter has gone away.
            task.exception()
