"""Link lookup models shared by the API layer, the orchestrator and the
upstream provider.

``LinkLookupParams`` is a frozen Pydantic model so a normalized copy can be
derived with ``model_copy`` without mutating the caller's instance.  The two
result types are plain frozen dataclasses: they only carry data between
layers and are never validated or serialized themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict


class LinkLookupParams(BaseModel):
    """Parameters of a single ``/api/links`` lookup.

    Field names are Pythonic; the wire names (``userCountry``,
    ``songIfSingle``, ``type``) are handled by the request key builder.
    ``None`` means the parameter was not supplied.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    user_country: str | None = None
    song_if_single: bool | None = None
    platform: str | None = None
    entity_type: str | None = None
    id: str | None = None
    key: str | None = None

    def with_url(self, url: str) -> LinkLookupParams:
        """Return a copy of these parameters pointing at *url*."""
        return self.model_copy(update={"url": url})


@dataclass(frozen=True)
class UpstreamResponse:
    """A successful (2xx) reply from the upstream API, JSON already decoded."""

    status_code: int
    payload: Any


@dataclass(frozen=True)
class LinkLookupResult:
    """Outcome of a successful lookup, either fresh or served from cache."""

    payload: Any
    status_code: int = 200
    from_cache: bool = False
