"""Pydantic response schemas for the link proxy API.

Successful ``/api/links`` responses are the upstream JSON passed through
verbatim, so they have no schema here; only the proxy's own error body does.
"""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body produced by the proxy itself (not relayed from upstream)."""

    error: str
    status: int
