"""Deterministic construction of Songlink request URLs.

The string built here is both the outbound request target and the response
cache key, so two logically identical lookups must always produce the same
bytes.  Optional parameters are appended in one fixed order regardless of
how the caller supplied them.

Known limitation: only the ``url`` value is percent-encoded.  The optional
values are appended raw, so a value containing ``&``, ``=`` or ``#`` will
corrupt the resulting URL (and the cache key along with it).
"""

from __future__ import annotations

from urllib.parse import quote

from src.models.links import LinkLookupParams

SONGLINK_LINKS_ENDPOINT = "https://api.song.link/v1-alpha.1/links"

# (wire name, LinkLookupParams attribute) in serialization order.
_OPTIONAL_PARAMS: tuple[tuple[str, str], ...] = (
    ("userCountry", "user_country"),
    ("songIfSingle", "song_if_single"),
    ("platform", "platform"),
    ("type", "entity_type"),
    ("id", "id"),
    ("key", "key"),
)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_request_key(
    params: LinkLookupParams,
    base_url: str = SONGLINK_LINKS_ENDPOINT,
) -> str:
    """Serialize *params* into the upstream request URL.

    Args:
        params: Lookup parameters; ``params.url`` should already be normalized.
        base_url: Songlink links endpoint, without a query string.

    Returns:
        ``{base_url}?url=<encoded url>`` followed by ``&name=value`` for each
        optional parameter that is not ``None``.
    """
    # safe="" leaves only unreserved characters (A-Z a-z 0-9 - _ . ~) as-is.
    parts = [base_url, "?url=", quote(params.url, safe="")]

    for wire_name, attribute in _OPTIONAL_PARAMS:
        value = getattr(params, attribute)
        if value is None:
            continue
        parts.append(f"&{wire_name}={_format_value(value)}")

    return "".join(parts)
