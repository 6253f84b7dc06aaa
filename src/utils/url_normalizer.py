"""Mirror-host normalization for incoming music links.

Several community front-ends mirror TIDAL under their own hostnames.  Songlink
only recognises the official ``listen.tidal.com`` form, so links copied from a
mirror are rewritten before the upstream lookup.  Rewriting here also means a
mirror link and its canonical equivalent share one cache entry.
"""

from __future__ import annotations

CANONICAL_TIDAL_HOST = "listen.tidal.com"

# Order is significant: only the first matching rule is applied.  The two
# monochrome rules include the "/#" of their hash-routed paths so that
# "https://monochrome.tf/#/track/1" becomes "https://listen.tidal.com/track/1".
MIRROR_REWRITES: tuple[tuple[str, str], ...] = (
    ("monochrome.tf/#", CANONICAL_TIDAL_HOST),
    ("monochrome.prigoana.com/#", CANONICAL_TIDAL_HOST),
    ("tidal.squid.wtf", CANONICAL_TIDAL_HOST),
    ("tidal.qqdl.site", CANONICAL_TIDAL_HOST),
)


def normalize_url(
    url: str,
    rules: tuple[tuple[str, str], ...] = MIRROR_REWRITES,
) -> str:
    """Rewrite a known mirror URL to its canonical host.

    Rules are scanned in order and the first one whose substring occurs in
    *url* is applied; later rules are never consulted, even if they would
    also match.  Overlaps are resolved by list order, not by specificity.

    Args:
        url: Raw URL as supplied by the caller.
        rules: Ordered ``(mirror_substring, replacement)`` pairs.

    Returns:
        The rewritten URL, or *url* unchanged when no rule matches.
    """
    for mirror, canonical in rules:
        if mirror in url:
            return url.replace(mirror, canonical)
    return url
