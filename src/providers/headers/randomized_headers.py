"""Randomized browser-like outbound headers.

Each upstream request gets a user agent, ``Accept`` and ``Accept-Language``
drawn from small pools of values real browsers send, an occasional ``DNT``
header, and a shuffled header order.  None of this influences what gets
cached: the request key is built before headers are chosen.
"""

from __future__ import annotations

import random

from src.interfaces.header_provider import IHeaderProvider

USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_4_1) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.4.1 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:125.0) Gecko/20100101 Firefox/125.0",
    "Mozilla/5.0 (X11; Linux x86_64; rv:125.0) Gecko/20100101 Firefox/125.0",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36 Edg/124.0.2478.80",
)

ACCEPT_VALUES: tuple[str, ...] = (
    "application/json",
    "application/json, text/plain, */*",
    "*/*",
)

ACCEPT_LANGUAGES: tuple[str, ...] = (
    "en-US,en;q=0.9",
    "en-GB,en;q=0.9",
    "en-US,en;q=0.8,de;q=0.6",
    "fr-FR,fr;q=0.9,en;q=0.8",
    "es-ES,es;q=0.9,en;q=0.7",
)


class RandomizedHeaderProvider(IHeaderProvider):
    """Picks a fresh browser-like header set for every call.

    Parameters
    ----------
    rng:
        Source of randomness.  Pass a seeded ``random.Random`` for
        reproducible output in tests.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def build_headers(self) -> dict[str, str]:
        items = [
            ("User-Agent", self._rng.choice(USER_AGENTS)),
            ("Accept", self._rng.choice(ACCEPT_VALUES)),
            ("Accept-Language", self._rng.choice(ACCEPT_LANGUAGES)),
        ]
        if self._rng.random() < 0.5:
            items.append(("DNT", "1"))

        self._rng.shuffle(items)
        return dict(items)
