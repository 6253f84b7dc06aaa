"""Unit tests for mirror-host URL normalization."""

from __future__ import annotations

import pytest

from src.utils.url_normalizer import MIRROR_REWRITES, normalize_url


class TestNormalizeUrl:
    """Tests for the normalize_url function."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("https://monochrome.tf/#/track/1", "https://listen.tidal.com/track/1"),
            (
                "https://monochrome.prigoana.com/#/album/42",
                "https://listen.tidal.com/album/42",
            ),
            ("https://tidal.squid.wtf/track/7", "https://listen.tidal.com/track/7"),
            ("https://tidal.qqdl.site/album/9", "https://listen.tidal.com/album/9"),
        ],
    )
    def test_rewrites_each_mirror(self, raw: str, expected: str) -> None:
        assert normalize_url(raw) == expected

    def test_unknown_host_unchanged(self) -> None:
        url = "https://open.spotify.com/track/4cOdK2wGLETKBW3PvgPWqT"
        assert normalize_url(url) == url

    def test_canonical_url_unchanged(self) -> None:
        url = "https://listen.tidal.com/track/1"
        assert normalize_url(url) == url

    def test_monochrome_without_hash_route_unchanged(self) -> None:
        url = "https://monochrome.tf/track/1"
        assert normalize_url(url) == url

    def test_only_first_matching_rule_applies(self) -> None:
        # Matches both the monochrome.tf rule (listed first) and tidal.squid.wtf.
        url = "https://monochrome.tf/#/redirect?to=tidal.squid.wtf"
        assert normalize_url(url) == "https://listen.tidal.com/redirect?to=tidal.squid.wtf"

    def test_rule_order_decides_overlaps(self) -> None:
        rules = (("example.com", "first.test"), ("example.com/path", "second.test"))
        assert normalize_url("https://example.com/path", rules) == "https://first.test/path"

    def test_custom_rules_no_match(self) -> None:
        assert normalize_url("https://a.test", (("b.test", "c.test"),)) == "https://a.test"

    def test_all_rules_target_listen_tidal(self) -> None:
        assert {canonical for _, canonical in MIRROR_REWRITES} == {"listen.tidal.com"}
