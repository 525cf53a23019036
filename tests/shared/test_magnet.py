"""Tests for magnet URI helpers."""

from __future__ import annotations

from debridbox.shared.magnet import build_magnet_link, decode_info_hash

HEX_HASH = "da39a3ee5e6b4b0d3255bfef95601890afd80709"


class TestBuildMagnetLink:
    def test_hash_only(self) -> None:
        assert build_magnet_link(HEX_HASH.upper()) == f"magnet:?xt=urn:btih:{HEX_HASH}"

    def test_name_and_trackers_are_encoded(self) -> None:
        magnet = build_magnet_link(HEX_HASH, ["udp://tracker.test:80/announce"], name="Big Movie")

        assert magnet == (
            f"magnet:?xt=urn:btih:{HEX_HASH}"
            "&dn=Big%20Movie"
            "&tr=udp%3A%2F%2Ftracker.test%3A80%2Fannounce"
        )


class TestDecodeInfoHash:
    def test_hex_hash(self) -> None:
        assert decode_info_hash(f"magnet:?xt=urn:btih:{HEX_HASH.upper()}&dn=Test") == HEX_HASH

    def test_base32_hash_is_converted_to_hex(self) -> None:
        # base32 of the 20 bytes 0x00..0x13
        magnet = "magnet:?xt=urn:btih:AAAQEAYEAUDAOCAJBIFQYDIOB4IBCEQT&dn=Test"
        assert decode_info_hash(magnet) == "000102030405060708090a0b0c0d0e0f10111213"

    def test_returns_none_for_invalid(self) -> None:
        assert decode_info_hash("https://example.com/file.torrent") is None
        assert decode_info_hash("magnet:?xt=urn:btih:") is None
        assert decode_info_hash(None) is None
