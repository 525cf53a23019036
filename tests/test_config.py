"""Tests for settings parsing."""

from __future__ import annotations

import pytest

from debridbox.config import Settings


def test_torrents_url_joins_base_and_version() -> None:
    settings = Settings(torbox_api_base="https://api.torbox.app/", torbox_api_version="v2")

    assert settings.torrents_url == "https://api.torbox.app/v2/api/torrents"


def test_trackers_split_and_trimmed() -> None:
    settings = Settings(magnet_trackers=" udp://one:80/announce, ,udp://two:1337/announce ")

    assert settings.trackers == ["udp://one:80/announce", "udp://two:1337/announce"]


def test_environment_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBRIDBOX_CHECK_BATCH_SIZE", "50")
    monkeypatch.setenv("DEBRIDBOX_CREATE_ALLOW_ZIP", "true")

    settings = Settings()

    assert settings.check_batch_size == 50
    assert settings.create_allow_zip is True
    assert settings.trackers == []
