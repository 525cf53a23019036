"""Shared pytest fixtures for the debridbox test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from debridbox.config import Settings
from debridbox.shared.models import StreamRequest

HASH_A = "a" * 40
HASH_B = "b" * 40


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(
        torbox_api_base="http://torbox.test",
        cloud_api_base="http://cloud.test/api",
        static_base_url="http://host.test",
        magnet_trackers="udp://tracker.test:80/announce",
    )


@pytest.fixture()
def sample_stream() -> StreamRequest:
    return StreamRequest(
        info_hash=HASH_A,
        file_idx=0,
        title="Big.Movie.2020.1080p\nBig.Movie.2020/Big Movie (2020).mkv\n👤 42 💾 2.1 GB ⚙️ RARBG",
    )


@pytest.fixture()
def mock_torbox() -> AsyncMock:
    """Mock TorBox API client."""
    mock = AsyncMock()
    mock.check_cached = AsyncMock(return_value=None)
    mock.list_torrents = AsyncMock(return_value=[])
    mock.create_torrent = AsyncMock(return_value={"success": True, "detail": ""})
    mock.request_download_link = AsyncMock(return_value=None)
    return mock


@pytest.fixture()
def mock_cloud() -> AsyncMock:
    """Mock cloud-storage client."""
    mock = AsyncMock()
    mock.list_folder = AsyncMock(return_value={"status": "success", "name": "root", "content": []})
    mock.list_transfers = AsyncMock(return_value=[])
    return mock
