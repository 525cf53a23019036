"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide configuration loaded from environment variables."""

    model_config = {"env_prefix": "DEBRIDBOX_", "frozen": True}

    # TorBox torrent API
    torbox_api_base: str = "https://api.torbox.app"
    torbox_api_version: str = "v1"
    torbox_timeout: int = 30

    # checkcached accepts at most 100 hashes per call
    check_batch_size: int = 100

    # createtorrent form values
    create_seed: int = 3
    create_allow_zip: bool = False

    # Cloud storage (folder / transfer listing)
    cloud_api_base: str = "https://www.premiumize.me/api"
    cloud_timeout: int = 5

    # Magnet links
    # Format: "udp://tracker.one:80/announce,udp://tracker.two:1337/announce"
    magnet_trackers: str = ""

    # Static sentinel videos are served by the host addon
    static_base_url: str = "http://localhost:7000"

    # HTTP surface
    api_host: str = "0.0.0.0"
    api_port: int = 7001

    @property
    def torrents_url(self) -> str:
        base = self.torbox_api_base.rstrip("/")
        return f"{base}/{self.torbox_api_version}/api/torrents"

    @property
    def trackers(self) -> list[str]:
        return [t.strip() for t in self.magnet_trackers.split(",") if t.strip()]


def get_settings() -> Settings:
    """Factory, allows overriding in tests."""
    return Settings()
