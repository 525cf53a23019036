"""Interfaces for the TorBox integration."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TorboxApi(Protocol):
    """Protocol for the TorBox torrent API, bound to one access token."""

    async def check_cached(self, info_hashes: list[str]) -> list[dict[str, Any]] | None:
        """Look up which of ``info_hashes`` the provider has cached.

        Args:
            info_hashes: At most 100 info hashes.

        Returns:
            The provider's ``data`` list (one entry per cached hash), or None
            when nothing is cached.
        """
        ...

    async def list_torrents(self) -> list[dict[str, Any]]:
        """Return every torrent in the account library."""
        ...

    async def create_torrent(self, magnet: str) -> dict[str, Any]:
        """Add a magnet to the account library.

        Returns:
            The full provider response, including its free-text ``detail``.
        """
        ...

    async def request_download_link(self, torrent_id: int, file_id: int) -> str | None:
        """Request a direct download URL for one file of a torrent."""
        ...


@runtime_checkable
class CloudStorage(Protocol):
    """Protocol for the folder / transfer listing client."""

    async def list_folder(self, folder_id: str | None = None) -> dict[str, Any]:
        """List a folder (the root folder when ``folder_id`` is None).

        Returns:
            The listing payload with ``name`` and ``content`` keys.
        """
        ...

    async def list_transfers(self) -> list[dict[str, Any]]:
        """Return the account's transfer history."""
        ...
