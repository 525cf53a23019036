"""Resolve an info hash into a TorBox download link or a status sentinel."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from debridbox.shared.enums import CreationStatus, StaticResponse
from debridbox.shared.exceptions import (
    AccessDeniedError,
    AuthError,
    DebridError,
    NoTorrentFoundError,
    NotCachedError,
    TransportError,
    UnclassifiedProviderError,
)
from debridbox.shared.helpers import with_fallback
from debridbox.shared.magnet import build_magnet_link
from debridbox.shared.models import TorrentRecord
from debridbox.torbox.interfaces import TorboxApi
from debridbox.torbox.status import classify_creation_detail, is_error_status, is_not_premium

logger = logging.getLogger(__name__)

ACCOUNT_NOT_PREMIUM = "Account not premium."

_SENTINELS = {
    CreationStatus.DOWNLOADING: StaticResponse.DOWNLOADING,
    CreationStatus.QUEUED: StaticResponse.QUEUED,
    CreationStatus.COOLDOWN: StaticResponse.COOLDOWN_LIMIT,
}


class LinkResolver:
    """Turns an info hash plus a file name into a playable TorBox URL.

    Flow:
    1. Ask ``checkcached`` whether TorBox holds the torrent.
    2. If so, locate the torrent in the account library (adding it when
       missing) and request a download link for the named file.
    3. Otherwise add the torrent and report what TorBox did with it as a
       :class:`StaticResponse` sentinel.
    """

    def __init__(self, client: TorboxApi, *, trackers: Sequence[str] = ()) -> None:
        self._client = client
        self._trackers = tuple(trackers)

    async def resolve(self, info_hash: str, file_name: str, file_index: int | None = None) -> str | StaticResponse:
        """Resolve ``info_hash`` to a direct URL or a sentinel.

        Args:
            info_hash: Torrent info hash.
            file_name: ``short_name`` of the wanted file inside the torrent.
            file_index: Host file index, only used for logging.

        Returns:
            The provider's download URL, or a sentinel for a pending download,
            a queued or rate-limited add, or a non-premium account.

        Raises:
            AuthError: If the provider rejected the token.
            UnclassifiedProviderError: For any other failure, with the raw
                provider payload attached.
        """
        try:
            return await with_fallback(
                lambda: self._cached_link(info_hash, file_name),
                lambda: self._add_and_classify(info_hash, file_name),
            )
        except AuthError:
            raise
        except DebridError as exc:
            if isinstance(exc, AccessDeniedError) or ACCOUNT_NOT_PREMIUM in exc.message:
                logger.info("access denied to torbox %s [%s]", info_hash, file_index)
                return StaticResponse.FAILED_ACCESS
            raise UnclassifiedProviderError(
                f"failed torbox resolve for {info_hash}: {_describe(exc)}",
                payload=exc.payload,
            ) from exc

    async def _cached_link(self, info_hash: str, file_name: str) -> str:
        if not await self._is_cached(info_hash):
            raise NotCachedError(f"no cached entry found for {info_hash}")

        torrent = await self._locate_or_create(info_hash)
        torrent_file = next((f for f in torrent.files if f.short_name == file_name), None)
        if torrent_file is None:
            raise NotCachedError(f"file {file_name!r} not found in torrent {torrent.id}")

        url = await self._client.request_download_link(torrent.id, torrent_file.id)
        if not url:
            raise UnclassifiedProviderError(f"no download link for torrent {torrent.id} file {torrent_file.id}")
        logger.info("resolved torbox %s file %s", info_hash, torrent_file.id)
        return url

    async def _is_cached(self, info_hash: str) -> bool:
        try:
            data = await self._client.check_cached([info_hash])
        except AuthError:
            raise
        except DebridError as exc:
            logger.warning("torbox cached check failed for %s: %s", info_hash, exc)
            return False
        return bool(data)

    async def _locate_or_create(self, info_hash: str) -> TorrentRecord:
        return await with_fallback(
            lambda: self._find_torrent(info_hash),
            lambda: self._create_then_find(info_hash),
            recover=(NoTorrentFoundError, TransportError),
        )

    async def _find_torrent(self, info_hash: str) -> TorrentRecord:
        wanted = info_hash.lower()
        found = [
            _parse_torrent(raw)
            for raw in await self._client.list_torrents()
            if isinstance(raw, dict) and str(raw.get("hash", "")).lower() == wanted
        ]
        if not found:
            raise NoTorrentFoundError(f"no torrent {info_hash} in the account library")
        return next((torrent for torrent in found if not is_error_status(torrent.status)), found[0])

    async def _create_then_find(self, info_hash: str) -> TorrentRecord:
        await self._create_torrent(info_hash)
        return await self._find_torrent(info_hash)

    async def _create_torrent(self, info_hash: str) -> dict[str, Any]:
        magnet = build_magnet_link(info_hash, self._trackers)
        return await self._client.create_torrent(magnet)

    async def _add_and_classify(self, info_hash: str, file_name: str) -> str | StaticResponse:
        torrent = await self._create_torrent(info_hash)
        detail = torrent.get("detail")
        status = classify_creation_detail(detail)

        if status is CreationStatus.CACHED:
            # TorBox cached it between the check and the add
            return await self._cached_link(info_hash, file_name)

        sentinel = _SENTINELS.get(status)
        if sentinel is not None:
            logger.info("torbox %s: %s (%s)", status.value, info_hash, detail)
            return sentinel

        if is_not_premium(detail):
            raise AccessDeniedError(str(detail), payload=torrent)
        raise UnclassifiedProviderError(f"failed torbox adding torrent {_dump(torrent)}", payload=torrent)


def _parse_torrent(raw: dict[str, Any]) -> TorrentRecord:
    try:
        return TorrentRecord.model_validate(raw)
    except ValidationError as exc:
        raise UnclassifiedProviderError(f"malformed torrent record: {exc}", payload=raw) from exc


def _dump(payload: Any) -> str:
    return json.dumps(payload, default=str)


def _describe(exc: DebridError) -> str:
    if exc.payload is None:
        return exc.message
    return f"{exc.message} {_dump(exc.payload)}"
