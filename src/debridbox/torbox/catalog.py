"""Cached-folder catalog and item metadata."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import ValidationError

from debridbox.shared.enums import MetaType
from debridbox.shared.exceptions import UnclassifiedProviderError
from debridbox.shared.extension import is_video
from debridbox.shared.magnet import decode_info_hash
from debridbox.shared.models import CatalogEntry, FolderContent, ItemMeta, Transfer, Video, VideoStream
from debridbox.torbox.interfaces import CloudStorage

logger = logging.getLogger(__name__)

KEY = "torbox"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class CatalogLister:
    """Lists cached folders as catalog entries and expands one into videos."""

    def __init__(self, cloud: CloudStorage) -> None:
        self._cloud = cloud

    async def get_catalog(self, offset: int = 0) -> list[CatalogEntry]:
        """Return the account's top-level folders.

        Only a single page exists, so any ``offset`` past zero is empty.
        """
        if offset > 0:
            return []

        listing = await self._cloud.list_folder()
        contents = _parse_contents(listing)
        return [
            CatalogEntry(id=f"{KEY}:{content.id}", type=MetaType.OTHER, name=content.name)
            for content in contents
            if content.is_folder
        ]

    async def get_item_meta(self, item_id: str) -> ItemMeta:
        """Resolve a folder into a meta object listing every video inside it."""
        root = await self._cloud.list_folder(item_id)
        info_hash = await self._find_info_hash(item_id)
        files = await walk_folder(self._cloud, item_id, root_listing=root)

        videos = [
            Video(
                id=f"{KEY}:{file.id}:{index}",
                title=file.name,
                released=released_at(file.created_at, index),
                streams=[VideoStream(url=file.link or file.stream_link or "")],
            )
            for index, file in enumerate(files)
        ]
        logger.info("folder %s expanded to %d videos (info_hash=%s)", item_id, len(videos), info_hash)
        return ItemMeta(
            id=f"{KEY}:{item_id}",
            type=MetaType.OTHER,
            name=str(root.get("name") or ""),
            info_hash=info_hash,
            videos=videos,
        )

    async def _find_info_hash(self, item_id: str) -> str | None:
        transfers = [_parse_transfer(raw) for raw in await self._cloud.list_transfers()]
        found = next((t for t in transfers if t is not None and t.produced(item_id)), None)
        if found is None or not found.src:
            return None
        return decode_info_hash(found.src)


async def walk_folder(
    cloud: CloudStorage,
    folder_id: str,
    *,
    root_listing: dict | None = None,
) -> list[FolderContent]:
    """Flatten every video file below ``folder_id``.

    Depth-first with an explicit stack: a folder's own videos come before
    those of its sub-folders, which are visited in listing order. Each name
    carries its folder path, e.g. ``/Movies/2020/film.mkv``.
    """
    found: list[FolderContent] = []
    # (folder id, path prefix, listing if already fetched)
    stack: list[tuple[str, str, dict | None]] = [(folder_id, "", root_listing)]

    while stack:
        current_id, prefix, listing = stack.pop()
        if listing is None:
            listing = await cloud.list_folder(current_id)
        contents = _parse_contents(listing)

        found.extend(
            content.model_copy(update={"name": f"{prefix}/{content.name}"})
            for content in contents
            if content.type == "file" and is_video(content.name)
        )
        sub_folders = [content for content in contents if content.is_folder]
        for sub_folder in reversed(sub_folders):
            stack.append((str(sub_folder.id), f"{prefix}/{sub_folder.name}", None))

    return found


def released_at(created_at: int | None, index: int) -> str:
    """Release timestamp for the ``index``-th video, ``index`` ms before creation.

    Formatted like JavaScript's ``Date.toISOString()``.
    """
    moment = _EPOCH + timedelta(milliseconds=(created_at or 0) * 1000 - index)
    return moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{moment.microsecond // 1000:03d}Z"


def _parse_contents(listing: dict) -> list[FolderContent]:
    contents = []
    for raw in listing.get("content") or []:
        if not raw:
            continue
        try:
            contents.append(FolderContent.model_validate(raw))
        except ValidationError as exc:
            raise UnclassifiedProviderError(f"malformed folder entry: {exc}", payload=raw) from exc
    return contents


def _parse_transfer(raw: Any) -> Transfer | None:
    # infoHash is best effort, so a bad transfer is skipped
    try:
        return Transfer.model_validate(raw)
    except ValidationError as exc:
        logger.debug("skipping malformed transfer %r: %s", raw, exc)
        return None
