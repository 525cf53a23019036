"""Batch cache-availability lookup for host streams."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from debridbox.shared.exceptions import AuthError, DebridError
from debridbox.shared.helpers import chunk_array, stream_filename
from debridbox.shared.models import CacheEntry, StreamRequest
from debridbox.torbox.interfaces import TorboxApi

logger = logging.getLogger(__name__)

MAX_HASHES_PER_CALL = 100


async def get_cached_streams(
    client: TorboxApi,
    streams: Sequence[StreamRequest],
    api_key: str,
    *,
    batch_size: int = MAX_HASHES_PER_CALL,
) -> dict[str, CacheEntry]:
    """Report which ``streams`` the provider has cached.

    One ``checkcached`` call is issued per chunk of ``batch_size`` streams and
    the chunks run concurrently. Availability is per info hash, so every file
    of a cached torrent is reported as cached.

    Returns:
        Map keyed by ``infoHash@fileIdx``.

    Raises:
        AuthError: If the provider rejected ``api_key``.
    """
    if not streams:
        return {}

    chunks = chunk_array(streams, min(batch_size, MAX_HASHES_PER_CALL))
    results = await asyncio.gather(
        *(_check_chunk(client, chunk, api_key) for chunk in chunks),
        return_exceptions=True,
    )

    # gather has waited for every chunk, so no failure goes unretrieved
    failures = [result for result in results if isinstance(result, BaseException)]
    if failures:
        raise next((exc for exc in failures if isinstance(exc, AuthError)), failures[0])

    merged: dict[str, CacheEntry] = {}
    for result in results:
        merged.update(result)

    cached = sum(1 for entry in merged.values() if entry.cached)
    logger.info("torbox availability: %d/%d streams cached (%d calls)", cached, len(merged), len(chunks))
    return merged


async def _check_chunk(client: TorboxApi, streams: list[StreamRequest], api_key: str) -> dict[str, CacheEntry]:
    hashes = [stream.info_hash for stream in streams]
    try:
        data = await client.check_cached(hashes)
    except AuthError:
        raise
    except DebridError as exc:
        logger.warning("torbox cached availability request failed for %d hashes: %s", len(hashes), exc)
        data = None

    available = {str(item.get("hash", "")).lower() for item in data or [] if isinstance(item, dict)}
    entries: dict[str, CacheEntry] = {}
    for stream in streams:
        file_idx = "undefined" if stream.file_idx is None else stream.file_idx
        entries[stream.key] = CacheEntry(
            url=f"{api_key}/{stream.info_hash}/{stream_filename(stream)}/{file_idx}",
            cached=stream.info_hash.lower() in available,
        )
    return entries
