"""Tests for the batch cache-availability lookup."""

from __future__ import annotations

import asyncio
import math
from unittest.mock import AsyncMock

import pytest

from debridbox.shared.exceptions import AuthError, TransportError
from debridbox.shared.models import StreamRequest
from debridbox.torbox.availability import get_cached_streams


def _streams(count: int) -> list[StreamRequest]:
    return [StreamRequest(info_hash=f"{i:040x}", file_idx=i % 3, title=f"file{i}.mkv") for i in range(count)]


class TestGetCachedStreams:
    @pytest.mark.parametrize("count", [1, 99, 100, 101, 250])
    async def test_one_call_per_hundred_streams(self, mock_torbox: AsyncMock, count: int) -> None:
        result = await get_cached_streams(mock_torbox, _streams(count), "key")

        assert mock_torbox.check_cached.await_count == math.ceil(count / 100)
        assert len(result) == count
        for call in mock_torbox.check_cached.await_args_list:
            assert len(call.args[0]) <= 100

    async def test_empty_input_makes_no_call(self, mock_torbox: AsyncMock) -> None:
        assert await get_cached_streams(mock_torbox, [], "key") == {}
        mock_torbox.check_cached.assert_not_awaited()

    async def test_entry_shape(self, mock_torbox: AsyncMock, sample_stream: StreamRequest) -> None:
        mock_torbox.check_cached.return_value = [{"hash": sample_stream.info_hash}]

        result = await get_cached_streams(mock_torbox, [sample_stream], "key")

        entry = result[f"{sample_stream.info_hash}@0"]
        assert entry.cached is True
        assert entry.url == f"key/{sample_stream.info_hash}/Big%20Movie%20(2020).mkv/0"

    async def test_availability_is_per_hash(self, mock_torbox: AsyncMock) -> None:
        streams = [
            StreamRequest(info_hash="a" * 40, file_idx=0, title="one.mkv"),
            StreamRequest(info_hash="a" * 40, file_idx=5, title="two.mkv"),
            StreamRequest(info_hash="b" * 40, file_idx=0, title="three.mkv"),
        ]
        mock_torbox.check_cached.return_value = [{"hash": "A" * 40}]

        result = await get_cached_streams(mock_torbox, streams, "key")

        assert result[f"{'a' * 40}@0"].cached is True
        assert result[f"{'a' * 40}@5"].cached is True
        assert result[f"{'b' * 40}@0"].cached is False

    async def test_failed_chunk_degrades_to_uncached(self, mock_torbox: AsyncMock) -> None:
        streams = _streams(150)
        mock_torbox.check_cached.side_effect = [
            TransportError("torbox checkcached request failed"),
            [{"hash": streams[120].info_hash}],
        ]

        result = await get_cached_streams(mock_torbox, streams, "key")

        assert len(result) == 150
        assert result[streams[0].key].cached is False
        assert result[streams[120].key].cached is True
        assert sum(entry.cached for entry in result.values()) == 1

    async def test_auth_failure_propagates(self, mock_torbox: AsyncMock) -> None:
        mock_torbox.check_cached.side_effect = AuthError("Not logged in.")

        with pytest.raises(AuthError):
            await get_cached_streams(mock_torbox, _streams(5), "bad-key")

    async def test_batch_size_never_exceeds_provider_limit(self, mock_torbox: AsyncMock) -> None:
        await get_cached_streams(mock_torbox, _streams(300), "key", batch_size=500)

        assert mock_torbox.check_cached.await_count == 3

    async def test_auth_failure_waits_for_sibling_chunks(self, mock_torbox: AsyncMock) -> None:
        finished: list[int] = []

        async def check_cached(hashes: list[str]) -> None:
            if hashes[0] == f"{0:040x}":
                raise AuthError("Not logged in.")
            await asyncio.sleep(0.01)
            finished.append(len(hashes))
            raise AuthError("Not logged in.")

        mock_torbox.check_cached.side_effect = check_cached

        with pytest.raises(AuthError):
            await get_cached_streams(mock_torbox, _streams(250), "bad-key")
        assert sorted(finished) == [50, 100]
