"""Host-facing TorBox operations."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from debridbox.config import Settings, get_settings
from debridbox.shared.enums import StaticResponse
from debridbox.shared.models import CacheEntry, CatalogEntry, ItemMeta, StreamRequest
from debridbox.torbox.availability import get_cached_streams
from debridbox.torbox.catalog import CatalogLister
from debridbox.torbox.client import TorboxClient
from debridbox.torbox.cloud import PremiumizeCloudClient
from debridbox.torbox.interfaces import CloudStorage, TorboxApi
from debridbox.torbox.resolver import LinkResolver

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], TorboxApi]
CloudFactory = Callable[[str], CloudStorage]


class TorboxService:
    """The four operations the host calls, each scoped to one access token.

    Clients are built per call from the token, so nothing but settings is
    shared between concurrent requests.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client_factory: ClientFactory | None = None,
        cloud_factory: CloudFactory | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client_factory = client_factory or self._default_client
        self._cloud_factory = cloud_factory or self._default_cloud

    def _default_client(self, api_key: str) -> TorboxApi:
        return TorboxClient(
            api_key,
            base_url=self._settings.torrents_url,
            timeout=self._settings.torbox_timeout,
            seed=self._settings.create_seed,
            allow_zip=self._settings.create_allow_zip,
        )

    def _default_cloud(self, api_key: str) -> CloudStorage:
        return PremiumizeCloudClient(
            api_key,
            base_url=self._settings.cloud_api_base,
            timeout=self._settings.cloud_timeout,
        )

    async def get_cached_streams(self, streams: Sequence[StreamRequest], api_key: str) -> dict[str, CacheEntry]:
        return await get_cached_streams(
            self._client_factory(api_key),
            streams,
            api_key,
            batch_size=self._settings.check_batch_size,
        )

    async def get_catalog(self, api_key: str, offset: int = 0) -> list[CatalogEntry]:
        return await CatalogLister(self._cloud_factory(api_key)).get_catalog(offset)

    async def get_item_meta(self, item_id: str, api_key: str) -> ItemMeta:
        return await CatalogLister(self._cloud_factory(api_key)).get_item_meta(item_id)

    async def resolve(
        self,
        api_key: str,
        info_hash: str,
        cached_entry_info: str,
        file_index: int | None = None,
    ) -> str | StaticResponse:
        """Resolve ``info_hash`` to a playable URL or a :class:`StaticResponse`.

        ``cached_entry_info`` is the file name encoded in the availability URL.
        """
        resolver = LinkResolver(self._client_factory(api_key), trackers=self._settings.trackers)
        return await resolver.resolve(info_hash, cached_entry_info, file_index)
