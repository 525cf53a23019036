"""Cloud-storage client used for folder and transfer listing."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from debridbox.shared.exceptions import TransportError
from debridbox.torbox.client import raise_provider_error

logger = logging.getLogger(__name__)


class PremiumizeCloudClient:
    """Folder / transfer listing against a Premiumize-compatible cloud API.

    Implements the ``CloudStorage`` protocol.
    """

    def __init__(self, api_key: str, *, base_url: str = "https://www.premiumize.me/api", timeout: int = 5) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        query = {"apikey": self._api_key, **(params or {})}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(f"{self._base_url}/{endpoint}", params=query)
                payload = resp.json()
        except httpx.HTTPError as exc:
            raise TransportError(f"cloud {endpoint} request failed: {exc}") from exc
        except ValueError as exc:
            raise TransportError(f"cloud {endpoint} returned a non-JSON body") from exc

        if not isinstance(payload, dict):
            raise TransportError(f"cloud {endpoint} returned an unexpected body", payload=payload)
        if payload.get("status") == "error":
            # e.g. "Not logged in." for a rejected key
            raise_provider_error(str(payload.get("message") or f"cloud {endpoint} failed"), payload)
        return payload

    async def list_folder(self, folder_id: str | None = None) -> dict[str, Any]:
        params = {"id": folder_id} if folder_id else None
        payload = await self._get("folder/list", params)
        logger.debug("listed folder %s (%d entries)", folder_id or "<root>", len(payload.get("content") or []))
        return payload

    async def list_transfers(self) -> list[dict[str, Any]]:
        payload = await self._get("transfer/list")
        return list(payload.get("transfers") or [])
