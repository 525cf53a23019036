"""TorBox torrent API client."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import httpx

from debridbox.shared.exceptions import AuthError, TransportError
from debridbox.shared.helpers import to_common_error

logger = logging.getLogger(__name__)


def raise_provider_error(message: str, payload: Any) -> NoReturn:
    """Raise the error for a provider-side failure payload.

    Raises:
        AuthError: If the message identifies a rejected token.
        TransportError: Otherwise.
    """
    error = TransportError(message, payload=payload)
    if to_common_error(error):
        raise AuthError(message, payload=payload) from error
    raise error


# TorBox API docs:
# https://api-docs.torbox.app/


class TorboxClient:
    """Client for the ``/torrents`` endpoints of the TorBox API.

    Implements the ``TorboxApi`` protocol. One instance is bound to one
    access token and holds no other state.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.torbox.app/v1/api/torrents",
        timeout: int = 30,
        seed: int = 3,
        allow_zip: bool = False,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._seed = seed
        self._allow_zip = allow_zip

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        require_success: bool = True,
    ) -> dict[str, Any]:
        """Call ``endpoint`` and return the decoded JSON body.

        Raises:
            TransportError: On network failure, a non-JSON body, or (when
                ``require_success``) a body with ``success: false``. The
                provider's ``detail`` becomes the error message.
            AuthError: If that message identifies a rejected token.
        """
        url = f"{self._base_url}/{endpoint}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.request(method, url, params=params, data=data, headers=self._headers())
        except httpx.HTTPError as exc:
            raise TransportError(f"torbox {endpoint} request failed: {exc}") from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise TransportError(f"torbox {endpoint} returned {resp.status_code}: {resp.text[:200]}") from exc

        if not isinstance(payload, dict):
            raise TransportError(f"torbox {endpoint} returned an unexpected body", payload=payload)

        if require_success and payload.get("success") is False:
            message = payload.get("detail") or payload.get("error") or f"torbox {endpoint} failed"
            raise_provider_error(str(message), payload)

        logger.debug("torbox %s %s -> %d", method, endpoint, resp.status_code)
        return payload

    async def check_cached(self, info_hashes: list[str]) -> list[dict[str, Any]] | None:
        payload = await self._request(
            "GET",
            "checkcached",
            params={"hash": ",".join(info_hashes), "format": "list", "list_files": "true"},
        )
        data = payload.get("data")
        return data if isinstance(data, list) else None

    async def list_torrents(self) -> list[dict[str, Any]]:
        payload = await self._request("GET", "mylist", params={"bypass_cache": "true"})
        data = payload.get("data")
        if not isinstance(data, list):
            raise TransportError("torbox mylist returned no torrent list", payload=payload)
        return data

    async def create_torrent(self, magnet: str) -> dict[str, Any]:
        # the detail text is classified by the caller, so failures are returned too
        return await self._request(
            "POST",
            "createtorrent",
            data={
                "magnet": magnet,
                "seed": str(self._seed),
                "allow_zip": "true" if self._allow_zip else "false",
            },
            require_success=False,
        )

    async def request_download_link(self, torrent_id: int, file_id: int) -> str | None:
        payload = await self._request(
            "GET",
            "requestdl",
            params={
                "token": self._api_key,
                "torrent_id": torrent_id,
                "file_id": file_id,
                "zip_link": "false",
            },
        )
        data = payload.get("data")
        return data if isinstance(data, str) and data else None
