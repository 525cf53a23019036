"""API routes exposing the TorBox operations to the host."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import RedirectResponse

from debridbox.shared.enums import StaticResponse
from debridbox.shared.exceptions import AuthError, DebridError
from debridbox.shared.models import StreamRequest
from debridbox.torbox.catalog import KEY
from debridbox.torbox.service import TorboxService

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_service(request: Request) -> TorboxService:
    service = getattr(request.app.state, "service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="torbox service unavailable")
    return service


def _static_url(request: Request, response: StaticResponse) -> str:
    base = str(getattr(request.app.state, "static_base_url", "") or request.base_url).rstrip("/")
    return f"{base}/{response.value}"


def _parse_file_idx(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def _provider_failure(exc: DebridError) -> HTTPException:
    if isinstance(exc, AuthError):
        return HTTPException(status_code=401, detail="torbox rejected the api key")
    return HTTPException(status_code=502, detail=exc.message)


@router.post("/torbox/{api_key}/availability")
async def availability(api_key: str, streams: list[StreamRequest], request: Request) -> dict[str, Any]:
    """Map ``infoHash@fileIdx`` to ``{url, cached}`` for each posted stream."""
    service = _get_service(request)
    try:
        entries = await service.get_cached_streams(streams, api_key)
    except DebridError as exc:
        raise _provider_failure(exc) from exc
    return {key: entry.model_dump() for key, entry in entries.items()}


@router.get("/torbox/{api_key}/catalog")
async def catalog(api_key: str, request: Request, skip: int = 0) -> dict[str, Any]:
    service = _get_service(request)
    try:
        metas = await service.get_catalog(api_key, offset=skip)
    except DebridError as exc:
        raise _provider_failure(exc) from exc
    return {"metas": [meta.model_dump(mode="json") for meta in metas]}


@router.get("/torbox/{api_key}/meta/{item_id}")
async def meta(api_key: str, item_id: str, request: Request) -> dict[str, Any]:
    service = _get_service(request)
    folder_id = item_id.removeprefix(f"{KEY}:")
    try:
        item = await service.get_item_meta(folder_id, api_key)
    except DebridError as exc:
        raise _provider_failure(exc) from exc
    return {"meta": item.model_dump(mode="json", by_alias=True, exclude_none=True)}


@router.get("/resolve/torbox/{api_key}/{info_hash}/{filename}/{file_idx}")
async def resolve(api_key: str, info_hash: str, filename: str, file_idx: str, request: Request) -> RedirectResponse:
    """Redirect to the resolved file, or to the static video for a sentinel."""
    service = _get_service(request)
    try:
        result = await service.resolve(api_key, info_hash, filename, _parse_file_idx(file_idx))
    except AuthError as exc:
        raise _provider_failure(exc) from exc
    except DebridError as exc:
        logger.warning("torbox resolve failed for %s [%s]: %s", info_hash, file_idx, exc)
        result = StaticResponse.FAILED_UNEXPECTED

    if isinstance(result, StaticResponse):
        return RedirectResponse(url=_static_url(request, result), status_code=302)
    return RedirectResponse(url=result, status_code=302)


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Status dictionary
    """
    return {"status": "ok"}
