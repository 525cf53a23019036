"""Magnet URI helpers."""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Iterable
from urllib.parse import quote

_BTIH_PATTERN = re.compile(r"btih:([a-fA-F0-9]{40}|[a-zA-Z2-7]{32})(?![a-zA-Z0-9])")


def build_magnet_link(info_hash: str, trackers: Iterable[str] = (), name: str | None = None) -> str:
    """Build a magnet URI for ``info_hash`` with optional display name and trackers."""
    parts = [f"magnet:?xt=urn:btih:{info_hash.lower()}"]
    if name:
        parts.append(f"dn={quote(name, safe='')}")
    parts.extend(f"tr={quote(tracker, safe='')}" for tracker in trackers)
    return "&".join(parts)


def decode_info_hash(magnet_uri: str | None) -> str | None:
    """Extract the info hash from a magnet URI as lowercase hex.

    Base32-encoded hashes are converted to their hex form.
    """
    if not magnet_uri:
        return None
    match = _BTIH_PATTERN.search(magnet_uri)
    if not match:
        return None

    value = match.group(1)
    if len(value) == 40:
        return value.lower()
    try:
        return base64.b32decode(value.upper()).hex()
    except binascii.Error:
        return None
