"""Classification of TorBox status strings.

TorBox reports the outcome of ``createtorrent`` only as human-readable
``detail`` text, so every mapping from that text lives here.
"""

from __future__ import annotations

import re

from debridbox.shared.enums import CreationStatus

# Checked in order; the first match wins.
_CREATION_PATTERNS: tuple[tuple[re.Pattern[str], CreationStatus], ...] = (
    (re.compile(r"cached", re.IGNORECASE), CreationStatus.CACHED),
    (re.compile(r"added", re.IGNORECASE), CreationStatus.DOWNLOADING),
    (re.compile(r"queued", re.IGNORECASE), CreationStatus.QUEUED),
    (re.compile(r"cooldown", re.IGNORECASE), CreationStatus.COOLDOWN),
)

_NOT_PREMIUM_PATTERN = re.compile(r"not premium", re.IGNORECASE)

ERROR_STATUSES = frozenset({"deleted", "error", "timeout"})


def classify_creation_detail(detail: str | None) -> CreationStatus:
    """Map a ``createtorrent`` detail text to a :class:`CreationStatus`.

    Unrecognised or missing text yields ``CreationStatus.UNKNOWN``.
    """
    if not detail:
        return CreationStatus.UNKNOWN
    for pattern, status in _CREATION_PATTERNS:
        if pattern.search(detail):
            return status
    return CreationStatus.UNKNOWN


def is_not_premium(detail: str | None) -> bool:
    return bool(detail) and _NOT_PREMIUM_PATTERN.search(detail) is not None


def is_error_status(status: str | None) -> bool:
    """True for library torrents that failed (deleted, errored or timed out)."""
    return status is not None and status.lower() in ERROR_STATUSES
