"""Hierarchical exception types for the debrid integration."""

from __future__ import annotations

from typing import Any


class DebridError(Exception):
    """Base exception for all debridbox errors.

    ``message`` is the upstream (provider) message when there is one, and
    ``payload`` keeps the raw provider response for diagnostics.
    """

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload


# ── Transport ───────────────────────────────────────────────────


class TransportError(DebridError):
    """Network failure, undecodable body, or a provider-side error payload."""


class AuthError(DebridError):
    """The provider rejected the access token."""


# ── Expected, handled by fallback paths ────────────────────────


class NotCachedError(DebridError):
    """The provider holds no cached copy of the requested content."""


class NoTorrentFoundError(DebridError):
    """No torrent with the requested hash exists in the account library."""


# ── Surfaced to the host ───────────────────────────────────────


class AccessDeniedError(DebridError):
    """The account lacks premium access."""


class UnclassifiedProviderError(DebridError):
    """Unexpected provider response; ``payload`` holds the raw response."""
