"""Domain enumerations used across all modules."""

from __future__ import annotations

from enum import Enum, unique


@unique
class StaticResponse(str, Enum):
    """Host sentinels returned instead of a playable URL.

    Values are paths of the static videos the host serves for each outcome.
    """

    DOWNLOADING = "videos/downloading_v2.mp4"
    QUEUED = "videos/queued_v1.mp4"
    COOLDOWN_LIMIT = "videos/cooldown_limit_v1.mp4"
    FAILED_ACCESS = "videos/failed_access_v2.mp4"
    FAILED_UNEXPECTED = "videos/failed_unexpected_v2.mp4"


@unique
class CreationStatus(str, Enum):
    """Outcome of adding a torrent, read from the provider's detail text."""

    CACHED = "cached"
    DOWNLOADING = "downloading"
    QUEUED = "queued"
    COOLDOWN = "cooldown"
    UNKNOWN = "unknown"


@unique
class MetaType(str, Enum):
    """Host catalog meta types."""

    MOVIE = "movie"
    SERIES = "series"
    OTHER = "other"


@unique
class CommonError(str, Enum):
    """Errors shared by every debrid provider of the host."""

    BAD_TOKEN = "bad_token"
