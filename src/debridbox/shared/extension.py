"""File extension predicates."""

from __future__ import annotations

VIDEO_EXTENSIONS = frozenset(
    {
        "3g2",
        "3gp",
        "avi",
        "flv",
        "mkv",
        "mk3d",
        "mov",
        "mp2",
        "mp4",
        "m4v",
        "mpe",
        "mpeg",
        "mpg",
        "mpv",
        "webm",
        "wmv",
        "ogm",
        "ts",
        "m2ts",
        "divx",
    }
)


def is_video(filename: str | None) -> bool:
    """Return True when ``filename`` ends with a known video extension."""
    if not filename or "." not in filename:
        return False
    return filename.rsplit(".", 1)[1].lower() in VIDEO_EXTENSIONS
