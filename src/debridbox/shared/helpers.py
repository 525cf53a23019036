"""Small helpers shared by the provider modules."""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar
from urllib.parse import quote

from debridbox.shared.enums import CommonError
from debridbox.shared.exceptions import AuthError, DebridError
from debridbox.shared.models import StreamRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")

_BAD_TOKEN_MESSAGE = "Not logged in."

# Trailing "👤 seeders 💾 size ⚙️ source" line appended to host stream titles
_PEERS_LINE = re.compile(r"\n👤.*", re.DOTALL)


def chunk_array(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into consecutive chunks of at most ``size`` elements."""
    if size < 1:
        raise ValueError(f"chunk size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def stream_filename(stream: StreamRequest) -> str:
    """Return the URL-encoded file name carried in a host stream title."""
    title_parts = _PEERS_LINE.sub("", stream.title).split("\n")
    filename = title_parts[-1].split("/")[-1]
    # same reserved set as JavaScript's encodeURIComponent
    return quote(filename, safe="!*'()")


def to_common_error(error: BaseException | None) -> CommonError | None:
    """Classify a provider error into one shared by all providers.

    Only the exact upstream message ``"Not logged in."`` is recognised; any
    other error is left unclassified.
    """
    if isinstance(error, DebridError) and error.message == _BAD_TOKEN_MESSAGE:
        return CommonError.BAD_TOKEN
    return None


async def with_fallback(
    attempt: Callable[[], Awaitable[T]],
    fallback: Callable[[], Awaitable[T]],
    *,
    recover: tuple[type[DebridError], ...] = (DebridError,),
) -> T:
    """Await ``attempt``; if it fails with a ``recover`` error, await ``fallback``.

    ``AuthError`` always propagates. A failure of ``fallback`` propagates with
    the first failure chained as its context.
    """
    try:
        return await attempt()
    except AuthError:
        raise
    except recover as exc:
        logger.debug("first attempt failed (%s), running fallback", exc)
        return await fallback()
