"""Frozen Pydantic models for host requests, host results and provider records."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from debridbox.shared.enums import MetaType

# ── Host input ──────────────────────────────────────────────────


class StreamRequest(BaseModel):
    """A candidate stream the host wants availability for."""

    model_config = {"frozen": True}

    info_hash: str = Field(validation_alias=AliasChoices("infoHash", "info_hash"))
    file_idx: int | None = Field(default=None, validation_alias=AliasChoices("fileIdx", "file_idx"))
    title: str = ""

    @property
    def key(self) -> str:
        file_idx = "undefined" if self.file_idx is None else self.file_idx
        return f"{self.info_hash}@{file_idx}"


# ── Host results ────────────────────────────────────────────────


class CacheEntry(BaseModel):
    """Availability of one stream plus the path the host resolves it through."""

    model_config = {"frozen": True}

    url: str
    cached: bool


class CatalogEntry(BaseModel):
    model_config = {"frozen": True}

    id: str
    type: MetaType = MetaType.OTHER
    name: str


class VideoStream(BaseModel):
    model_config = {"frozen": True}

    url: str


class Video(BaseModel):
    model_config = {"frozen": True}

    id: str
    title: str
    released: str
    streams: list[VideoStream] = Field(default_factory=list)


class ItemMeta(BaseModel):
    """A cached folder rendered as a host meta object."""

    model_config = {"frozen": True}

    id: str
    type: MetaType = MetaType.OTHER
    name: str
    info_hash: str | None = Field(default=None, serialization_alias="infoHash")
    videos: list[Video] = Field(default_factory=list)


# ── Provider records ────────────────────────────────────────────


class TorrentFile(BaseModel):
    model_config = {"frozen": True}

    id: int
    short_name: str = ""
    name: str = ""


class TorrentRecord(BaseModel):
    """A torrent in the TorBox account library."""

    model_config = {"frozen": True}

    id: int
    hash: str
    name: str = ""
    status: str | None = Field(default=None, validation_alias=AliasChoices("statusCode", "download_state", "status"))
    files: list[TorrentFile] = Field(default_factory=list)


class FolderContent(BaseModel):
    """One entry of a cloud-storage folder listing."""

    model_config = {"frozen": True}

    id: int | str
    type: str = ""
    name: str = ""
    link: str | None = None
    stream_link: str | None = None
    created_at: int | None = None

    @property
    def is_folder(self) -> bool:
        return self.type == "folder"


class Transfer(BaseModel):
    """A cloud-storage transfer (the download that produced a file or folder)."""

    model_config = {"frozen": True}

    id: int | str
    src: str | None = None
    file_id: int | str | None = None
    folder_id: int | str | None = None

    def produced(self, item_id: str) -> bool:
        return any(ref is not None and str(ref) == item_id for ref in (self.file_id, self.folder_id))
