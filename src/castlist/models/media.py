"""Playable media descriptor models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from castlist.models.enums import (
    MetadataType,
    StreamType,
    TextTrackSubtype,
    TrackType,
)

DEFAULT_TRACK_MIME_TYPE = "text/vtt"

# Fixed display hints, not measured image sizes
THUMBNAIL_WIDTH = 480
THUMBNAIL_HEIGHT = 720
POSTER_WIDTH = 780
POSTER_HEIGHT = 1200


class MediaModel(BaseModel):
    """Base model for decoded media objects."""

    model_config = ConfigDict(frozen=True)


class ImageRef(MediaModel):
    """Image reference with nominal display dimensions."""

    url: str
    width: int
    height: int


class MediaMetadata(MediaModel):
    """Display metadata of a media item.

    Attributes:
        metadata_type: Metadata template (always MOVIE for decoded items).
        title: Item title.
        description: Extended description, taken from the item subtitle.
        studio: Studio name.
        poster_url: String form of the resolved poster URL.
        images: Thumbnail first, then poster, when present.
    """

    metadata_type: MetadataType = MetadataType.MOVIE
    title: str | None = None
    description: str | None = None
    studio: str | None = None
    poster_url: str | None = None
    images: list[ImageRef] = Field(default_factory=list)


class TextTrack(MediaModel):
    """Caption, subtitle or other side-stream of a media item.

    Identifiers are unique within their media item only.
    """

    identifier: int = 0
    content_id: str | None = None
    content_type: str = DEFAULT_TRACK_MIME_TYPE
    type: TrackType = TrackType.UNKNOWN
    subtype: TextTrackSubtype = TextTrackSubtype.UNKNOWN
    name: str | None = None
    language: str | None = None


class TextTrackStyle(MediaModel):
    """Rendering style for text tracks. All-None means receiver defaults."""

    font_scale: float | None = None
    foreground_color: str | None = None
    background_color: str | None = None
    font_family: str | None = None


class MediaDescriptor(MediaModel):
    """A playable media item attached to a leaf node.

    Attributes:
        content_url: Resolved URL of the selected source variant.
        content_id: Copy of content_url for receivers that only read the ID.
        content_type: MIME type of the selected source variant.
        stream_type: Stream handling hint for the receiver.
        duration: Duration in seconds.
        metadata: Display metadata.
        tracks: Text tracks, or None when the item has none.
        text_track_style: Style applied to text tracks.
    """

    content_url: str
    content_id: str
    content_type: str
    stream_type: StreamType = StreamType.BUFFERED
    duration: float
    metadata: MediaMetadata = Field(default_factory=MediaMetadata)
    tracks: list[TextTrack] | None = None
    text_track_style: TextTrackStyle = Field(default_factory=TextTrackStyle)

    @field_validator("content_url", "content_type")
    @classmethod
    def non_empty_string(cls, v: str) -> str:
        """Validate that the playable URL and MIME type are non-empty."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("tracks")
    @classmethod
    def empty_tracks_as_none(cls, v: list[TextTrack] | None) -> list[TextTrack] | None:
        """Normalize an empty track list to None."""
        return v or None

    @property
    def thumbnail(self) -> ImageRef | None:
        """First image of the metadata, used as the list thumbnail."""
        return self.metadata.images[0] if self.metadata.images else None
