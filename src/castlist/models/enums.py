"""Enumerations for castlist domain models."""

from enum import StrEnum


class TrackType(StrEnum):
    """Kind of a media track."""

    AUDIO = "audio"
    TEXT = "text"
    VIDEO = "video"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value: str | None) -> "TrackType":
        """Map a document "type" string, falling back to UNKNOWN.

        Matching is exact and case-sensitive.
        """
        return _TRACK_TYPES.get(value, cls.UNKNOWN) if value else cls.UNKNOWN


class TextTrackSubtype(StrEnum):
    """Subtype of a text track. Only meaningful for TrackType.TEXT."""

    CAPTIONS = "captions"
    CHAPTERS = "chapters"
    DESCRIPTIONS = "descriptions"
    METADATA = "metadata"
    SUBTITLES = "subtitles"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value: str | None) -> "TextTrackSubtype":
        """Map a document "subtype" string, falling back to UNKNOWN.

        Matching is exact and case-sensitive.
        """
        return _TEXT_SUBTYPES.get(value, cls.UNKNOWN) if value else cls.UNKNOWN


class StreamType(StrEnum):
    """How the receiver should treat the content stream."""

    BUFFERED = "buffered"
    LIVE = "live"


class MetadataType(StrEnum):
    """Metadata template of a media item."""

    GENERIC = "generic"
    MOVIE = "movie"


_TRACK_TYPES = {
    t.value: t for t in (TrackType.AUDIO, TrackType.TEXT, TrackType.VIDEO)
}
_TEXT_SUBTYPES = {
    s.value: s for s in TextTrackSubtype if s is not TextTrackSubtype.UNKNOWN
}
