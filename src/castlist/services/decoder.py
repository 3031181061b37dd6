"""Media list document decoding.

Turns the JSON value tree of a media list document into a MediaTree.
Only the first category carrying a "videos" array is decoded; its items
become leaves of the root node, in document order.

Non-object entries in the categories, items, sources and tracks arrays
are skipped silently. Any item lacking a playable source, MIME type or
numeric duration fails the whole document. Blank strings are treated
as absent and only finite numbers count as numeric.
"""

import json
import logging
import math
from typing import Any

from castlist.config import VideoFormat
from castlist.exceptions import (
    InvalidMediaItemError,
    MalformedDocumentError,
    MissingBaseURLError,
)
from castlist.models.enums import TextTrackSubtype, TrackType
from castlist.models.media import (
    POSTER_HEIGHT,
    POSTER_WIDTH,
    THUMBNAIL_HEIGHT,
    THUMBNAIL_WIDTH,
    ImageRef,
    MediaDescriptor,
    MediaMetadata,
    TextTrack,
)
from castlist.models.tree import MediaTree, TreeNode
from castlist.utils.url import build_url

logger = logging.getLogger(__name__)

# Document keys
KEY_CATEGORIES = "categories"
KEY_VIDEOS = "videos"
KEY_NAME = "name"
KEY_IMAGES_BASE_URL = "images"
KEY_TRACKS_BASE_URL = "tracks"
KEY_TITLE = "title"
KEY_SUBTITLE = "subtitle"
KEY_STUDIO = "studio"
KEY_DURATION = "duration"
KEY_IMAGE_URL = "image-480x270"
KEY_POSTER_URL = "image-780x1200"
KEY_SOURCES = "sources"
KEY_TYPE = "type"
KEY_MIME_TYPE = "mime"
KEY_URL = "url"
KEY_TRACKS = "tracks"
KEY_ID = "id"
KEY_SUBTYPE = "subtype"
KEY_CONTENT_ID = "contentId"
KEY_LANGUAGE = "language"


def _get_string(obj: dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    return value if isinstance(value, str) else None


def _get_text(obj: dict[str, Any], key: str) -> str | None:
    """Like _get_string, but blank strings count as absent."""
    value = _get_string(obj, key)
    return value if value and not value.isspace() else None


def _get_array(obj: dict[str, Any], key: str) -> list[Any] | None:
    value = obj.get(key)
    return value if isinstance(value, list) else None


def _get_number(obj: dict[str, Any], key: str) -> float | None:
    value = obj.get(key)
    # bool is an int subclass but not a duration
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    # json.loads yields inf for 1e999 and Infinity, nan for NaN
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _get_integer(obj: dict[str, Any], key: str, default: int = 0) -> int:
    value = _get_number(obj, key)
    return int(value) if value is not None else default


def _objects(array: list[Any]) -> list[tuple[int, dict[str, Any]]]:
    """Pair each object entry with its index, dropping non-objects."""
    return [(i, entry) for i, entry in enumerate(array) if isinstance(entry, dict)]


class MediaTreeDecoder:
    """Decodes media list documents for one source variant.

    Example:
        >>> decoder = MediaTreeDecoder()
        >>> tree = decoder.decode({"categories": [...]})
        >>> tree.title, len(tree.root.children)
    """

    def __init__(self, video_format: VideoFormat = VideoFormat.HLS) -> None:
        """Initialize the decoder.

        Args:
            video_format: Source "type" tag to select. Its value is also the
                category key holding the videos base URL.
        """
        self._video_format = video_format

    def decode(self, document: Any) -> MediaTree:
        """Decode a parsed JSON document into a media tree.

        Args:
            document: Value returned by json.loads for the document.

        Returns:
            The decoded tree. Its root is empty when no category has videos.

        Raises:
            MalformedDocumentError: If there is no "categories" array.
            MissingBaseURLError: If the selected category lacks a base URL.
            InvalidMediaItemError: If any item cannot be made playable.
        """
        if not isinstance(document, dict):
            raise MalformedDocumentError("Document root is not a JSON object")
        categories = _get_array(document, KEY_CATEGORIES)
        if categories is None:
            raise MalformedDocumentError(
                f"Document has no {KEY_CATEGORIES!r} array"
            )

        tree = MediaTree()
        for index, category in _objects(categories):
            items = _get_array(category, KEY_VIDEOS)
            if items is None:
                continue
            tree.title = _get_string(category, KEY_NAME)
            logger.debug(
                "Using category #%d (%r) with %d entries",
                index,
                tree.title,
                len(items),
            )
            self._decode_items(items, category, tree.root)
            break
        else:
            logger.debug("No category with %r found", KEY_VIDEOS)

        return tree

    def _base_url(self, category: dict[str, Any], key: str) -> str:
        value = _get_string(category, key)
        if value is None:
            raise MissingBaseURLError(key)
        return value

    def _decode_items(
        self, items: list[Any], category: dict[str, Any], parent: TreeNode
    ) -> None:
        videos_base_url = self._base_url(category, self._video_format.value)
        images_base_url = self._base_url(category, KEY_IMAGES_BASE_URL)
        tracks_base_url = self._base_url(category, KEY_TRACKS_BASE_URL)

        for index, item in _objects(items):
            media = self._decode_item(
                index, item, videos_base_url, images_base_url, tracks_base_url
            )
            parent.add_child(TreeNode.for_media(media))

        logger.debug("Decoded %d media items", len(parent.children))

    def _decode_item(
        self,
        index: int,
        item: dict[str, Any],
        videos_base_url: str,
        images_base_url: str,
        tracks_base_url: str,
    ) -> MediaDescriptor:
        title = _get_string(item, KEY_TITLE)
        mime_type, url = self._select_source(item, videos_base_url)

        images: list[ImageRef] = []
        image_url = build_url(_get_text(item, KEY_IMAGE_URL), images_base_url)
        if image_url is not None:
            images.append(
                ImageRef(url=image_url, width=THUMBNAIL_WIDTH, height=THUMBNAIL_HEIGHT)
            )
        poster_url = build_url(_get_text(item, KEY_POSTER_URL), images_base_url)
        if poster_url is not None:
            images.append(
                ImageRef(url=poster_url, width=POSTER_WIDTH, height=POSTER_HEIGHT)
            )

        metadata = MediaMetadata(
            title=title,
            description=_get_string(item, KEY_SUBTITLE),
            studio=_get_string(item, KEY_STUDIO),
            poster_url=poster_url,
            images=images,
        )
        tracks = self._decode_tracks(item, tracks_base_url)
        duration = _get_number(item, KEY_DURATION)

        missing: list[str] = []
        if not url:
            missing.append(KEY_URL)
        if not mime_type:
            missing.append(KEY_MIME_TYPE)
        if duration is None:
            missing.append(KEY_DURATION)
        if missing:
            raise InvalidMediaItemError(index, title, tuple(missing))

        return MediaDescriptor(
            content_url=url,
            content_id=str(url),
            content_type=mime_type,
            duration=duration,
            metadata=metadata,
            tracks=tracks,
        )

    def _select_source(
        self, item: dict[str, Any], videos_base_url: str
    ) -> tuple[str | None, str | None]:
        """Return (mime, url) of the first source tagged with the video format."""
        for _, source in _objects(_get_array(item, KEY_SOURCES) or []):
            if _get_string(source, KEY_TYPE) == self._video_format.value:
                url = build_url(_get_text(source, KEY_URL), videos_base_url)
                return _get_text(source, KEY_MIME_TYPE), url
        return None, None

    def _decode_tracks(
        self, item: dict[str, Any], tracks_base_url: str
    ) -> list[TextTrack] | None:
        tracks = [
            TextTrack(
                identifier=_get_integer(track, KEY_ID),
                content_id=build_url(
                    _get_text(track, KEY_CONTENT_ID), tracks_base_url
                ),
                type=TrackType.from_string(_get_string(track, KEY_TYPE)),
                subtype=TextTrackSubtype.from_string(_get_string(track, KEY_SUBTYPE)),
                name=_get_string(track, KEY_NAME),
                language=_get_string(track, KEY_LANGUAGE),
            )
            for _, track in _objects(_get_array(item, KEY_TRACKS) or [])
        ]
        return tracks or None


def decode_media_tree(
    document: Any, video_format: VideoFormat = VideoFormat.HLS
) -> MediaTree:
    """Decode a parsed JSON document into a media tree.

    See MediaTreeDecoder.decode for the errors raised.
    """
    return MediaTreeDecoder(video_format).decode(document)


def decode_document(
    data: bytes | str, video_format: VideoFormat = VideoFormat.HLS
) -> MediaTree:
    """Parse and decode raw media list document text.

    Raises:
        MalformedDocumentError: If data is not valid JSON.
        DecodeError: For any structural problem (see MediaTreeDecoder.decode).
    """
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedDocumentError(f"Document is not valid JSON: {e}") from e
    return decode_media_tree(document, video_format)
