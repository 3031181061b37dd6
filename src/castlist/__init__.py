"""castlist - Load media list documents into playable media trees.

This library fetches a JSON document describing categories of media
items and decodes it into a tree of playable media descriptors
(content URL, MIME type, duration, metadata and text tracks), then
notifies a listener of the outcome.

Examples:
    Decode a document you already have:
    ```python
    from castlist import decode_document

    tree = decode_document(raw_bytes)
    for item in tree.items:
        print(item.metadata.title, item.content_url)
    ```

    Load in the background:
    ```python
    from castlist import create_media_list_model

    model = create_media_list_model(listener=my_listener)
    model.load("https://example.com/media.json")
    ```
"""

from castlist.config import LoaderConfig, VideoFormat
from castlist.exceptions import (
    CastListError,
    DecodeError,
    EmptyResponseError,
    HTTPStatusError,
    InvalidMediaItemError,
    LoadError,
    MalformedDocumentError,
    MissingBaseURLError,
    TransportError,
)
from castlist.models import (
    ImageRef,
    MediaDescriptor,
    MediaMetadata,
    MediaTree,
    StreamType,
    TextTrack,
    TextTrackSubtype,
    TrackType,
    TreeNode,
)
from castlist.services import (
    FetcherProtocol,
    MediaListListener,
    MediaListModel,
    MediaTreeDecoder,
    decode_document,
    decode_media_tree,
)
from castlist.services.media_list import Dispatch


def create_media_list_model(
    listener: MediaListListener | None = None,
    config: LoaderConfig | None = None,
    dispatch: Dispatch | None = None,
) -> MediaListModel:
    """Create a configured media list model.

    This is the recommended way to create a model for library usage.
    It handles fetcher instantiation internally.

    Args:
        listener: Receiver of load notifications.
        config: Optional loader configuration. Uses defaults if not provided.
        dispatch: Optional notification channel, e.g.
            ``loop.call_soon_threadsafe``. Defaults to the worker thread.

    Returns:
        A configured MediaListModel instance.

    Examples:
        With an asyncio loop:
        ```python
        loop = asyncio.get_running_loop()
        model = create_media_list_model(listener, dispatch=loop.call_soon_threadsafe)
        ```
    """
    return MediaListModel(listener=listener, config=config, dispatch=dispatch)


__all__ = [
    "CastListError",
    "DecodeError",
    "EmptyResponseError",
    "FetcherProtocol",
    "HTTPStatusError",
    "ImageRef",
    "InvalidMediaItemError",
    "LoadError",
    "LoaderConfig",
    "MalformedDocumentError",
    "MediaDescriptor",
    "MediaListListener",
    "MediaListModel",
    "MediaMetadata",
    "MediaTree",
    "MediaTreeDecoder",
    "MissingBaseURLError",
    "StreamType",
    "TextTrack",
    "TextTrackSubtype",
    "TrackType",
    "TransportError",
    "TreeNode",
    "VideoFormat",
    "create_media_list_model",
    "decode_document",
    "decode_media_tree",
]
