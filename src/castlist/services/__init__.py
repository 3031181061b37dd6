"""Business logic services for castlist.

Public API:
    MediaListModel - Background loading with listener notifications
    MediaTreeDecoder - Decode a parsed document into a MediaTree
    decode_media_tree, decode_document - Functional decode entry points

Protocols (for dependency injection):
    FetcherProtocol - Document transport abstraction
    MediaListListener - Load outcome receiver

Internal (not exported):
    HTTPFetcher - urllib-based FetcherProtocol implementation
"""

from castlist.services.decoder import (
    MediaTreeDecoder,
    decode_document,
    decode_media_tree,
)
from castlist.services.fetcher import FetcherProtocol
from castlist.services.media_list import MediaListListener, MediaListModel

__all__ = [
    "FetcherProtocol",
    "MediaListListener",
    "MediaListModel",
    "MediaTreeDecoder",
    "decode_document",
    "decode_media_tree",
]
