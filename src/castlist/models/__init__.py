"""Data models for castlist.

Public API:
    MediaTree, TreeNode - Decoded media hierarchy
    MediaDescriptor - Playable media item attached to leaves
    MediaMetadata, ImageRef, TextTrack, TextTrackStyle - Descriptor parts
    TrackType, TextTrackSubtype - Track enumerations
"""

from castlist.models.cancel import LoadTicket
from castlist.models.enums import MetadataType, StreamType, TextTrackSubtype, TrackType
from castlist.models.media import (
    ImageRef,
    MediaDescriptor,
    MediaMetadata,
    TextTrack,
    TextTrackStyle,
)
from castlist.models.tree import MediaTree, TreeNode

__all__ = [
    "ImageRef",
    "LoadTicket",
    "MediaDescriptor",
    "MediaMetadata",
    "MediaTree",
    "MetadataType",
    "StreamType",
    "TextTrack",
    "TextTrackStyle",
    "TextTrackSubtype",
    "TrackType",
    "TreeNode",
]
