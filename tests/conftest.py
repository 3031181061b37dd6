"""Test fixtures and configuration."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

HLS_BASE = "http://cdn/hls/"
IMAGES_BASE = "http://img/"
TRACKS_BASE = "http://trk/"


@pytest.fixture
def sample_video() -> dict[str, Any]:
    """Create a fully populated media item."""
    return {
        "title": "Big Buck Bunny",
        "subtitle": "A large rabbit deals with three bullies.",
        "studio": "Blender Foundation",
        "duration": 596,
        "image-480x270": "images/480x270/BigBuckBunny.jpg",
        "image-780x1200": "images/780x1200/BigBuckBunny.jpg",
        "sources": [
            {"type": "mp4", "mime": "video/mp4", "url": "mp4/BigBuckBunny.mp4"},
            {
                "type": "hls",
                "mime": "application/x-mpegurl",
                "url": "BigBuckBunny.m3u8",
            },
            {"type": "hls", "mime": "application/x-mpegurl", "url": "second.m3u8"},
        ],
        "tracks": [
            {
                "id": 1,
                "name": "English Subtitle",
                "type": "text",
                "subtype": "captions",
                "contentId": "BigBuckBunny-en.vtt",
                "language": "en-US",
            },
        ],
    }


@pytest.fixture
def make_category() -> Callable[..., dict[str, Any]]:
    """Factory for a category with base URLs and the given videos."""

    def _make(videos: list[Any] | None = None, name: str = "Movies", **extra: Any):
        category: dict[str, Any] = {
            "name": name,
            "hls": HLS_BASE,
            "images": IMAGES_BASE,
            "tracks": TRACKS_BASE,
        }
        if videos is not None:
            category["videos"] = videos
        category.update(extra)
        return category

    return _make


@pytest.fixture
def sample_document(
    make_category: Callable[..., dict[str, Any]], sample_video: dict[str, Any]
) -> dict[str, Any]:
    """Create a document with one category holding one video."""
    return {"categories": [make_category([sample_video])]}


@pytest.fixture
def sample_document_bytes(sample_document: dict[str, Any]) -> bytes:
    """Serialized sample_document."""
    return json.dumps(sample_document).encode()


@pytest.fixture
def mock_urlopen_response() -> Callable[..., MagicMock]:
    """Factory for a context-manager response as returned by urlopen."""

    def _make(data: bytes, status: int = 200) -> MagicMock:
        response = MagicMock()
        response.status = status
        response.read.return_value = data
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        return response

    return _make
