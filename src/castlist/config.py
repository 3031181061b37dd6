"""Configuration for castlist."""

from dataclasses import dataclass
from enum import StrEnum


class VideoFormat(StrEnum):
    """Source variant tags a category can carry a base URL for.

    The value doubles as the category key holding the videos base URL
    and as the "type" tag matched against an item's "sources".
    """

    HLS = "hls"


@dataclass(frozen=True)
class LoaderConfig:
    """Media list loader configuration.

    Attributes:
        video_format: Source variant selected for each media item.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header. Defaults to ``castlist/<version>``.
    """

    video_format: VideoFormat = VideoFormat.HLS
    timeout: float = 30.0
    user_agent: str | None = None
