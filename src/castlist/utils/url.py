"""URL resolution utilities."""

from urllib.parse import urljoin

_ABSOLUTE_PREFIXES = ("http://", "https://")


def is_absolute_url(value: str) -> bool:
    """Check if a document URL field is already absolute (http or https)."""
    return value.startswith(_ABSOLUTE_PREFIXES)


def build_url(value: str | None, base_url: str) -> str | None:
    """Resolve a document URL field against a base URL.

    Values starting with "http://" or "https://" are returned verbatim;
    anything else is resolved as a relative reference.

    Args:
        value: URL field from the document, possibly relative.
        base_url: Base URL of the field's category (videos, images or tracks).

    Returns:
        The resolved URL, or None if value is None or empty.

    Examples:
        >>> build_url("a.m3u8", "http://cdn/hls/")
        'http://cdn/hls/a.m3u8'
        >>> build_url("https://other/a.m3u8", "http://cdn/hls/")
        'https://other/a.m3u8'
    """
    if not value:
        return None
    if is_absolute_url(value):
        return value
    return urljoin(base_url, value)
