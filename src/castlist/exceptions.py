"""Custom exceptions for castlist.

All exceptions include an HTTP status_code attribute so a service
embedding the loader can map failures straight to responses.
"""


class CastListError(Exception):
    """Base exception for castlist.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class LoadError(CastListError):
    """Failed to fetch the media list document."""

    status_code: int = 502  # Bad Gateway (upstream failure)


class TransportError(LoadError):
    """Network-level failure (DNS, connection refused, timeout).

    Decoding is never attempted when this is raised.

    Attributes:
        cause: The underlying transport exception.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class HTTPStatusError(LoadError):
    """Server answered with a status outside 200-299.

    Attributes:
        status: The HTTP status code received from the server.
    """

    def __init__(self, status: int, url: str | None = None) -> None:
        message = f"HTTP {status}" if url is None else f"HTTP {status} for {url}"
        super().__init__(message)
        self.status = status
        self.url = url


class EmptyResponseError(LoadError):
    """Server answered 2xx with no body to decode."""


class DecodeError(CastListError):
    """Media list document could not be decoded into a tree."""

    status_code: int = 422  # Unprocessable Entity


class MalformedDocumentError(DecodeError):
    """Document is not JSON or lacks the top-level "categories" array."""


class MissingBaseURLError(DecodeError):
    """Selected category lacks one of its base URL fields.

    Attributes:
        field: Name of the missing field ("hls", "images" or "tracks").
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"Category is missing base URL field: {field!r}")
        self.field = field


class InvalidMediaItemError(DecodeError):
    """Media item lacks a playable URL, MIME type or numeric duration.

    Attributes:
        index: Position of the item in the category's "videos" array.
        title: Item title, if it had one.
        missing: Names of the fields that were absent or invalid.
    """

    def __init__(
        self, index: int, title: str | None, missing: tuple[str, ...]
    ) -> None:
        label = f"#{index}" if title is None else f"#{index} ({title!r})"
        super().__init__(f"Invalid media item {label}: missing {', '.join(missing)}")
        self.index = index
        self.title = title
        self.missing = missing
