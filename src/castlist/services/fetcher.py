"""Media list document fetching."""

from __future__ import annotations

import logging
import urllib.request
from importlib.metadata import PackageNotFoundError, version
from typing import Protocol
from urllib.error import HTTPError, URLError

from castlist.exceptions import EmptyResponseError, HTTPStatusError, TransportError

logger = logging.getLogger(__name__)


def _default_user_agent() -> str:
    try:
        return f"castlist/{version('castlist')}"
    except PackageNotFoundError:
        return "castlist"


class FetcherProtocol(Protocol):
    """Protocol for document fetchers.

    Implement this protocol to plug in another transport or a fake in tests.
    """

    def fetch(self, url: str) -> bytes:
        """Fetch the document body. Raises LoadError subclasses on failure."""
        ...


class HTTPFetcher:
    """Fetches a document with a single HTTP GET.

    Implements FetcherProtocol. No retries: transport concerns beyond a
    timeout belong to the caller.
    """

    def __init__(self, timeout: float = 30.0, user_agent: str | None = None) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds.
            user_agent: User-Agent header. Defaults to ``castlist/<version>``.
        """
        self._timeout = timeout
        self._user_agent = user_agent or _default_user_agent()

    def fetch(self, url: str) -> bytes:
        """Fetch the document body.

        Args:
            url: Document URL.

        Returns:
            The raw response body.

        Raises:
            HTTPStatusError: If the status is outside 200-299.
            EmptyResponseError: If a 2xx response has no body.
            TransportError: On DNS, connection or timeout failures.
        """
        logger.debug("Fetching media list: %s", url)
        request = urllib.request.Request(
            url,
            headers={"User-Agent": self._user_agent, "Accept": "application/json"},
        )
        try:
            with urllib.request.urlopen(request, timeout=self._timeout) as response:
                status = response.status
                if not 200 <= status <= 299:
                    raise HTTPStatusError(status, url)
                data = response.read()
        except HTTPError as e:
            raise HTTPStatusError(e.code, url) from e
        except (URLError, OSError, TimeoutError) as e:
            raise TransportError(f"Failed to fetch {url}: {e}", cause=e) from e

        if not data:
            raise EmptyResponseError(f"Empty response from {url}")

        logger.debug("Fetched media list: %s (%d bytes)", url, len(data))
        return data
