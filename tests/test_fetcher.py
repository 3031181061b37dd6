"""Tests for HTTPFetcher."""

from collections.abc import Callable
from email.message import Message
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

import pytest
from castlist.exceptions import EmptyResponseError, HTTPStatusError, TransportError
from castlist.services.fetcher import HTTPFetcher

URL = "https://example.com/media.json"


class TestHTTPFetcher:
    """Tests for HTTPFetcher.fetch."""

    def test_returns_body(
        self, mock_urlopen_response: Callable[..., MagicMock]
    ) -> None:
        """Should return the raw response body."""
        mock_resp = mock_urlopen_response(b'{"categories": []}')
        with patch(
            "castlist.services.fetcher.urllib.request.urlopen", return_value=mock_resp
        ):
            assert HTTPFetcher().fetch(URL) == b'{"categories": []}'

    def test_sends_user_agent_and_timeout(
        self, mock_urlopen_response: Callable[..., MagicMock]
    ) -> None:
        """Should pass the configured User-Agent and timeout to urlopen."""
        mock_resp = mock_urlopen_response(b"{}")
        with patch(
            "castlist.services.fetcher.urllib.request.urlopen", return_value=mock_resp
        ) as mock_urlopen:
            HTTPFetcher(timeout=5.0, user_agent="tester/1.0").fetch(URL)

        request = mock_urlopen.call_args.args[0]
        assert request.full_url == URL
        assert request.get_header("User-agent") == "tester/1.0"
        assert mock_urlopen.call_args.kwargs["timeout"] == 5.0

    def test_default_user_agent(
        self, mock_urlopen_response: Callable[..., MagicMock]
    ) -> None:
        mock_resp = mock_urlopen_response(b"{}")
        with patch(
            "castlist.services.fetcher.urllib.request.urlopen", return_value=mock_resp
        ) as mock_urlopen:
            HTTPFetcher().fetch(URL)

        request = mock_urlopen.call_args.args[0]
        assert request.get_header("User-agent").startswith("castlist")

    @pytest.mark.parametrize("status", [404, 500, 503])
    def test_http_error_status(self, status: int) -> None:
        """Should raise HTTPStatusError carrying the status code."""
        error = HTTPError(URL, status, "Error", Message(), None)
        with patch(
            "castlist.services.fetcher.urllib.request.urlopen", side_effect=error
        ):
            with pytest.raises(HTTPStatusError) as exc_info:
                HTTPFetcher().fetch(URL)
        assert exc_info.value.status == status
        assert exc_info.value.url == URL

    @pytest.mark.parametrize("status", [204, 206, 299])
    def test_other_2xx_status_accepted(
        self, mock_urlopen_response: Callable[..., MagicMock], status: int
    ) -> None:
        mock_resp = mock_urlopen_response(b"{}", status=status)
        with patch(
            "castlist.services.fetcher.urllib.request.urlopen", return_value=mock_resp
        ):
            assert HTTPFetcher().fetch(URL) == b"{}"

    def test_non_2xx_response_without_http_error(
        self, mock_urlopen_response: Callable[..., MagicMock]
    ) -> None:
        """Should reject a 3xx answer that urlopen did not follow."""
        mock_resp = mock_urlopen_response(b"moved", status=304)
        with patch(
            "castlist.services.fetcher.urllib.request.urlopen", return_value=mock_resp
        ):
            with pytest.raises(HTTPStatusError) as exc_info:
                HTTPFetcher().fetch(URL)
        assert exc_info.value.status == 304
        mock_resp.read.assert_not_called()

    def test_empty_body(self, mock_urlopen_response: Callable[..., MagicMock]) -> None:
        """Should raise EmptyResponseError for a 200 without body."""
        mock_resp = mock_urlopen_response(b"")
        with patch(
            "castlist.services.fetcher.urllib.request.urlopen", return_value=mock_resp
        ):
            with pytest.raises(EmptyResponseError):
                HTTPFetcher().fetch(URL)

    @pytest.mark.parametrize(
        "error",
        [
            URLError("Name or service not known"),
            ConnectionRefusedError("Connection refused"),
            TimeoutError("Connection timed out"),
        ],
        ids=["dns", "refused", "timeout"],
    )
    def test_transport_errors(self, error: Exception) -> None:
        """Should wrap network failures in TransportError with the cause."""
        with patch(
            "castlist.services.fetcher.urllib.request.urlopen", side_effect=error
        ):
            with pytest.raises(TransportError) as exc_info:
                HTTPFetcher().fetch(URL)
        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
