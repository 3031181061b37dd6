"""Tests for URL resolution."""

import pytest
from castlist.utils import build_url, is_absolute_url


class TestIsAbsoluteUrl:
    """Tests for is_absolute_url function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("http://cdn/a.m3u8", True),
            ("https://cdn/a.m3u8", True),
            ("a.m3u8", False),
            ("/a.m3u8", False),
            ("//cdn/a.m3u8", False),
            ("ftp://cdn/a.m3u8", False),
            ("HTTP://cdn/a.m3u8", False),
        ],
    )
    def test_prefixes(self, value: str, expected: bool) -> None:
        assert is_absolute_url(value) is expected


class TestBuildUrl:
    """Tests for build_url function."""

    def test_returns_none_for_none(self) -> None:
        assert build_url(None, "http://cdn/") is None

    def test_empty_value_is_absent(self) -> None:
        assert build_url("", "http://cdn/hls/") is None

    @pytest.mark.parametrize(
        "value", ["http://other/a.m3u8", "https://other/path/a.m3u8?x=1"]
    )
    def test_absolute_url_passes_through(self, value: str) -> None:
        assert build_url(value, "http://cdn/hls/") == value

    @pytest.mark.parametrize(
        ("value", "base", "expected"),
        [
            ("a.m3u8", "http://cdn/", "http://cdn/a.m3u8"),
            ("a.m3u8", "http://cdn/hls/", "http://cdn/hls/a.m3u8"),
            ("sub/a.m3u8", "http://cdn/hls/", "http://cdn/hls/sub/a.m3u8"),
            ("/a.m3u8", "http://cdn/hls/", "http://cdn/a.m3u8"),
            ("a.m3u8", "http://cdn/hls", "http://cdn/a.m3u8"),
        ],
        ids=["root", "dir", "subdir", "host_relative", "base_without_slash"],
    )
    def test_relative_url_joins_base(
        self, value: str, base: str, expected: str
    ) -> None:
        assert build_url(value, base) == expected
