"""Utility functions for castlist.

Available via `from castlist.utils import ...`.
Not re-exported at the top-level `castlist` package.
"""

from castlist.utils.url import build_url, is_absolute_url

__all__ = [
    "build_url",
    "is_absolute_url",
]
