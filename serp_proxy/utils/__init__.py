"""Utilities package."""

from .url_utils import (
    build_search_url,
    clean_result_url,
    is_absolute_http_url,
    is_denied_url,
    normalize_href,
    unwrap_redirect,
)

__all__ = [
    "build_search_url",
    "clean_result_url",
    "is_absolute_http_url",
    "is_denied_url",
    "normalize_href",
    "unwrap_redirect",
]
