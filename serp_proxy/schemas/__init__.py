"""API 응답 스키마."""

from .search_schema import (
    ErrorResponse,
    HealthResponse,
    NotFoundResponse,
    SearchResponse,
    SearchResultItem,
    UpstreamConfigStatus,
    UpstreamErrorResponse,
    utc_timestamp,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "NotFoundResponse",
    "SearchResponse",
    "SearchResultItem",
    "UpstreamConfigStatus",
    "UpstreamErrorResponse",
    "utc_timestamp",
]
