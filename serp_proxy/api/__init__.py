"""API 엔드포인트 패키지 - export only."""

from .routes import AVAILABLE_ENDPOINTS, health_router, search_router

__all__ = ["AVAILABLE_ENDPOINTS", "health_router", "search_router"]
