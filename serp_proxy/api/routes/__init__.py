"""API routes package."""

from .health_routes import AVAILABLE_ENDPOINTS, router as health_router
from .search_routes import router as search_router

__all__ = ["AVAILABLE_ENDPOINTS", "health_router", "search_router"]
