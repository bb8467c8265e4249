"""API routes package."""

from .health_routes import router as health_router
from .ranking_routes import router as ranking_router, get_cache_service, get_combiner

__all__ = ["health_router", "ranking_router", "get_cache_service", "get_combiner"]
