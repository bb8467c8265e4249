"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, ranking_router, get_cache_service, get_combiner

__all__ = ["health_router", "ranking_router", "get_cache_service", "get_combiner"]
