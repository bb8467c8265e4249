"""헬스 체크 엔드포인트"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from shopcompare import __version__
from shopcompare.api.routes.ranking_routes import get_cache_service
from shopcompare.core.config import settings
from shopcompare.core.exceptions import CacheException
from shopcompare.core.logging import logger
from shopcompare.schemas.ranking_schema import HealthResponse
from shopcompare.services.impl.cache_service import CacheService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(cache_service: Optional[CacheService] = Depends(get_cache_service)):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 설명 캐시(Redis) 상태 (캐시가 죽어도 랭킹은 동작하므로 degraded)
    - 캐시를 끈 설정이면 캐시 상태는 보지 않음
    """
    if cache_service is None:
        cache_ok = not settings.explanation_cache_enabled
    else:
        try:
            cache_ok = cache_service.health_check()
        except CacheException as e:
            logger.warning(f"Cache health check failed: {e.error_code}")
            cache_ok = False

    return HealthResponse(
        status="ok" if cache_ok else "degraded",
        timestamp=datetime.now(),
        version=__version__,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "추천/검색 랭킹 엔진",
        "version": __version__,
        "docs": "/docs",
    }
