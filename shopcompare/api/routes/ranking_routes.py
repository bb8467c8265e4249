"""Ranking Routes - HTTP 요청을 RankingCombiner 로 위임

HTTP Layer는 스키마 ↔ 도메인 변환과 에러 응답 변환만 담당합니다.
설명 보강(explain=true)은 랭킹이 끝난 뒤 별도 단계로 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from shopcompare.core.config import settings
from shopcompare.core.exceptions import CacheConnectionException, InvalidInputError, ShopCompareException
from shopcompare.core.logging import logger, sanitize_for_log
from shopcompare.engine import RankedResult, RankingCombiner, RankingMode
from shopcompare.models import UserProfile
from shopcompare.schemas.ranking_schema import (
    RankedItem,
    RankingData,
    RankingResponse,
    RecommendationRequest,
    SearchRequest,
)
from shopcompare.services.impl.cache_service import CacheService
from shopcompare.services.impl.explanation_service import ExplanationService
from shopcompare.services.impl.rule_based_provider import RuleBasedExplanationProvider

router = APIRouter(prefix="/api/v1", tags=["ranking"])

# 싱글톤 서비스
_cache_service: Optional[CacheService] = None
_combiner: Optional[RankingCombiner] = None
_explanation_service: Optional[ExplanationService] = None


def get_cache_service() -> Optional[CacheService]:
    """CacheService 싱글톤

    설명 캐시는 선택 사항입니다. 비활성화되어 있거나 Redis 에 연결할 수 없으면 None
    (랭킹/설명은 캐시 없이 동작, 다음 요청에서 다시 연결 시도).
    """
    global _cache_service
    if _cache_service is None and settings.explanation_cache_enabled:
        try:
            _cache_service = CacheService()
        except CacheConnectionException as e:
            logger.warning(f"[API] Explanation cache unavailable: {e.error_code}")
    return _cache_service


def get_combiner() -> RankingCombiner:
    """RankingCombiner 싱글톤"""
    global _combiner
    if _combiner is None:
        _combiner = RankingCombiner()
    return _combiner


def get_explanation_service(
    cache_service: Optional[CacheService] = Depends(get_cache_service),
) -> ExplanationService:
    """ExplanationService 싱글톤 (규칙 기반 provider + Redis 캐시)"""
    global _explanation_service
    if _explanation_service is None:
        _explanation_service = ExplanationService(
            RuleBasedExplanationProvider(),
            cache=cache_service,
        )
    elif _explanation_service.cache is None and cache_service is not None:
        # 기동 시 Redis 가 없었다면 연결된 뒤부터 캐시 사용
        _explanation_service.cache = cache_service
    return _explanation_service


def _error_response(e: ShopCompareException) -> RankingResponse:
    return RankingResponse(
        status="error",
        data=None,
        message=e.message,
        error_code=e.error_code,
    )


def _success_response(
    mode: RankingMode,
    total: int,
    results: list[RankedResult],
    message: str,
) -> RankingResponse:
    items = [RankedItem.from_result(rank, r) for rank, r in enumerate(results, start=1)]
    return RankingResponse(
        status="success",
        data=RankingData(mode=mode.value, total=total, items=items),
        message=message,
        error_code=None,
    )


async def _maybe_enrich(
    explain: bool,
    results: list[RankedResult],
    profile: UserProfile,
    service: ExplanationService,
) -> list[RankedResult]:
    if not explain or not results:
        return results
    return await service.enrich(results, profile)


@router.post("/recommendations", response_model=RankingResponse)
async def recommend(
    request: RecommendationRequest,
    combiner: RankingCombiner = Depends(get_combiner),
    explanation_service: ExplanationService = Depends(get_explanation_service),
):
    """추천 랭킹 API

    Flow:
        1. 스키마 → 도메인 변환
        2. 적합도 내림차순 랭킹
        3. (선택) 이유 보강
    """
    try:
        entries = [e.to_domain() for e in request.catalog]
        profile = request.profile.to_domain()
        results = combiner.score_for_recommendation(entries, profile, limit=request.limit)
    except InvalidInputError as e:
        logger.warning(f"[API] Invalid recommendation input: {e}")
        return _error_response(e)
    except ShopCompareException as e:
        logger.error(f"[API] Recommendation failed: {e}")
        return _error_response(e)

    results = await _maybe_enrich(request.explain, results, profile, explanation_service)
    logger.info(f"[API] Recommendation: catalog={len(entries)} returned={len(results)}")
    return _success_response(RankingMode.RECOMMENDATION, len(entries), results, "추천 결과입니다.")


@router.post("/search", response_model=RankingResponse)
async def search(
    request: SearchRequest,
    combiner: RankingCombiner = Depends(get_combiner),
    explanation_service: ExplanationService = Depends(get_explanation_service),
):
    """검색 랭킹 API

    관련도 컷오프를 통과한 엔트리만 sort_by 순으로 반환합니다.
    결과가 없어도 status 는 success (빈 items) 입니다.
    """
    try:
        entries = [e.to_domain() for e in request.catalog]
        profile = request.profile.to_domain()
        results = combiner.score_for_search(
            request.query,
            entries,
            profile,
            sort_key=request.sort_by,
            limit=request.limit,
        )
    except InvalidInputError as e:
        logger.warning(f"[API] Invalid search input: {e}")
        return _error_response(e)
    except ShopCompareException as e:
        logger.error(f"[API] Search failed: query='{sanitize_for_log(request.query)}' error={e}")
        return _error_response(e)

    results = await _maybe_enrich(request.explain, results, profile, explanation_service)
    logger.info(
        f"[API] Search: query='{sanitize_for_log(request.query)}' catalog={len(entries)} matched={len(results)}"
    )
    message = "검색 결과입니다." if results else "검색 결과가 없습니다."
    return _success_response(RankingMode.SEARCH, len(entries), results, message)
