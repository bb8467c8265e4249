"""Explanation Service - 랭킹 결과에 추천 이유를 비동기로 보강

랭킹은 이 서비스를 기다리지 않습니다. 랭킹 결과는 placeholder 이유를 가진 채로
바로 표시할 수 있고, 이 서비스가 나중에 이유를 채운 새 결과 목록을 돌려줍니다.

- 동시 호출 수는 Semaphore 로 제한 (settings.enrichment_concurrency)
- 호출마다 asyncio.wait_for 타임아웃
- 캐시(CacheBackend)는 생성자로 주입 (없으면 캐시 없이 동작)
- 실패/타임아웃은 placeholder 유지 (예외 전파 없음)
"""

import asyncio
from typing import Any, Optional, Protocol

from shopcompare.core.config import settings
from shopcompare.core.exceptions import (
    CacheException,
    ConfigurationException,
    EnrichmentException,
    EnrichmentTimeoutException,
)
from shopcompare.core.logging import get_logger, sanitize_for_log
from shopcompare.engine.result import RankedResult
from shopcompare.models.profile import PriorityMode, UseCase, UserProfile
from shopcompare.utils.hash_utils import generate_cache_key


logger = get_logger("enrich")


class ExplanationProvider(Protocol):
    """설명 생성기 인터페이스 (외부 AI 어시스턴트 등)"""

    async def explain(self, result: RankedResult, profile: UserProfile) -> list[str]:
        """추천 이유 목록 생성

        Raises:
            EnrichmentException: 생성 실패
        """
        ...


class CacheBackend(Protocol):
    """주입형 캐시 인터페이스"""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        ...


def profile_signature(profile: UserProfile) -> str:
    """캐시 키용 프로필 요약 (이력은 제외: 설명은 예산/우선순위/용도에 좌우됨)"""
    priority = PriorityMode.parse(profile.priority).value
    use_case = UseCase.parse(profile.use_case).value
    return f"{priority}|{use_case}|{profile.budget.min:g}-{profile.budget.max:g}"


class ExplanationService:
    """배치 설명 보강 서비스

    Usage:
        service = ExplanationService(provider, cache=CacheService())
        ranked = score_for_recommendation(entries, profile)   # placeholder 이유
        enriched = await service.enrich(ranked, profile)      # 이유 채움
    """

    def __init__(
        self,
        provider: ExplanationProvider,
        cache: Optional[CacheBackend] = None,
        concurrency: Optional[int] = None,
        timeout_s: Optional[float] = None,
    ):
        if provider is None:
            raise ConfigurationException("explanation provider must not be None")
        self.provider = provider
        self.cache = cache
        self.concurrency = concurrency or settings.enrichment_concurrency
        self.timeout_s = settings.enrichment_timeout_s if timeout_s is None else timeout_s
        if self.concurrency <= 0:
            raise ConfigurationException(f"enrichment concurrency must be positive: {self.concurrency}")

    def _cache_key(self, result: RankedResult, profile: UserProfile) -> str:
        return generate_cache_key("explain", result.entry.product_id, profile_signature(profile))

    def _cache_get(self, key: str) -> Optional[list[str]]:
        if self.cache is None:
            return None
        try:
            cached = self.cache.get(key)
        except CacheException as e:
            logger.warning(f"[enrich] Cache get failed: {e.error_code}")
            return None
        if isinstance(cached, list) and cached:
            return [str(r) for r in cached]
        return None

    def _cache_set(self, key: str, reasons: list[str]) -> None:
        if self.cache is None:
            return
        try:
            self.cache.set(key, reasons)
        except CacheException as e:
            logger.warning(f"[enrich] Cache set failed: {e.error_code}")

    async def _explain_one(
        self,
        result: RankedResult,
        profile: UserProfile,
        semaphore: asyncio.Semaphore,
    ) -> Optional[list[str]]:
        """단일 결과 설명. 실패 시 None (placeholder 유지)"""
        key = self._cache_key(result, profile)
        cached = self._cache_get(key)
        if cached is not None:
            return cached

        product_id = result.entry.product_id
        async with semaphore:
            try:
                reasons = await asyncio.wait_for(
                    self.provider.explain(result, profile),
                    timeout=self.timeout_s,
                )
            except asyncio.TimeoutError:
                error = EnrichmentTimeoutException(product_id, self.timeout_s)
                logger.warning(f"[enrich] {error}")
                return None
            except EnrichmentException as e:
                logger.warning(f"[enrich] Provider failed for '{product_id}': {e}")
                return None
            except Exception as e:
                logger.warning(
                    f"[enrich] Provider raised {type(e).__name__} for '{product_id}': {sanitize_for_log(str(e))}"
                )
                return None

        cleaned = [str(r).strip() for r in (reasons or []) if r and str(r).strip()]
        if not cleaned:
            return None

        self._cache_set(key, cleaned)
        return cleaned

    async def enrich(self, results: list[RankedResult], profile: UserProfile) -> list[RankedResult]:
        """랭킹 결과 전체에 이유를 채운 새 목록 반환 (순서 유지)

        Args:
            results: 랭킹 결과 (placeholder 이유)
            profile: 사용자 프로필

        Returns:
            같은 순서의 새 RankedResult 목록. 실패한 항목은 원본 그대로
        """
        if not results:
            return []

        semaphore = asyncio.Semaphore(self.concurrency)
        explanations = await asyncio.gather(
            *(self._explain_one(r, profile, semaphore) for r in results)
        )

        merged: list[RankedResult] = []
        enriched_count = 0
        for result, reasons in zip(results, explanations):
            if reasons:
                merged.append(result.with_reasons(reasons))
                enriched_count += 1
            else:
                merged.append(result)

        logger.info(f"[enrich] Enriched {enriched_count}/{len(results)} results")
        return merged
