"""Ranking Combiner - Main Engine Entry Point

관련도(FieldMatcher)와 적합도(PreferenceScorer)를 모드별로 결합하고
필터 → 정렬 → 동률 처리까지 수행합니다.

1. Recommendation 모드: 적합도만 계산, 내림차순
2. Search 모드: 관련도 <= 0.15 제거 → combined = 0.7 * relevance + 0.3 * suitability

호출 간 상태를 보관하지 않습니다. 매 호출은 (카탈로그, 검색어, 프로필)만으로 결정됩니다.
"""

from collections.abc import Iterable
from concurrent.futures import Executor
from datetime import datetime, timezone
from typing import Optional

from shopcompare.core.config import settings
from shopcompare.core.exceptions import ConfigurationException, InvalidInputError
from shopcompare.core.logging import get_logger, sanitize_for_log
from shopcompare.models.catalog import CatalogEntry
from shopcompare.models.profile import UserProfile
from shopcompare.utils.text.matching.field_matching import FieldMatcher, get_default_matcher

from .preference import PreferenceScorer, SuitabilityBreakdown, get_default_scorer
from .result import RankedResult, RankingMode
from .strategy import SortKey, SortStrategy


logger = get_logger("engine")


class RankingCombiner:
    """랭킹 결합기

    Usage:
        combiner = RankingCombiner()
        recs = combiner.score_for_recommendation(entries, profile)
        hits = combiner.score_for_search("galaxy s24", entries, profile, SortKey.PRICE_ASC)

    엔트리별 점수 계산은 서로 독립이므로 executor(ThreadPoolExecutor 등)를 넘기면
    병렬로 계산합니다. 정렬은 모든 점수가 나온 뒤 단일 스레드에서 수행됩니다.
    """

    def __init__(
        self,
        matcher: Optional[FieldMatcher] = None,
        scorer: Optional[PreferenceScorer] = None,
        relevance_threshold: Optional[float] = None,
        relevance_weight: Optional[float] = None,
    ):
        """
        Args:
            matcher: 관련도 계산기 (기본: 공유 FieldMatcher)
            scorer: 적합도 계산기 (기본: 공유 PreferenceScorer)
            relevance_threshold: 검색 모드 관련도 컷오프 (기본 0.15, 이하 제거)
            relevance_weight: 결합 점수의 관련도 비중 (기본 0.7)
        """
        self.matcher = matcher or get_default_matcher()
        self.scorer = scorer or get_default_scorer()
        self.relevance_threshold = (
            settings.search_relevance_threshold if relevance_threshold is None else relevance_threshold
        )
        self.relevance_weight = (
            settings.search_relevance_weight if relevance_weight is None else relevance_weight
        )
        if not 0.0 <= self.relevance_weight <= 1.0:
            raise ConfigurationException(f"relevance_weight must be within [0, 1]: {self.relevance_weight}")

    # ------------------------------------------------------------------
    # 입력 검증
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(entries, profile) -> list[CatalogEntry]:
        """구조적으로 잘못된 입력만 InvalidInputError 로 보고

        Raises:
            InvalidInputError: entries 가 None/비반복/엔트리 아님, profile 이 UserProfile 아님
        """
        if entries is None:
            raise InvalidInputError("entries", "catalog must not be None")
        if isinstance(entries, (str, bytes)) or not isinstance(entries, Iterable):
            raise InvalidInputError("entries", f"catalog must be a collection, got {type(entries).__name__}")

        snapshot = list(entries)
        for index, entry in enumerate(snapshot):
            if not isinstance(entry, CatalogEntry):
                raise InvalidInputError(
                    "entries",
                    f"item {index} is not a CatalogEntry ({type(entry).__name__})",
                    details={"index": index},
                )

        if not isinstance(profile, UserProfile):
            raise InvalidInputError("profile", f"expected UserProfile, got {type(profile).__name__}")

        return snapshot

    # ------------------------------------------------------------------
    # 엔트리 단위 점수
    # ------------------------------------------------------------------

    @staticmethod
    def _to_result(
        entry: CatalogEntry,
        breakdown: SuitabilityBreakdown,
        relevance: Optional[float] = None,
        combined: Optional[float] = None,
    ) -> RankedResult:
        offer = breakdown.best_offer
        return RankedResult(
            entry=entry,
            suitability=breakdown.suitability,
            relevance=relevance,
            combined=combined,
            net_price=breakdown.net_price,
            rating=offer.rating_average if offer is not None else None,
        )

    def _score_recommendation(self, entry: CatalogEntry, profile: UserProfile, now: datetime) -> RankedResult:
        return self._to_result(entry, self.scorer.score_breakdown(entry, profile, now))

    def _score_search(
        self, query: str, entry: CatalogEntry, profile: UserProfile, now: datetime
    ) -> Optional[RankedResult]:
        relevance = self.matcher.match_score(query, entry)
        if relevance <= self.relevance_threshold:
            return None

        breakdown = self.scorer.score_breakdown(entry, profile, now)
        combined = (self.relevance_weight * relevance) + ((1.0 - self.relevance_weight) * breakdown.suitability)
        return self._to_result(entry, breakdown, relevance=relevance, combined=combined)

    @staticmethod
    def _map(fn, entries: list[CatalogEntry], executor: Optional[Executor]) -> list:
        if executor is None:
            return [fn(entry) for entry in entries]
        # executor.map 은 입력 순서를 유지
        return list(executor.map(fn, entries))

    # ------------------------------------------------------------------
    # 진입점
    # ------------------------------------------------------------------

    def score_for_recommendation(
        self,
        entries: Iterable[CatalogEntry],
        profile: UserProfile,
        limit: Optional[int] = None,
        executor: Optional[Executor] = None,
        now: Optional[datetime] = None,
    ) -> list[RankedResult]:
        """추천 모드 랭킹

        Args:
            entries: 카탈로그 스냅샷
            profile: 사용자 프로필
            limit: 상위 N개만 반환 (None 이면 전체)
            executor: 엔트리별 점수 계산을 병렬로 돌릴 Executor
            now: 행동 점수 기준 시각 (기본: 현재 UTC)

        Returns:
            적합도 내림차순, product_id 오름차순으로 정렬된 결과

        Raises:
            InvalidInputError: 구조적으로 잘못된 입력
        """
        snapshot = self._validate(entries, profile)
        now = now or datetime.now(timezone.utc)

        results = self._map(lambda e: self._score_recommendation(e, profile, now), snapshot, executor)
        results.sort(key=SortStrategy.by_suitability)

        if limit is not None:
            results = results[: max(0, limit)]

        logger.debug(
            f"[rank] mode={RankingMode.RECOMMENDATION.value} entries={len(snapshot)} returned={len(results)}"
        )
        return results

    def score_for_search(
        self,
        query: str,
        entries: Iterable[CatalogEntry],
        profile: UserProfile,
        sort_key: "SortKey | str | None" = SortKey.SCORE,
        limit: Optional[int] = None,
        executor: Optional[Executor] = None,
        now: Optional[datetime] = None,
    ) -> list[RankedResult]:
        """검색 모드 랭킹

        Args:
            query: 원본 검색어 (빈 문자열이면 모든 관련도 0 → 빈 결과)
            entries: 카탈로그 스냅샷
            profile: 사용자 프로필
            sort_key: SCORE | PRICE_ASC | RATING
            limit: 상위 N개만 반환
            executor: 병렬 계산용 Executor
            now: 행동 점수 기준 시각

        Returns:
            관련도 컷오프를 통과한 결과 (정렬 키 순, 동률은 product_id 오름차순)

        Raises:
            InvalidInputError: 구조적으로 잘못된 입력 또는 알 수 없는 정렬 키
        """
        snapshot = self._validate(entries, profile)
        if query is not None and not isinstance(query, str):
            raise InvalidInputError("query", f"query must be a string, got {type(query).__name__}")
        key = SortStrategy.key_for(sort_key)
        now = now or datetime.now(timezone.utc)

        scored = self._map(lambda e: self._score_search(query or "", e, profile, now), snapshot, executor)
        results = [r for r in scored if r is not None]
        results.sort(key=key)

        if limit is not None:
            results = results[: max(0, limit)]

        logger.debug(
            f"[rank] mode={RankingMode.SEARCH.value} query='{sanitize_for_log(query or '')}' "
            f"entries={len(snapshot)} matched={len(results)} sort={SortKey.parse(sort_key).value}"
        )
        return results


_default_combiner: Optional[RankingCombiner] = None


def get_default_combiner() -> RankingCombiner:
    global _default_combiner
    if _default_combiner is None:
        _default_combiner = RankingCombiner()
    return _default_combiner


def score_for_recommendation(
    entries: Iterable[CatalogEntry],
    profile: UserProfile,
    **kwargs,
) -> list[RankedResult]:
    """기본 RankingCombiner 로 추천 랭킹"""
    return get_default_combiner().score_for_recommendation(entries, profile, **kwargs)


def score_for_search(
    query: str,
    entries: Iterable[CatalogEntry],
    profile: UserProfile,
    sort_key: "SortKey | str | None" = SortKey.SCORE,
    **kwargs,
) -> list[RankedResult]:
    """기본 RankingCombiner 로 검색 랭킹"""
    return get_default_combiner().score_for_search(query, entries, profile, sort_key, **kwargs)
