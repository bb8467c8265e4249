"""Ranked Result - Standardized Result Format

Provides a standardized format for ranking results across both modes.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from shopcompare.core.config import settings
from shopcompare.models.catalog import CatalogEntry


class RankingMode(str, Enum):
    """랭킹 모드"""

    RECOMMENDATION = "recommendation"  # 적합도만
    SEARCH = "search"  # 관련도 + 적합도


@dataclass(frozen=True)
class RankedResult:
    """랭킹 결과 표준 포맷

    Attributes:
        entry: 원본 카탈로그 엔트리
        suitability: 적합도 (0~1)
        relevance: 관련도 (검색 모드에서만)
        combined: 결합 점수 (검색 모드에서만)
        net_price: 최적 오퍼의 순 가격 (유효한 오퍼가 없으면 None)
        rating: 최적 오퍼의 평균 평점
        reasons: 추천 이유. 설명 보강 전에는 placeholder 문구 1개
    """

    entry: CatalogEntry
    suitability: float
    relevance: Optional[float] = None
    combined: Optional[float] = None
    net_price: Optional[float] = None
    rating: Optional[float] = None
    reasons: tuple[str, ...] = field(
        default_factory=lambda: (settings.enrichment_placeholder_reason,)
    )

    @property
    def product_id(self) -> str:
        return self.entry.product_id

    @property
    def is_enriched(self) -> bool:
        """설명 보강 완료 여부"""
        return self.reasons != (settings.enrichment_placeholder_reason,)

    def with_reasons(self, reasons: list[str]) -> "RankedResult":
        """이유만 바꾼 새 결과 (원본은 불변)"""
        return replace(self, reasons=tuple(reasons))

    def to_dict(self) -> dict:
        return {
            "product_id": self.entry.product_id,
            "name": self.entry.name,
            "brand": self.entry.brand,
            "category": self.entry.category,
            "suitability": self.suitability,
            "relevance": self.relevance,
            "combined": self.combined,
            "net_price": self.net_price,
            "rating": self.rating,
            "reasons": list(self.reasons),
        }
