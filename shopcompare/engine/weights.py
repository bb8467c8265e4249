"""Scoring weight tables (우선순위 모드별 하위 점수 가중치)"""

import math
from dataclasses import dataclass
from typing import Mapping, Optional

from shopcompare.core.exceptions import ConfigurationException
from shopcompare.models.profile import InteractionKind, PriorityMode


@dataclass(frozen=True)
class ScoringWeights:
    """하위 점수 가중치 (합계 1.0)"""

    price: float
    specs: float
    trust: float
    behavior: float

    def __post_init__(self):
        """설정 검증"""
        values = (self.price, self.specs, self.trust, self.behavior)
        if any(v < 0 for v in values):
            raise ConfigurationException(f"weights must be non-negative: {values}")
        total = sum(values)
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ConfigurationException(
                f"Sum of weights ({total}) must be 1.0",
                details={"weights": values},
            )


DEFAULT_WEIGHT_PROFILES: dict[PriorityMode, ScoringWeights] = {
    PriorityMode.BALANCED: ScoringWeights(price=0.35, specs=0.25, trust=0.20, behavior=0.20),
    PriorityMode.PRICE_FIRST: ScoringWeights(price=0.6, specs=0.1, trust=0.1, behavior=0.2),
    PriorityMode.QUALITY_FIRST: ScoringWeights(price=0.1, specs=0.5, trust=0.25, behavior=0.15),
}

DEFAULT_INTERACTION_WEIGHTS: dict[InteractionKind, float] = {
    InteractionKind.PURCHASE: 1.0,
    InteractionKind.WISHLIST: 0.7,
    InteractionKind.CLICK: 0.3,
    InteractionKind.VIEW: 0.1,
}


def resolve_weight_profiles(
    overrides: Optional[Mapping[PriorityMode, ScoringWeights]] = None,
) -> dict[PriorityMode, ScoringWeights]:
    """기본 프로필에 override 를 덮어쓴 테이블 반환 (모든 모드가 채워짐)"""
    profiles = dict(DEFAULT_WEIGHT_PROFILES)
    if overrides:
        for mode, weights in overrides.items():
            profiles[PriorityMode.parse(mode)] = weights
    return profiles
