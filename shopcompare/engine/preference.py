"""Preference Scorer - 사용자 프로필 기준 적합도(suitability) 계산

적합도 = price / specs / trust / behavior 하위 점수의 가중합 (소수 둘째 자리 반올림)

- price: 최적 오퍼의 순 가격(가격 + 배송비 - 첫 쿠폰)과 예산 범위 비교
- specs: 사용 목적(gaming / camera / everyday)별 티어
- trust: 평점 품질 + 평점 수 신뢰도 + 검증 스토어 보너스
- behavior: 상호작용 이력의 최신성/유형 가중 브랜드·카테고리 친화도

의미상 이상한 입력(음수/NaN 가격, 평점 누락 등)은 예외 없이 해당 하위 점수에서 흡수합니다.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

from shopcompare.core.config import settings
from shopcompare.models.catalog import CatalogEntry, KeySpecs, Offer
from shopcompare.models.profile import (
    BudgetRange,
    Interaction,
    InteractionKind,
    PriorityMode,
    UseCase,
    UserProfile,
)

from .weights import DEFAULT_INTERACTION_WEIGHTS, ScoringWeights, resolve_weight_profiles


_SECONDS_PER_DAY = 60 * 60 * 24


def _is_valid_amount(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value >= 0


def calculate_net_price(offer: Offer) -> float:
    """순 가격 = 가격 + 배송비 - 첫 번째 쿠폰의 추정 금액 (없으면 0)"""
    coupon_value = 0.0
    if offer.coupons:
        coupon_value = offer.coupons[0].estimated_value or 0.0
    return offer.price + offer.shipping_cost - coupon_value


def select_best_offer(offers) -> Optional[Offer]:
    """순 가격이 가장 낮은 오퍼 (동률이면 앞선 오퍼).

    가격/배송비가 음수이거나 유한하지 않은 오퍼는 후보에서 제외합니다.
    """
    best: Optional[Offer] = None
    best_net = math.inf
    for offer in offers or ():
        if not (_is_valid_amount(offer.price) and _is_valid_amount(offer.shipping_cost)):
            continue
        net = calculate_net_price(offer)
        if not math.isfinite(net):
            continue
        if best is None or net < best_net:
            best = offer
            best_net = net
    return best


@dataclass(frozen=True)
class SuitabilityBreakdown:
    """적합도 계산 내역 (디버깅/설명용)"""

    suitability: float
    best_offer: Optional[Offer] = None
    net_price: Optional[float] = None
    price_score: float = 0.0
    spec_score: float = 0.0
    trust_score: float = 0.0
    behavior_score: float = 0.0

    @classmethod
    def disqualified(cls) -> "SuitabilityBreakdown":
        """오퍼가 없거나 전부 무효 → 0"""
        return cls(suitability=0.0)


class PreferenceScorer:
    """카탈로그 엔트리 vs 사용자 프로필 적합도 계산기

    상수는 모두 생성자 인자로 재정의할 수 있고, 기본값은 settings 에서 읽습니다.
    인스턴스는 설정만 보관하므로 여러 스레드에서 공유해도 안전합니다.

    Usage:
        scorer = PreferenceScorer()
        score = scorer.suitability(entry, profile)
        detail = scorer.score_breakdown(entry, profile)
    """

    def __init__(
        self,
        weight_profiles: Optional[Mapping[PriorityMode, ScoringWeights]] = None,
        interaction_weights: Optional[Mapping[InteractionKind, float]] = None,
        overshoot_ratio: Optional[float] = None,
        price_floor: Optional[float] = None,
        price_slope: Optional[float] = None,
        rating_count_saturation: Optional[int] = None,
        recency_decay: Optional[float] = None,
        neutral_behavior: Optional[float] = None,
    ):
        self.weight_profiles = resolve_weight_profiles(weight_profiles)
        self.interaction_weights = dict(DEFAULT_INTERACTION_WEIGHTS)
        if interaction_weights:
            self.interaction_weights.update(interaction_weights)

        self.overshoot_ratio = settings.price_overshoot_ratio if overshoot_ratio is None else overshoot_ratio
        self.price_floor = settings.price_score_floor if price_floor is None else price_floor
        self.price_slope = settings.price_score_slope if price_slope is None else price_slope
        self.rating_count_saturation = (
            settings.trust_rating_count_saturation
            if rating_count_saturation is None
            else rating_count_saturation
        )
        self.recency_decay = settings.behavior_recency_decay if recency_decay is None else recency_decay
        self.neutral_behavior = (
            settings.behavior_neutral_score if neutral_behavior is None else neutral_behavior
        )

    # ------------------------------------------------------------------
    # 하위 점수
    # ------------------------------------------------------------------

    def price_score(self, net_price: float, budget: BudgetRange) -> float:
        """예산 대비 가격 점수.

        - net <= min: 1.0
        - net >= max * 1.2: 0.0 (과도한 초과만 완전 배제, 경계값 포함)
        - 그 외: max(0.1, 1 - (net - min) / (max - min) * 0.7)

        쿠폰이 가격보다 커서 음수가 된 순 가격은 net <= min 으로 1.0 입니다.
        """
        if not isinstance(net_price, (int, float)) or not math.isfinite(net_price):
            return 0.0
        if net_price <= budget.min:
            return 1.0
        if net_price >= budget.max * self.overshoot_ratio:
            return 0.0

        price_range = budget.max - budget.min
        if price_range <= 0:
            price_range = 1
        return max(self.price_floor, 1.0 - ((net_price - budget.min) / price_range) * self.price_slope)

    @staticmethod
    def spec_score(specs: KeySpecs, use_case: UseCase) -> float:
        """사용 목적별 스펙 티어 점수"""
        if use_case == UseCase.GAMING:
            ram = specs.ram_gb or 0
            ram_tier = 1.0 if ram >= 12 else (0.6 if ram >= 8 else 0.3)
            refresh = specs.refresh_rate_hz
            refresh_tier = 1.0 if refresh is not None and refresh >= 120 else 0.4
            return (ram_tier * 0.7) + (refresh_tier * 0.3)

        if use_case == UseCase.CAMERA:
            mp = specs.camera_mp or 0
            if mp >= 100:
                return 1.0
            if mp >= 48:
                return 0.8
            return 0.4

        battery = specs.battery_mah or 0
        if battery >= 5000:
            return 1.0
        if battery >= 4000:
            return 0.7
        return 0.4

    def trust_score(self, offer: Offer) -> float:
        """평점 품질(0.6) + 평점 수 신뢰도(0.2) + 검증 보너스(0.2), 최대 1.0"""
        rating = offer.rating_average
        rating_quality = rating / 5 if _is_valid_amount(rating) else 0.0

        count = offer.rating_count if _is_valid_amount(offer.rating_count) else 0
        rating_confidence = min(count / self.rating_count_saturation, 1.0)
        verification_bonus = 0.2 if offer.is_verified else 0.0

        return min(1.0, (rating_quality * 0.6) + (rating_confidence * 0.2) + verification_bonus)

    def behavior_score(
        self,
        interactions: tuple[Interaction, ...],
        entry: CatalogEntry,
        now: Optional[datetime] = None,
    ) -> float:
        """최신성/유형 가중 브랜드·카테고리 친화도.

        이력이 없으면 중립값 0.5. 미래 시각의 이력은 경과일 0으로 취급합니다.
        """
        if not interactions:
            return self.neutral_behavior

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        affinity = 0.0
        total_weight = 0.0
        for interaction in interactions:
            days_since = max(0.0, (now - interaction.timestamp_utc).total_seconds() / _SECONDS_PER_DAY)
            time_decay = math.exp(-self.recency_decay * days_since)
            kind = InteractionKind.parse(interaction.kind)
            weight = self.interaction_weights.get(kind, 0.1) * time_decay

            if interaction.brand == entry.brand:
                affinity += weight
            if interaction.category == entry.category:
                affinity += weight * 0.5
            total_weight += weight

        if total_weight <= 0:
            return self.neutral_behavior
        return min(1.0, self.neutral_behavior + affinity / total_weight)

    # ------------------------------------------------------------------
    # 적합도
    # ------------------------------------------------------------------

    def score_breakdown(
        self,
        entry: CatalogEntry,
        profile: UserProfile,
        now: Optional[datetime] = None,
    ) -> SuitabilityBreakdown:
        """적합도와 하위 점수 내역"""
        if not entry.offers:
            return SuitabilityBreakdown.disqualified()

        best_offer = select_best_offer(entry.offers)
        if best_offer is None:
            return SuitabilityBreakdown.disqualified()

        net_price = calculate_net_price(best_offer)
        weights = self.weight_profiles[PriorityMode.parse(profile.priority)]

        s_price = self.price_score(net_price, profile.budget)
        s_specs = self.spec_score(entry.specs, UseCase.parse(profile.use_case))
        s_trust = self.trust_score(best_offer)
        s_behavior = self.behavior_score(profile.interactions, entry, now)

        final_score = (
            (weights.price * s_price)
            + (weights.specs * s_specs)
            + (weights.trust * s_trust)
            + (weights.behavior * s_behavior)
        )

        return SuitabilityBreakdown(
            suitability=round(final_score, 2),
            best_offer=best_offer,
            net_price=net_price,
            price_score=s_price,
            spec_score=s_specs,
            trust_score=s_trust,
            behavior_score=s_behavior,
        )

    def suitability(
        self,
        entry: CatalogEntry,
        profile: UserProfile,
        now: Optional[datetime] = None,
    ) -> float:
        """적합도 (0~1, 소수 둘째 자리)"""
        return self.score_breakdown(entry, profile, now).suitability


_default_scorer: Optional[PreferenceScorer] = None


def get_default_scorer() -> PreferenceScorer:
    global _default_scorer
    if _default_scorer is None:
        _default_scorer = PreferenceScorer()
    return _default_scorer


def suitability(entry: CatalogEntry, profile: UserProfile, now: Optional[datetime] = None) -> float:
    """기본 PreferenceScorer 로 적합도 계산"""
    return get_default_scorer().suitability(entry, profile, now)
