"""규칙 기반 설명 생성기 - 외부 AI 없이 하위 점수로 이유 문구 생성

외부 설명 서비스가 없거나 실패했을 때 호스트가 쓰는 기본 ExplanationProvider 입니다.
"""

from shopcompare.engine.preference import PreferenceScorer, get_default_scorer
from shopcompare.engine.result import RankedResult
from shopcompare.models.profile import UseCase, UserProfile


_SPEC_REASONS = {
    UseCase.GAMING: "Strong RAM and refresh rate for gaming",
    UseCase.CAMERA: "High-resolution camera",
    UseCase.EVERYDAY: "Long battery life for everyday use",
}


class RuleBasedExplanationProvider:
    """하위 점수 임계값으로 이유를 고르는 provider"""

    def __init__(self, scorer: PreferenceScorer | None = None, max_reasons: int = 3):
        self.scorer = scorer or get_default_scorer()
        self.max_reasons = max_reasons

    async def explain(self, result: RankedResult, profile: UserProfile) -> list[str]:
        detail = self.scorer.score_breakdown(result.entry, profile)
        if detail.best_offer is None:
            return ["No offers available right now"]

        reasons: list[str] = []
        if detail.price_score >= 0.9:
            reasons.append("Priced at or below your budget floor")
        elif detail.price_score >= 0.5:
            reasons.append("Fits within your budget")
        elif detail.price_score == 0.0:
            reasons.append("Well above your budget")

        if detail.spec_score >= 0.8:
            reasons.append(_SPEC_REASONS[UseCase.parse(profile.use_case)])

        offer = detail.best_offer
        if offer.is_verified and offer.rating_count >= 500:
            reasons.append(f"Verified store with {offer.rating_count} reviews")
        elif detail.trust_score >= 0.8:
            reasons.append("Highly rated store")

        if detail.behavior_score > 0.5:
            reasons.append(f"Matches your interest in {result.entry.brand or result.entry.category}")

        if not reasons:
            reasons.append("Balanced choice for price and quality")
        return reasons[: self.max_reasons]
