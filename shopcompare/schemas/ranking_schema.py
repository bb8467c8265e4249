"""Pydantic 스키마 정의 (HTTP 입출력 + 도메인 변환)"""
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator, model_validator

from shopcompare.core.exceptions import InvalidInputError
from shopcompare.engine.result import RankedResult
from shopcompare.engine.strategy import SortKey
from shopcompare.models import (
    BudgetRange,
    CatalogEntry,
    Coupon,
    Interaction,
    InteractionKind,
    KeySpecs,
    Offer,
    PriorityMode,
    UseCase,
    UserProfile,
)


class CouponIn(BaseModel):
    """쿠폰"""
    code: str = Field("", max_length=100)
    discount_text: str = Field("", max_length=200)
    estimated_value: Optional[float] = Field(None, ge=0, description="추정 할인 금액")

    def to_domain(self) -> Coupon:
        return Coupon(code=self.code, estimated_value=self.estimated_value, discount_text=self.discount_text)


class OfferIn(BaseModel):
    """스토어 오퍼 (음수 가격/평점 범위 밖은 요청 단계에서 거부)"""
    offer_id: str = Field(..., min_length=1, max_length=100)
    store_name: str = Field("", max_length=200)
    price: float = Field(..., ge=0, description="판매가")
    shipping_cost: float = Field(0, ge=0, description="배송비")
    coupons: List[CouponIn] = Field(default_factory=list, max_length=20)
    rating_average: Optional[float] = Field(None, ge=1, le=5, description="평균 평점 (1~5)")
    rating_count: int = Field(0, ge=0)
    is_verified: bool = False

    def to_domain(self) -> Offer:
        return Offer(
            offer_id=self.offer_id,
            price=self.price,
            shipping_cost=self.shipping_cost,
            store_name=self.store_name,
            coupons=tuple(c.to_domain() for c in self.coupons),
            rating_average=self.rating_average,
            rating_count=self.rating_count,
            is_verified=self.is_verified,
        )


class KeySpecsIn(BaseModel):
    """핵심 스펙"""
    storage_gb: float = Field(0, ge=0)
    ram_gb: float = Field(0, ge=0)
    camera_mp: float = Field(0, ge=0)
    battery_mah: float = Field(0, ge=0)
    screen_size_inch: float = Field(0, ge=0)
    refresh_rate_hz: Optional[float] = Field(None, ge=0)

    def to_domain(self) -> KeySpecs:
        return KeySpecs(**self.model_dump())


class CatalogEntryIn(BaseModel):
    """카탈로그 엔트리"""
    product_id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., max_length=500)
    brand: str = Field("", max_length=100)
    category: str = Field("", max_length=100)
    tags: List[str] = Field(default_factory=list, max_length=50)
    key_specs: KeySpecsIn = Field(default_factory=KeySpecsIn)
    offers: List[OfferIn] = Field(default_factory=list, max_length=100)

    def to_domain(self) -> CatalogEntry:
        return CatalogEntry(
            product_id=self.product_id,
            name=self.name,
            brand=self.brand,
            category=self.category,
            tags=tuple(self.tags),
            specs=self.key_specs.to_domain(),
            offers=tuple(o.to_domain() for o in self.offers),
        )


class InteractionIn(BaseModel):
    """상호작용 이력"""
    brand: str = Field("", max_length=100)
    category: str = Field("", max_length=100)
    type: str = Field(..., description="purchase | wishlist | click | view")
    timestamp: datetime
    product_id: Optional[str] = None

    def to_domain(self) -> Interaction:
        return Interaction(
            brand=self.brand,
            category=self.category,
            kind=InteractionKind.parse(self.type),
            timestamp=self.timestamp,
            product_id=self.product_id,
        )


class BudgetRangeIn(BaseModel):
    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_order(self):
        if self.max < self.min:
            raise ValueError("budget max must be >= min")
        return self


class UserProfileIn(BaseModel):
    """사용자 프로필"""
    budget_range: BudgetRangeIn
    preferred_brands: List[str] = Field(default_factory=list, max_length=50)
    priority: str = Field("balanced", description="price-first | quality-first | balanced")
    use_case: str = Field("everyday", description="gaming | camera | everyday")
    interactions: List[InteractionIn] = Field(default_factory=list, max_length=1000)

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: str) -> str:
        try:
            return PriorityMode.parse(v).value
        except InvalidInputError as e:
            raise ValueError(e.message)

    @field_validator("use_case")
    @classmethod
    def validate_use_case(cls, v: str) -> str:
        try:
            return UseCase.parse(v).value
        except InvalidInputError as e:
            raise ValueError(e.message)

    def to_domain(self) -> UserProfile:
        return UserProfile(
            budget=BudgetRange(min=self.budget_range.min, max=self.budget_range.max),
            priority=PriorityMode.parse(self.priority),
            use_case=UseCase.parse(self.use_case),
            preferred_brands=tuple(self.preferred_brands),
            interactions=tuple(i.to_domain() for i in self.interactions),
        )


class RecommendationRequest(BaseModel):
    """추천 요청"""
    catalog: List[CatalogEntryIn] = Field(..., max_length=5000)
    profile: UserProfileIn
    limit: Optional[int] = Field(None, ge=1, le=500)
    explain: bool = Field(False, description="규칙 기반 이유 보강 여부")


class SearchRequest(RecommendationRequest):
    """검색 요청"""
    query: str = Field(..., max_length=500, description="원본 검색어")
    sort_by: str = Field(SortKey.SCORE.value, description="score | price_asc | rating")

    @field_validator("sort_by")
    @classmethod
    def validate_sort_by(cls, v: str) -> str:
        try:
            return SortKey.parse(v).value
        except InvalidInputError as e:
            raise ValueError(e.message)


class RankedItem(BaseModel):
    """랭킹 결과 1건"""
    rank: int = Field(..., ge=1, description="순위")
    product_id: str
    name: str
    brand: str
    category: str
    suitability: float = Field(..., ge=0, le=1)
    relevance: Optional[float] = Field(None, ge=0, le=1)
    combined: Optional[float] = None
    net_price: Optional[float] = None
    rating: Optional[float] = None
    reasons: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, rank: int, result: RankedResult) -> "RankedItem":
        return cls(rank=rank, **result.to_dict())


class RankingData(BaseModel):
    mode: str = Field(..., description="recommendation | search")
    total: int = Field(..., ge=0, description="입력 카탈로그 크기")
    items: List[RankedItem]


class RankingResponse(BaseModel):
    """랭킹 응답"""
    status: str = Field(..., description="success or error")
    data: Optional[RankingData] = Field(None, description="랭킹 결과")
    message: str = Field(..., description="응답 메시지")
    error_code: str | None = Field(None, description="에러 코드 (error 시)")


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
