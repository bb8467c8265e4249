"""Catalog snapshot - 랭킹 호출 단위로 불변인 카탈로그 엔트리/오퍼"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Coupon:
    """쿠폰 (추정 할인 금액이 없으면 0으로 취급)"""

    code: str = ""
    estimated_value: Optional[float] = None
    discount_text: str = ""


@dataclass(frozen=True)
class Offer:
    """스토어별 판매 오퍼

    Attributes:
        price: 판매가 (통화 무관 숫자)
        shipping_cost: 배송비
        coupons: 쿠폰 목록. 순 가격 계산에는 첫 번째 쿠폰만 사용
        rating_average: 평균 평점 (1~5, 없으면 None → 품질 기여 0)
        rating_count: 평점 수
        is_verified: 검증된 스토어 여부
    """

    offer_id: str
    price: float
    shipping_cost: float = 0.0
    store_name: str = ""
    coupons: tuple[Coupon, ...] = ()
    rating_average: Optional[float] = None
    rating_count: int = 0
    is_verified: bool = False


@dataclass(frozen=True)
class KeySpecs:
    """핵심 스펙. 없는 값은 0 (refresh_rate_hz만 None 허용 → 낮은 티어)"""

    storage_gb: float = 0
    ram_gb: float = 0
    camera_mp: float = 0
    battery_mah: float = 0
    screen_size_inch: float = 0
    refresh_rate_hz: Optional[float] = None


@dataclass(frozen=True)
class CatalogEntry:
    """카탈로그 엔트리 (오퍼가 0개면 적합도 0, 랭킹 1위가 될 수 없음)"""

    product_id: str
    name: str
    brand: str = ""
    category: str = ""
    tags: tuple[str, ...] = ()
    specs: KeySpecs = field(default_factory=KeySpecs)
    offers: tuple[Offer, ...] = ()

    @property
    def has_offers(self) -> bool:
        return len(self.offers) > 0
