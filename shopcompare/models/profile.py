"""User profile - 예산, 우선순위, 사용 목적, 상호작용 이력"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from shopcompare.core.exceptions import InvalidInputError


class PriorityMode(str, Enum):
    """가중치 프로필 선택"""

    PRICE_FIRST = "price-first"
    QUALITY_FIRST = "quality-first"
    BALANCED = "balanced"

    @classmethod
    def parse(cls, value: "str | PriorityMode") -> "PriorityMode":
        """문자열 → PriorityMode (구 클라이언트의 'price'/'quality' 도 허용)"""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower().replace("_", "-")
        legacy = {"price": cls.PRICE_FIRST, "quality": cls.QUALITY_FIRST}
        if key in legacy:
            return legacy[key]
        try:
            return cls(key)
        except ValueError:
            raise InvalidInputError("priority", f"unknown priority mode: {value!r}")


class UseCase(str, Enum):
    """스펙 점수 기준 (기본: everyday)"""

    GAMING = "gaming"
    CAMERA = "camera"
    EVERYDAY = "everyday"

    @classmethod
    def parse(cls, value: "str | UseCase") -> "UseCase":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            raise InvalidInputError("use_case", f"unknown use case: {value!r}")


class InteractionKind(str, Enum):
    """상호작용 유형"""

    PURCHASE = "purchase"
    WISHLIST = "wishlist"
    CLICK = "click"
    VIEW = "view"

    @classmethod
    def parse(cls, value: "str | InteractionKind") -> "InteractionKind":
        """알 수 없는 유형은 가장 약한 VIEW 로 취급합니다."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.VIEW


@dataclass(frozen=True)
class Interaction:
    """상호작용 이력 1건

    timestamp 는 timezone-aware datetime 을 기대합니다. naive 값은 UTC 로 간주.
    """

    brand: str
    category: str
    kind: InteractionKind
    timestamp: datetime
    product_id: Optional[str] = None

    @property
    def timestamp_utc(self) -> datetime:
        if self.timestamp.tzinfo is None:
            return self.timestamp.replace(tzinfo=timezone.utc)
        return self.timestamp


@dataclass(frozen=True)
class BudgetRange:
    min: float
    max: float


@dataclass(frozen=True)
class UserProfile:
    """사용자 프로필

    preferred_brands 는 정보용이며 현재 점수 계산에 사용하지 않습니다.
    """

    budget: BudgetRange
    priority: PriorityMode = PriorityMode.BALANCED
    use_case: UseCase = UseCase.EVERYDAY
    preferred_brands: tuple[str, ...] = ()
    interactions: tuple[Interaction, ...] = ()
