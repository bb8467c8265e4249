"""Sort Strategy - 정렬 키 결정 로직

모든 정렬 키는 product_id 오름차순으로 동률을 깨서 전순서(total order)를 보장합니다.
같은 입력이면 스케줄링과 무관하게 항상 같은 순서가 나옵니다.
"""

import math
from enum import Enum
from typing import Callable

from shopcompare.core.exceptions import InvalidInputError

from .result import RankedResult


class SortKey(str, Enum):
    """검색 결과 정렬 기준"""

    SCORE = "score"  # 결합 점수 내림차순
    PRICE_ASC = "price_asc"  # 순 가격 오름차순
    RATING = "rating"  # 평점 내림차순

    @classmethod
    def parse(cls, value: "str | SortKey | None") -> "SortKey":
        if value is None:
            return cls.SCORE
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidInputError("sort_key", f"unknown sort key: {value!r}")


def _desc(value: float | None) -> float:
    if value is None or not math.isfinite(value):
        return 0.0
    return -value


def _unrankable(result: RankedResult) -> bool:
    """유효한 오퍼가 없는 엔트리는 항상 뒤로 (1위가 될 수 없음)"""
    return result.net_price is None


class SortStrategy:
    """정렬 키 함수 결정

    Usage:
        key = SortStrategy.key_for(SortKey.PRICE_ASC)
        results.sort(key=key)
    """

    @staticmethod
    def by_suitability(result: RankedResult) -> tuple:
        """추천 모드: 적합도 내림차순 → product_id 오름차순"""
        return (_unrankable(result), -result.suitability, result.entry.product_id)

    @staticmethod
    def by_combined(result: RankedResult) -> tuple:
        """검색 모드 기본: 결합 점수 내림차순"""
        return (_unrankable(result), _desc(result.combined), result.entry.product_id)

    @staticmethod
    def by_net_price(result: RankedResult) -> tuple:
        """순 가격 오름차순. 유효한 오퍼가 없는 엔트리는 맨 뒤"""
        price = result.net_price
        missing = price is None or not math.isfinite(price)
        return (missing, 0.0 if missing else price, result.entry.product_id)

    @staticmethod
    def by_rating(result: RankedResult) -> tuple:
        """평점 내림차순. 평점 없음은 0 으로 취급"""
        return (_unrankable(result), _desc(result.rating), result.entry.product_id)

    @classmethod
    def key_for(cls, sort_key: "SortKey | str | None") -> Callable[[RankedResult], tuple]:
        """정렬 키 함수 반환

        Raises:
            InvalidInputError: 알 수 없는 정렬 키
        """
        key = SortKey.parse(sort_key)
        if key == SortKey.PRICE_ASC:
            return cls.by_net_price
        if key == SortKey.RATING:
            return cls.by_rating
        return cls.by_combined
