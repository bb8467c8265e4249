"""Weighted field matching (query → catalog entry relevance)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from shopcompare.core.config import settings
from shopcompare.core.exceptions import ConfigurationException
from shopcompare.core.logging import get_logger
from shopcompare.models.catalog import CatalogEntry
from shopcompare.utils.resource_loader import load_query_aliases

from .distance import allowed_distance, edit_distance, similarity
from ..core.tokenize import split_words, tokenize_query
from ..normalization.normalize import normalize_text


logger = get_logger("matching")


@dataclass(frozen=True)
class FieldWeights:
    """필드별 기본 가중치"""

    name: float = 1.0
    brand: float = 0.6
    category: float = 0.4
    tag: float = 0.5

    def __post_init__(self):
        for label, value in (
            ("name", self.name),
            ("brand", self.brand),
            ("category", self.category),
            ("tag", self.tag),
        ):
            if not 0.0 <= value <= 1.0:
                raise ConfigurationException(
                    f"field weight '{label}' must be within [0, 1] (got {value})"
                )


@dataclass(frozen=True)
class _Field:
    text: str
    words: tuple[str, ...]
    weight: float


def normalize_aliases(aliases: Mapping[str, list[str]]) -> dict[str, tuple[str, ...]]:
    """별칭 사전의 키/값을 정규화하고 같은 키로 합칩니다."""
    merged: dict[str, list[str]] = {}
    for key, values in aliases.items():
        nk = normalize_text(key)
        if not nk:
            continue
        bucket = merged.setdefault(nk, [])
        for v in values:
            nv = normalize_text(v)
            if nv and nv != nk and nv not in bucket:
                bucket.append(nv)
    return {k: tuple(v) for k, v in merged.items() if v}


class FieldMatcher:
    """검색어와 카탈로그 엔트리의 텍스트 관련도(relevance) 계산

    - name 1.0 / brand 0.6 / category 0.4 / tag 0.5 가중치
    - 부분문자열 포함: 필드 가중치 그대로
    - 그 외: 필드 내 단어 중 허용 편집 거리 안의 최선 매치 → weight * 0.8 * similarity
    - 토큰별 최고 점수의 평균 → [0, 1]

    상태를 갖지 않습니다 (설정값만 보관). 여러 스레드에서 공유해도 안전합니다.
    """

    def __init__(
        self,
        weights: Optional[FieldWeights] = None,
        tolerance: Optional[int] = None,
        fuzzy_penalty: Optional[float] = None,
        min_token_length: Optional[int] = None,
        aliases: Optional[Mapping[str, list[str]]] = None,
    ):
        """
        Args:
            weights: 필드 가중치 (기본 FieldWeights())
            tolerance: 6자 이상 토큰의 허용 편집 거리 (기본 settings)
            fuzzy_penalty: 퍼지 매치 감쇠 계수 (기본 0.8)
            min_token_length: 최소 토큰 길이 (기본 2)
            aliases: 별칭 사전. None 이면 리소스(aliases.yaml)에서 로드,
                빈 dict 를 넘기면 별칭 확장을 끕니다.
        """
        self.weights = weights or FieldWeights()
        self.tolerance = settings.match_fuzzy_tolerance if tolerance is None else tolerance
        self.fuzzy_penalty = settings.match_fuzzy_penalty if fuzzy_penalty is None else fuzzy_penalty
        self.min_token_length = (
            settings.match_min_token_length if min_token_length is None else min_token_length
        )

        if aliases is None:
            aliases = load_query_aliases() if settings.match_aliases_enabled else {}
        self.aliases = normalize_aliases(aliases)

    def _fields(self, entry: CatalogEntry) -> list[_Field]:
        raw = [
            (entry.name, self.weights.name),
            (entry.brand, self.weights.brand),
            (entry.category, self.weights.category),
        ]
        raw.extend((tag, self.weights.tag) for tag in (entry.tags or ()))

        fields: list[_Field] = []
        for text, weight in raw:
            normalized = normalize_text(text)
            if not normalized:
                continue
            fields.append(_Field(normalized, tuple(split_words(normalized)), weight))
        return fields

    def _term_field_score(self, term: str, field: _Field) -> float:
        """단일 용어 vs 단일 필드 점수"""
        if term in field.text:
            return field.weight

        max_allowed = allowed_distance(term, self.tolerance)
        best = 0.0
        for word in field.words:
            # 길이 차이가 허용 거리보다 크면 편집 거리도 반드시 더 큼
            if abs(len(word) - len(term)) > max_allowed:
                continue
            if edit_distance(term, word) > max_allowed:
                continue
            best = max(best, field.weight * self.fuzzy_penalty * similarity(term, word))
        return best

    def _token_score(self, token: str, fields: list[_Field]) -> float:
        terms = (token,) + self.aliases.get(token, ())
        best = 0.0
        for term in terms:
            for field in fields:
                best = max(best, self._term_field_score(term, field))
                if best >= 1.0:
                    return 1.0
        return best

    def match_score(self, query: str, entry: CatalogEntry) -> float:
        """검색어 관련도 (0~1).

        빈 검색어/공백만 있는 검색어 → 0.0 (예외 아님)
        """
        tokens = tokenize_query(query, self.min_token_length)
        if not tokens:
            return 0.0

        fields = self._fields(entry)
        if not fields:
            return 0.0

        total = sum(self._token_score(t, fields) for t in tokens)
        score = total / len(tokens)

        if score < 0:
            return 0.0
        if score > 1:
            return 1.0
        return float(score)


_default_matcher: Optional[FieldMatcher] = None


def get_default_matcher() -> FieldMatcher:
    """기본 설정의 FieldMatcher (불변 설정만 보관하므로 공유 가능)"""
    global _default_matcher
    if _default_matcher is None:
        _default_matcher = FieldMatcher()
        logger.debug(f"[match] Default matcher ready: aliases={len(_default_matcher.aliases)}")
    return _default_matcher


def match_score(query: str, entry: CatalogEntry) -> float:
    """기본 FieldMatcher 로 관련도 계산"""
    return get_default_matcher().match_score(query, entry)
