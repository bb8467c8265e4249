"""Edit-distance helpers (Levenshtein + length-scaled fuzzy tolerance)."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from shopcompare.core.config import settings

from ..normalization.normalize import normalize_text


def edit_distance(a: str, b: str) -> int:
    """정규화된 두 문자열의 편집 거리 (삽입/삭제/치환 비용 1).

    대칭이며 두 문자열이 같을 때만 0 입니다.
    """
    return int(Levenshtein.distance(normalize_text(a), normalize_text(b)))


def allowed_distance(
    query: str,
    tolerance: int | None = None,
    short_length: int | None = None,
    medium_length: int | None = None,
) -> int:
    """쿼리 길이에 따른 허용 편집 거리.

    - 짧은 쿼리(<= 3자): 0 (오탐 방지)
    - 중간 쿼리(<= 5자): 1
    - 그 외: tolerance (기본 2)
    """
    tolerance = settings.match_fuzzy_tolerance if tolerance is None else tolerance
    short_length = settings.match_short_query_length if short_length is None else short_length
    medium_length = settings.match_medium_query_length if medium_length is None else medium_length

    n = len(query or "")
    if n <= short_length:
        return 0
    if n <= medium_length:
        return 1
    return tolerance


def is_fuzzy_match(query: str, target: str, tolerance: int | None = None) -> bool:
    """쿼리가 대상 문자열과 '충분히 가까운지' 판정.

    정규화된 대상이 쿼리를 포함하면 거리와 무관하게 즉시 매치입니다.
    """
    q = normalize_text(query)
    t = normalize_text(target)

    if q in t:
        return True

    return int(Levenshtein.distance(q, t)) <= allowed_distance(q, tolerance)


def similarity(a: str, b: str) -> float:
    """1 - distance / max(len) 를 [0, 1] 로 클램프.

    퍼지 매치 점수를 스케일해서 오타 매치가 정확/부분 매치보다 아래에 오게 합니다.
    """
    na = normalize_text(a)
    nb = normalize_text(b)

    longest = max(len(na), len(nb))
    if longest == 0:
        return 1.0

    ratio = 1.0 - Levenshtein.distance(na, nb) / longest
    if ratio < 0:
        return 0.0
    if ratio > 1:
        return 1.0
    return float(ratio)
