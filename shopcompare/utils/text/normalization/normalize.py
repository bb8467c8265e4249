"""Query/field text normalization (Arabic letter variants + case + whitespace)."""

from __future__ import annotations

import re


# 알리프 변형(أ إ آ) → ا, 타 마르부타(ة) → ه, 알리프 막수라(ى) → ي
_ARABIC_LETTER_VARIANTS = str.maketrans({
    "أ": "ا",
    "إ": "ا",
    "آ": "ا",
    "ة": "ه",
    "ى": "ي",
})

# 하라카트(tanween, fatha, damma, kasra, shadda, sukun ...) + superscript alef
_ARABIC_DIACRITICS_RE = re.compile(r"[\u064B-\u065F\u0670]")

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text) -> str:
    """검색/매칭 비교용 정규화.

    - 소문자화 + 앞뒤 공백 제거 + 다중 공백 축약
    - 아랍어 문자 변형 통일 후 발음 부호(diacritics) 제거

    문자열이 아니거나 비어 있으면 "" 를 반환합니다 (예외 없음).
    멱등: normalize_text(normalize_text(x)) == normalize_text(x)

    예시:
    - "  Apple   iPhone " -> "apple iphone"
    - "آيفون" -> "ايفون"
    """
    if not text or not isinstance(text, str):
        return ""

    normalized = text.lower().translate(_ARABIC_LETTER_VARIANTS)
    normalized = _ARABIC_DIACRITICS_RE.sub("", normalized)
    normalized = _WHITESPACE_RE.sub(" ", normalized)

    return normalized.strip()
