"""Tokenization utilities for matching."""

from __future__ import annotations

from ..normalization.normalize import normalize_text


def split_words(text: str) -> list[str]:
    """정규화된 필드 텍스트를 공백 기준 단어 목록으로 분리."""
    if not text:
        return []
    return [w for w in text.split(" ") if w]


def tokenize_query(text: str, min_length: int = 2) -> list[str]:
    """검색어 토큰화.

    정규화 후 공백으로 분리하고 min_length 미만 토큰은 버립니다.
    순서와 중복은 유지합니다 (점수는 토큰 수로 평균을 냄).
    """
    normalized = normalize_text(text)
    if not normalized:
        return []

    return [t for t in split_words(normalized) if len(t) >= min_length]
