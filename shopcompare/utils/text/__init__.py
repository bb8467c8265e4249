"""Text utilities (modularized).

Public API is kept stable while implementation is organized under:
- core/
- matching/
- normalization/
"""

from .core.tokenize import split_words, tokenize_query
from .matching import (
    FieldMatcher,
    FieldWeights,
    allowed_distance,
    edit_distance,
    is_fuzzy_match,
    match_score,
    similarity,
)
from .normalization import normalize_text

__all__ = [
    # core
    "split_words",
    "tokenize_query",
    # matching
    "allowed_distance",
    "edit_distance",
    "is_fuzzy_match",
    "similarity",
    "FieldMatcher",
    "FieldWeights",
    "match_score",
    # normalization
    "normalize_text",
]
