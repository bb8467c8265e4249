"""Matching package."""

from .distance import allowed_distance, edit_distance, is_fuzzy_match, similarity
from .field_matching import FieldMatcher, FieldWeights, get_default_matcher, match_score

__all__ = [
    "allowed_distance",
    "edit_distance",
    "is_fuzzy_match",
    "similarity",
    "FieldMatcher",
    "FieldWeights",
    "get_default_matcher",
    "match_score",
]
