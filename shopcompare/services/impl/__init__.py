"""Services implementation package."""

from .cache_service import CacheService
from .explanation_service import CacheBackend, ExplanationProvider, ExplanationService
from .rule_based_provider import RuleBasedExplanationProvider

__all__ = [
    "CacheService",
    "CacheBackend",
    "ExplanationProvider",
    "ExplanationService",
    "RuleBasedExplanationProvider",
]
