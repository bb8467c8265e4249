"""호스트 레이어 서비스 - export only."""

from .impl import ExplanationService, CacheService, RuleBasedExplanationProvider

__all__ = ["ExplanationService", "CacheService", "RuleBasedExplanationProvider"]
