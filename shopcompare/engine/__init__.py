"""Engine Layer - Scoring and Ranking Pipeline

This module provides the core engine layer, implementing:
- RankingCombiner: Main entry point (recommendation / search modes)
- PreferenceScorer: Profile-based suitability scoring
- ScoringWeights: Per-priority weight tables
- RankedResult: Standardized result format
- SortStrategy: Deterministic sort keys
"""

from .preference import PreferenceScorer, SuitabilityBreakdown, calculate_net_price, select_best_offer, suitability
from .ranker import RankingCombiner, score_for_recommendation, score_for_search
from .result import RankedResult, RankingMode
from .strategy import SortKey, SortStrategy
from .weights import DEFAULT_INTERACTION_WEIGHTS, DEFAULT_WEIGHT_PROFILES, ScoringWeights

__all__ = [
    "RankingCombiner",
    "score_for_recommendation",
    "score_for_search",
    "PreferenceScorer",
    "SuitabilityBreakdown",
    "calculate_net_price",
    "select_best_offer",
    "suitability",
    "RankedResult",
    "RankingMode",
    "SortKey",
    "SortStrategy",
    "ScoringWeights",
    "DEFAULT_WEIGHT_PROFILES",
    "DEFAULT_INTERACTION_WEIGHTS",
]
