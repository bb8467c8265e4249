"""HTTP schemas."""

from .ranking_schema import (
    CatalogEntryIn,
    HealthResponse,
    RankedItem,
    RankingData,
    RankingResponse,
    RecommendationRequest,
    SearchRequest,
    UserProfileIn,
)

__all__ = [
    "CatalogEntryIn",
    "HealthResponse",
    "RankedItem",
    "RankingData",
    "RankingResponse",
    "RecommendationRequest",
    "SearchRequest",
    "UserProfileIn",
]
