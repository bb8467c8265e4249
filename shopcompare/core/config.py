"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 텍스트 매칭
    match_min_token_length: int = 2
    match_fuzzy_tolerance: int = 2  # 긴 쿼리(6자 이상)에 허용되는 편집 거리
    match_short_query_length: int = 3  # 이하: 편집 거리 0
    match_medium_query_length: int = 5  # 이하: 편집 거리 1
    match_fuzzy_penalty: float = 0.8  # 퍼지 매치는 부분문자열 매치보다 낮게
    match_aliases_enabled: bool = True

    # 검색 랭킹
    # NOTE: 0.15 / 0.7 은 경험적으로 정한 값입니다. 카탈로그 도메인별 튜닝 가능.
    search_relevance_threshold: float = 0.15
    search_relevance_weight: float = 0.7

    # 가격 점수
    price_overshoot_ratio: float = 1.2  # budget.max * 1.2 초과 → 0점
    price_score_floor: float = 0.1
    price_score_slope: float = 0.7

    # 신뢰도/행동 점수
    trust_rating_count_saturation: int = 500
    behavior_recency_decay: float = 0.1  # exp(-0.1 * days)
    behavior_neutral_score: float = 0.5

    # 설명(Explanation) 보강 - 호스트 레이어 전용
    enrichment_concurrency: int = 4
    enrichment_timeout_s: float = 8.0
    enrichment_placeholder_reason: str = "Analyzing specs..."
    explanation_cache_ttl: int = 21600  # 6시간
    explanation_cache_enabled: bool = True

    # Redis (설명 캐시)
    redis_url: str = "redis://localhost:6379/0"
    redis_socket_timeout_s: float = 2.0

    # API
    api_title: str = "shopcompare"
    api_version: str = "1.0.0"
    api_description: str = "카탈로그 추천/검색 랭킹 엔진 API"
    cors_allow_origins: list[str] = ["*"]

    # 로깅
    log_level: str = "INFO"

    @field_validator("match_min_token_length", "match_fuzzy_tolerance")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("matching lengths/tolerances must be positive")
        return v

    @field_validator("match_short_query_length", "match_medium_query_length")
    @classmethod
    def validate_query_bands(cls, v: int) -> int:
        if v < 0:
            raise ValueError("query length bands must be >= 0")
        return v

    @field_validator(
        "search_relevance_threshold",
        "search_relevance_weight",
        "match_fuzzy_penalty",
        "price_score_floor",
        "behavior_neutral_score",
    )
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("value must be within [0, 1]")
        return v

    @field_validator("price_overshoot_ratio")
    @classmethod
    def validate_overshoot_ratio(cls, v: float) -> float:
        if v < 1.0:
            raise ValueError("price_overshoot_ratio must be >= 1.0")
        return v

    @field_validator("trust_rating_count_saturation", "enrichment_concurrency", "explanation_cache_ttl")
    @classmethod
    def validate_positive_count(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("enrichment_timeout_s", "behavior_recency_decay", "redis_socket_timeout_s")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("value must be >= 0")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
