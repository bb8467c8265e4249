"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class ShopCompareException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외
class ValidationException(ShopCompareException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None, error_code: str = "VALIDATION_ERROR"):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, error_code,
                        details or {"field": field, "reason": reason})


class InvalidInputError(ValidationException):
    """구조적으로 잘못된 입력 (None 카탈로그, 잘못된 타입 등)

    점수 계산 중 의미상 이상한 값(음수 가격 등)은 여기에 해당하지 않습니다.
    그런 값은 해당 하위 점수에서 흡수됩니다.
    """
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(field, reason, details, error_code="INVALID_INPUT")


# 설정 관련 예외
class ConfigurationException(ShopCompareException):
    """가중치 테이블/허용 오차 설정 오류"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Invalid scoring configuration: {reason}"
        super().__init__(message, "CONFIG_ERROR", details or {"reason": reason})


# 설명 보강(외부 AI) 관련 예외
class EnrichmentException(ShopCompareException):
    """설명 보강 서비스 오류"""
    def __init__(self, message: str, error_code: str = "ENRICHMENT_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "ENRICHMENT_ERROR", details)


class EnrichmentTimeoutException(EnrichmentException):
    """설명 보강 타임아웃"""
    def __init__(self, product_id: str, timeout_s: float, details: Optional[dict[str, Any]] = None):
        message = f"Explanation for '{product_id}' timed out after {timeout_s}s"
        super().__init__(message, "ENRICHMENT_TIMEOUT",
                        details or {"product_id": product_id, "timeout_s": timeout_s})


# 캐시 관련 예외
class CacheException(ShopCompareException):
    """캐시 관련 예외"""
    def __init__(self, message: str, error_code: str = "CACHE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CACHE_ERROR", details)


class CacheSerializationException(CacheException):
    """캐시 직렬화/역직렬화 오류"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Cache {operation} failed: {reason}"
        super().__init__(message, "CACHE_SERIALIZATION_ERROR",
                        details or {"operation": operation, "reason": reason})


class CacheConnectionException(CacheException):
    """캐시 연결/읽기/쓰기 실패"""
    def __init__(self, message: str, error_code: str = "CACHE_CONN_FAILED", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code, details)
