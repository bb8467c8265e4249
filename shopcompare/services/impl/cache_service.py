"""Redis 캐시 서비스 - 캐싱 로직만 담당

랭킹 코어는 캐시를 사용하지 않습니다. 호스트 레이어(설명 보강 등)에 명시적으로 주입합니다.
"""
import json
from typing import Any, Optional

from redis import Redis
from redis.exceptions import RedisError

from shopcompare.core.config import settings
from shopcompare.core.logging import get_logger
from shopcompare.core.exceptions import (
    CacheConnectionException,
    CacheSerializationException,
)


logger = get_logger("cache")


class CacheService:
    """Redis 캐시 관리 서비스 (CacheBackend 구현)

    값은 JSON 문자열로 저장합니다.
    """

    def __init__(self, redis_client: Optional[Redis] = None, ttl: Optional[int] = None):
        """Redis 클라이언트 초기화

        Args:
            redis_client: 미리 만든 클라이언트 (없으면 settings.redis_url 로 연결)
            ttl: 기본 TTL (초)

        Raises:
            CacheConnectionException: 연결(ping) 실패
        """
        self.ttl = ttl or settings.explanation_cache_ttl
        try:
            self.redis_client = redis_client or Redis.from_url(
                settings.redis_url,
                decode_responses=True,
                socket_connect_timeout=settings.redis_socket_timeout_s,
                socket_timeout=settings.redis_socket_timeout_s,
            )
            # 연결 테스트
            self.redis_client.ping()
            logger.info("Redis connection established")
        except RedisError as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise CacheConnectionException(
                "Redis connection failed",
                error_code="CACHE_CONN_FAILED",
                details={"reason": str(e)},
            )

    def get(self, key: str) -> Optional[Any]:
        """
        캐시 조회

        Args:
            key: 캐시 키

        Returns:
            저장된 값 또는 None (미스)

        Raises:
            CacheSerializationException: 저장된 값이 JSON 이 아님
            CacheConnectionException: Redis 오류
        """
        try:
            cached_data = self.redis_client.get(key)
        except RedisError as e:
            logger.error(f"Cache read error: {e}")
            raise CacheConnectionException(
                "Cache read failed",
                error_code="CACHE_READ_FAILED",
                details={"key": key, "error": str(e)},
            )

        if cached_data is None:
            logger.debug(f"Cache miss for key: {key}")
            return None

        try:
            value = json.loads(cached_data)
        except (json.JSONDecodeError, TypeError) as e:
            logger.error(f"Failed to deserialize cache: {e}")
            raise CacheSerializationException("get", str(e), details={"key": key})

        logger.debug(f"Cache hit for key: {key}")
        return value

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        캐시 저장

        Args:
            key: 캐시 키
            value: JSON 직렬화 가능한 값
            ttl: TTL (초, 없으면 기본값)

        Returns:
            저장 성공 여부

        Raises:
            CacheSerializationException: JSON 직렬화 불가
            CacheConnectionException: Redis 오류
        """
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize cache data: {e}")
            raise CacheSerializationException("set", str(e), details={"key": key})

        try:
            self.redis_client.setex(key, ttl or self.ttl, payload)
        except RedisError as e:
            logger.error(f"Cache write error: {e}")
            raise CacheConnectionException(
                "Failed to write cache",
                error_code="CACHE_WRITE_FAILED",
                details={"key": key, "error": str(e)},
            )

        logger.debug(f"Cache set for key: {key}, TTL: {ttl or self.ttl}s")
        return True

    def delete(self, key: str) -> bool:
        """캐시 삭제 (실패 시 False)"""
        try:
            return self.redis_client.delete(key) > 0
        except RedisError as e:
            logger.error(f"Cache delete error: {e}")
            return False

    def health_check(self) -> bool:
        """Redis 연결 상태 확인"""
        try:
            return bool(self.redis_client.ping())
        except RedisError:
            return False
