"""해싱 유틸리티"""
import hashlib


def hash_string(text: str) -> str:
    """
    문자열을 MD5 해시로 변환

    Args:
        text: 해시할 문자열

    Returns:
        MD5 해시 문자열
    """
    return hashlib.md5(text.encode()).hexdigest()


def generate_cache_key(namespace: str, *parts: str) -> str:
    """
    네임스페이스 + 정규화된 구성요소로 캐시 키 생성

    예: generate_cache_key("explain", "iphone-15", "balanced|everyday")
        -> "explain:<md5>"

    Args:
        namespace: 키 접두어
        parts: 키 구성요소 (정규화 후 '|' 로 연결)

    Returns:
        캐시 키
    """
    from shopcompare.utils.text import normalize_text

    joined = "|".join(normalize_text(p) for p in parts)
    hashed = hash_string(joined)
    return f"{namespace}:{hashed}"
