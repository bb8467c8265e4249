"""리소스 파일(YAML) 로더 유틸리티"""
import os
import yaml
from typing import Any, Dict
from functools import lru_cache

from shopcompare.core.logging import logger


def get_resource_path(relative_path: str) -> str:
    """패키지 기준 리소스 절대 경로 반환"""
    # shopcompare/utils/resource_loader.py -> shopcompare/utils -> shopcompare
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱"""
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        return {}


def load_query_aliases() -> Dict[str, list[str]]:
    """검색어 별칭(음역/동의어) 사전 로드

    {"ايفون": ["iphone"], ...} 형태. 값이 문자열 하나여도 리스트로 맞춥니다.
    """
    data = load_yaml_resource("matching/aliases.yaml")
    raw = data.get("aliases", {}) or {}

    aliases: Dict[str, list[str]] = {}
    for key, value in raw.items():
        if isinstance(value, str):
            aliases[str(key)] = [value]
        elif isinstance(value, list):
            aliases[str(key)] = [str(v) for v in value if v]
    return aliases
