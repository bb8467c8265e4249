"""로깅 설정

- 루트 로거 "shopcompare" 를 한 번만 구성하고, 모듈은 get_logger() 로 하위 로거를 씁니다.
- 코어(engine, matching)는 DEBUG 요약만, 호스트(api, services)는 INFO/WARNING.
"""
import logging
import os
import re
import sys
from typing import Optional

from shopcompare.core.config import settings


ROOT_LOGGER_NAME = "shopcompare"

# production 에서는 DEBUG 를 INFO 로 올림
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

_PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_DEVELOPMENT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

_SECRET_RE = re.compile(r"(password|token|api_key|secret)\s*[=:]\s*\S+", re.IGNORECASE)
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]+")


def _resolve_level(level: Optional[str]) -> int:
    name = (level or settings.log_level or "INFO").upper()
    if IS_PRODUCTION and name == "DEBUG":
        name = "INFO"
    return getattr(logging, name, logging.INFO)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """루트 로거 초기화 (핸들러는 한 번만 추가)

    Args:
        level: 로그 레벨 이름. 없으면 settings.log_level
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    resolved = _resolve_level(level)
    root.setLevel(resolved)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=_PRODUCTION_FORMAT if IS_PRODUCTION else _DEVELOPMENT_FORMAT,
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)

    for handler in root.handlers:
        handler.setLevel(resolved)

    return root


def get_logger(component: str) -> logging.Logger:
    """컴포넌트별 하위 로거 (예: "shopcompare.engine")"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """검색어 등 사용자 입력을 로그에 남기기 전에 정리

    - 제어 문자(개행 포함)는 공백으로 치환 (로그 라인 위조 방지)
    - password=... / token: ... 형태는 값 마스킹
    - max_length 초과분은 절단

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이

    Returns:
        정리된 문자열 (빈 값은 "[empty]")
    """
    if not value:
        return "[empty]"

    result = _CONTROL_CHARS_RE.sub(" ", str(value))
    result = _SECRET_RE.sub(lambda m: f"{m.group(1)}=***", result)

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
