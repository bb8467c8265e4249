"""로깅 유틸리티 유닛 테스트"""
import logging

from shopcompare.core.logging import ROOT_LOGGER_NAME, get_logger, sanitize_for_log, setup_logging


class TestSanitizeForLog:
    """로그용 문자열 정리"""

    def test_empty(self):
        assert sanitize_for_log("") == "[empty]"

    def test_newlines_replaced(self):
        assert "\n" not in sanitize_for_log("galaxy\nINFO fake line")

    def test_secret_masked(self):
        assert sanitize_for_log("query token=abc123") == "query token=***"

    def test_truncated(self):
        assert sanitize_for_log("x" * 150, max_length=100) == "x" * 100 + "..."

    def test_arabic_kept(self):
        assert sanitize_for_log("ايفون 15") == "ايفون 15"


class TestLoggerSetup:
    """로거 구성"""

    def test_child_logger_name(self):
        assert get_logger("engine").name == f"{ROOT_LOGGER_NAME}.engine"

    def test_single_handler(self):
        root = setup_logging()
        setup_logging()
        assert len(root.handlers) == 1

    def test_level_override(self):
        root = setup_logging("WARNING")
        try:
            assert root.level == logging.WARNING
        finally:
            setup_logging()
