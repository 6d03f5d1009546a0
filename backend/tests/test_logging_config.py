"""Tests for logging setup."""

import logging
from unicalc.logging_config import setup_logging


class TestSetupLogging:
    def test_level_by_name(self):
        logger = setup_logging("debug")
        assert logger.name == "unicalc"
        assert logger.level == logging.DEBUG
        setup_logging(logging.INFO)

    def test_repeat_calls_do_not_stack_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "unicalc.log"
        logger = setup_logging(log_file=str(log_file))
        logging.getLogger("unicalc.tests").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
        for handler in logger.handlers[1:]:
            handler.close()
        setup_logging()
