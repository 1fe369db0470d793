"""Tests for logging setup."""
import logging

from pattern_catalog.config.schemas import LogFileConfig, LoggingConfig
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging


class TestSetupLogging:
    """Test handler wiring for each destination."""

    def test_none_destination_installs_null_handler(self, isolate_root_logger):
        setup_logging(LoggingConfig(destination="none"))
        handlers = isolate_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_console_destination_uses_stderr(self, isolate_root_logger):
        setup_logging(LoggingConfig(level="INFO", destination="console"))
        handler = isolate_root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert isolate_root_logger.level == logging.INFO

    def test_file_destination_writes_records(self, isolate_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "catalog.log"
        setup_logging(LoggingConfig(
            level="DEBUG",
            destination="file",
            file=LogFileConfig(path=str(log_file)),
        ))

        get_logger("pattern_catalog.tests").info("Demo finished", demo="observer")
        for handler in isolate_root_logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Demo finished" in content
        assert "demo=observer" in content

    def test_both_destinations(self, isolate_root_logger, tmp_path):
        setup_logging(LoggingConfig(
            destination="both", file=LogFileConfig(path=str(tmp_path / "both.log"))
        ))
        assert len(isolate_root_logger.handlers) == 2
