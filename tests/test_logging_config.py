"""
Tests for logging configuration helpers.
"""

import logging

import pytest

from thrustalloc.utils import get_logger, setup_logging, temporary_log_level


@pytest.fixture
def logger_name():
    """Isolated logger name, handlers removed after the test."""
    name = "thrustalloc.tests.logging"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level(self, logger_name):
        logger = setup_logging(logger_name, level=logging.DEBUG)
        assert logger.level == logging.DEBUG

    def test_console_handler(self, logger_name):
        logger = setup_logging(logger_name)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_no_console(self, logger_name):
        logger = setup_logging(logger_name, console=False)
        assert logger.handlers == []

    def test_repeated_setup_does_not_duplicate_handlers(self, logger_name):
        setup_logging(logger_name)
        logger = setup_logging(logger_name)
        assert len(logger.handlers) == 1

    def test_file_handler(self, logger_name, tmp_path):
        log_file = tmp_path / "logs" / "alloc.log"
        logger = setup_logging(logger_name, log_file=str(log_file), console=False)
        logger.warning("clamped")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.exists()
        assert "clamped" in log_file.read_text(encoding="utf-8")

    def test_simple_format(self, logger_name, tmp_path):
        log_file = tmp_path / "simple.log"
        logger = setup_logging(logger_name, log_file=str(log_file), console=False, simple_format=True)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "hello" in text
        assert "[INFO]" not in text


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_named_logger(self, logger_name):
        assert get_logger(logger_name).name == logger_name

    def test_level_override(self, logger_name):
        assert get_logger(logger_name, level=logging.ERROR).level == logging.ERROR


class TestTemporaryLogLevel:
    """Tests for temporary_log_level."""

    def test_restores_level(self, logger_name):
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.INFO)
        with temporary_log_level(logger_name, logging.ERROR):
            assert logger.level == logging.ERROR
        assert logger.level == logging.INFO

    def test_restores_on_error(self, logger_name):
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.INFO)
        with pytest.raises(RuntimeError):
            with temporary_log_level(logger_name, logging.DEBUG):
                raise RuntimeError("boom")
        assert logger.level == logging.INFO

    def test_silences_clamp_warnings(self, caplog):
        from thrustalloc import Thruster  # noqa: PLC0415

        with temporary_log_level("thrustalloc.components", logging.ERROR):
            Thruster().set_current_status(5.0)
        assert "Current status" not in caplog.text
