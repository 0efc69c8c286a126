"""Test the centralized logging functionality."""

import logging
from io import StringIO

from ekflow.logging import (
    LOG_FORMAT,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


def test_centralized_logging():
    """Test that centralized logging works properly."""
    disable_debug_logging()
    logger = get_logger("ekflow.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    try:
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        log_capture.seek(0)
        log_capture.truncate(0)
        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        enable_debug_logging()
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()
    finally:
        logger.removeHandler(handler)
        disable_debug_logging()


def test_logger_naming():
    """Test that loggers use consistent naming."""
    logger = get_logger("ekflow.algorithms.test")
    assert logger.name == "ekflow.algorithms.test"
    assert logger.level == logging.NOTSET


def test_global_level_inherited():
    logger1 = get_logger("ekflow.module1")
    logger2 = get_logger("ekflow.module2")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    try:
        assert logging.getLogger("ekflow").level == logging.WARNING
        assert logger1.getEffectiveLevel() == logging.WARNING
        assert logger2.getEffectiveLevel() == logging.WARNING
    finally:
        disable_debug_logging()


def test_reset_and_setup_once():
    reset_logging()
    try:
        setup_root_logger(level=logging.DEBUG)
        # A second setup call is ignored until the next reset
        setup_root_logger(level=logging.ERROR)

        root_logger = logging.getLogger("ekflow")
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].formatter._fmt == LOG_FORMAT
        assert get_logger("ekflow.reset").isEnabledFor(logging.DEBUG)
    finally:
        reset_logging()
        setup_root_logger()


def test_engine_logs_visible_to_caplog(caplog):
    from ekflow.algorithms.max_flow import calc_max_flow

    caplog.set_level(logging.DEBUG, logger="ekflow")
    calc_max_flow([[0, 2], [0, 0]], 0, 1)
    assert any(r.name == "ekflow.algorithms.max_flow" for r in caplog.records)
