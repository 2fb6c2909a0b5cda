"""
Tests for structured logging setup.
"""

import logging

import pytest

from common.config import Config
from common.logging import TimedLogger, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "server.log"
    setup_logging(Config(log_level="DEBUG", save_to_file=True, log_file_path=str(log_file)))

    get_logger("tests").info(event="file_logging_check", tool_name="delete_user")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "file_logging_check" in text
    assert "delete_user" in text


def test_setup_logging_level():
    setup_logging(Config(log_level="warning"))

    assert logging.getLogger().level == logging.WARNING


def test_timed_logger_records_elapsed():
    setup_logging(Config())

    with TimedLogger(get_logger("tests"), "timed_operation", items=3) as timer:
        pass

    assert timer.elapsed_ms is not None
    assert timer.elapsed_ms >= 0
