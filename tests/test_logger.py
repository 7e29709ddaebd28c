"""Tests for the logging configuration helper."""

from __future__ import annotations

import logging

import pytest

from havarot.utils.logger import PACKAGE_LOGGER, configure_logger


def test_configure_is_idempotent():
    first = configure_logger("INFO")
    handlers = list(first.handlers)
    second = configure_logger("INFO")
    assert second is first
    assert second.handlers == handlers
    assert first.name == PACKAGE_LOGGER
    assert first.level == logging.INFO


def test_level_can_change_without_new_handlers():
    logger = configure_logger(logging.WARNING)
    count = len(logger.handlers)
    configure_logger("DEBUG")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == count


def test_log_file(tmp_path):
    log_file = tmp_path / "havarot.log"
    logger = configure_logger("DEBUG", log_file)
    configure_logger("DEBUG", log_file)
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    logging.getLogger("havarot.core.text").debug("hello")
    for handler in file_handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_force_replaces_handlers(tmp_path):
    logger = configure_logger("DEBUG", tmp_path / "a.log")
    assert len(logger.handlers) == 2
    configure_logger("DEBUG", force=True)
    assert len(logger.handlers) == 1


def test_unknown_level():
    with pytest.raises(ValueError):
        configure_logger("LOUD")
