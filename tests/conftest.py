"""Shared fixtures for the havarot test suite."""

from __future__ import annotations

import logging

import pytest

from havarot.utils import logger as logger_module


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo any handler setup so that log capture works in every test."""
    yield
    package_logger = logging.getLogger(logger_module.PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
    logger_module._CONFIGURED = False


@pytest.fixture(autouse=True)
def _no_user_config(monkeypatch):
    """Tests never read a developer's own configuration file."""
    monkeypatch.delenv("HAVAROT_CONFIG", raising=False)
