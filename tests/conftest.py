"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler and level changes made by configure_logging."""
    package_logger = logging.getLogger("strict_markup_parser")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
