"""Shared fixtures."""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore a plain stderr sink after tests that reconfigure loguru."""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message))


@pytest.fixture
def error_logs():
    """Messages logged at ERROR level or above."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="ERROR")
    yield messages
    logger.remove(handler_id)
