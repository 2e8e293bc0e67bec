"""Root conftest — shared test configuration."""

import logging
import os

import pytest

# Tests always run against a private in-memory database
os.environ.setdefault(
    "REPLICATION_ORDER_DATABASE_URL", "sqlite+aiosqlite:///:memory:",
)

from replication_order.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """open_database() installs a root handler; put the root logger back after each test."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
