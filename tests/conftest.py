# ============================================================================
# SHARED TEST FIXTURES
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Tests - pytest fixtures
# PURPOSE: Sample catalog connection and isolated configuration
# CREATED: 19 OCT 2026
# ============================================================================
"""
Shared Fixtures

Fake connections and the sample schema live in tests/fakes.py.
"""

import logging

import pytest

from core.config import reset_defaults
from fakes import FakeCatalogConnection, shop_tables


@pytest.fixture
def shop_connection():
    return FakeCatalogConnection(shop_tables())


@pytest.fixture(autouse=True)
def _isolated_defaults(monkeypatch):
    """Each test reads configuration from a clean environment."""
    for var in (
        "MYSQL_HOST", "MYSQL_PORT", "MYSQL_USER", "MYSQL_PASSWORD",
        "MYSQL_DATABASE", "MYSQL_CHARSET", "MYSQL_CONNECT_TIMEOUT",
        "MODELGEN_SCHEMA", "MODELGEN_OUTPUT", "MODELGEN_LINE_LENGTH",
        "MODELGEN_SKIP_UNSUPPORTED", "MODELGEN_MANY_TO_MANY", "LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop handlers installed by configure_logging() during a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
