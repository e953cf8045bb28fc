# ============================================================================
# LOGGING TESTS
# ============================================================================
# EPOCH: 1 - MODEL GENERATION
# STATUS: Tests - Structured logging layer
# PURPOSE: Verify context propagation and formatter output
# CREATED: 19 OCT 2026
# ============================================================================
"""
Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import io
import json
import logging

from core.logging import (
    ComponentType,
    HumanFormatter,
    StructuredFormatter,
    configure_logging,
    get_current_context,
    get_logger,
    log_context,
)


def _record(message="hello"):
    return logging.LogRecord("services.introspector", logging.INFO, __file__, 1, message, None, None)


class TestLogContext:

    def test_nesting_merges_parent(self):
        with log_context(schema="shop", operation="introspect"):
            with log_context(table="article"):
                context = get_current_context()
                assert context.schema == "shop"
                assert context.table == "article"
                assert context.operation == "introspect"
            assert get_current_context().table is None
        assert get_current_context().schema is None

    def test_to_dict_skips_empty(self):
        with log_context(schema="shop", extra={"run": 1}):
            assert get_current_context().to_dict() == {"schema": "shop", "run": 1}


class TestFormatters:

    def test_structured(self):
        with log_context(schema="shop", table="article"):
            data = json.loads(StructuredFormatter().format(_record()))

        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["context"] == {"schema": "shop", "table": "article"}

    def test_human(self):
        with log_context(schema="shop", column="create_date"):
            line = HumanFormatter().format(_record())
        assert "[schema=shop, column=create_date]: hello" in line


class TestLogger:

    def test_component_attached(self):
        stream = io.StringIO()
        configure_logging(level="DEBUG", json_output=True, stream=stream)
        get_logger("tests.emitter", ComponentType.EMITTER).info("emitted")

        data = json.loads(stream.getvalue())
        assert data["message"] == "emitted"
        assert data["data"]["component"] == "emitter"
