# ============================================================================
# LOGGING TESTS
# ============================================================================
# STATUS: Tests - Context-aware logging
# PURPOSE: Verify log_context nesting and both formatters
# CREATED: 19 OCT 2026
# ============================================================================
"""
Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import json
import logging

from core.logging import (
    ComponentType,
    HumanFormatter,
    StructuredFormatter,
    get_current_context,
    get_logger,
    log_context,
)


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="core.schema.identifiers",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLogContext:

    def test_nested_context_merges(self):
        with log_context(entity="Pet"):
            with log_context(property="tags"):
                context = get_current_context()
                assert (context.entity, context.property) == ("Pet", "tags")
            assert get_current_context().property is None
        assert get_current_context().entity is None

    def test_to_dict_skips_empty(self):
        with log_context(entity="Pet"):
            assert get_current_context().to_dict() == {"entity": "Pet"}


class TestFormatters:

    def test_human_formatter_includes_context(self):
        with log_context(entity="Pet", property="tags"):
            line = HumanFormatter().format(_record())
        assert "[entity=Pet, property=tags]" in line
        assert line.endswith("core.schema.identifiers [entity=Pet, property=tags]: hello")

    def test_structured_formatter(self):
        with log_context(entity="Pet"):
            payload = json.loads(StructuredFormatter().format(_record("warned")))
        assert payload["level"] == "WARNING"
        assert payload["message"] == "warned"
        assert payload["context"] == {"entity": "Pet"}


class TestContextLogger:

    def test_component_and_context_attached(self, caplog):
        logger = get_logger("tests.logging", ComponentType.LEGALIZER)
        with caplog.at_level(logging.WARNING):
            with log_context(entity="Pet"):
                logger.warning("renamed")
        record = caplog.records[-1]
        assert record.getMessage() == "renamed"
        assert record.extra == {"entity": "Pet", "component": "legalizer"}
