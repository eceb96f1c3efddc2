"""
Unit tests for contextual logging helpers.
"""

import logging

import pytest

from mdb_collections.observability.logging import (clear_correlation_id,
                                                   collection_context,
                                                   current_log_fields,
                                                   get_correlation_id,
                                                   get_logger, log_operation,
                                                   set_correlation_id)


@pytest.fixture(autouse=True)
def clean_context():
    yield
    clear_correlation_id()


@pytest.mark.unit
class TestLoggingContext:
    """Test correlation IDs and the per-call collection context."""

    def test_generates_correlation_id(self):
        correlation_id = set_correlation_id()
        assert correlation_id
        assert get_correlation_id() == correlation_id

    def test_collection_context_fields(self):
        set_correlation_id("req-1")

        with collection_context("users", "insert_one"):
            fields = current_log_fields()

        assert fields == {
            "correlation_id": "req-1",
            "collection_name": "users",
            "operation": "insert_one",
        }
        assert current_log_fields() == {"correlation_id": "req-1"}

    def test_nested_contexts_restore_outer(self):
        with collection_context("users", "insert_one"):
            with collection_context("audit_log", "insert_one"):
                assert current_log_fields()["collection_name"] == "audit_log"
            assert current_log_fields()["collection_name"] == "users"

    def test_context_reset_on_error(self):
        with pytest.raises(RuntimeError):
            with collection_context("users", "find_one_and_update"):
                raise RuntimeError("boom")

        assert current_log_fields() == {}

    def test_cleared_correlation_id(self):
        set_correlation_id("req-1")
        clear_correlation_id()
        assert "correlation_id" not in current_log_fields()


@pytest.mark.unit
class TestContextualLogger:
    """Test the logger adapter and structured operation records."""

    def test_adapter_adds_context(self, caplog):
        set_correlation_id("req-2")
        logger = get_logger("mdb_collections.test")

        with caplog.at_level(logging.INFO, logger="mdb_collections.test"):
            with collection_context("posts", "insert_one"):
                logger.info("hello")

        record = caplog.records[-1]
        assert record.correlation_id == "req-2"
        assert record.collection_name == "posts"
        assert record.operation == "insert_one"

    def test_explicit_extra_wins(self, caplog):
        logger = get_logger("mdb_collections.test")

        with caplog.at_level(logging.INFO, logger="mdb_collections.test"):
            with collection_context("posts", "insert_one"):
                logger.info("hello", extra={"collection_name": "drafts"})

        assert caplog.records[-1].collection_name == "drafts"

    def test_log_operation_failure(self, caplog):
        logger = logging.getLogger("mdb_collections.test")

        with caplog.at_level(logging.WARNING, logger="mdb_collections.test"):
            with collection_context("users", "insert_one"):
                log_operation(
                    logger,
                    "collection.insert_one",
                    level=logging.WARNING,
                    success=False,
                    duration_ms=12.5,
                )

        record = caplog.records[-1]
        assert record.getMessage() == (
            "Operation failed: collection.insert_one (duration: 12.50ms)"
        )
        assert record.duration_ms == 12.5
        assert record.success is False
        assert record.collection_name == "users"
        assert record.operation == "collection.insert_one"
