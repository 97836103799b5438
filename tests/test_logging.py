"""
Structured logging tests for store operations.
"""

import logging
import uuid

import pytest

from src.vector import DimensionMismatchError, InMemoryVectorStore
from util.logging import StructuredLogger, logger

LOGGER_NAME = "vector_store"


def test_global_logger():
    """The module exposes a ready StructuredLogger."""
    assert isinstance(logger, StructuredLogger)
    assert logger.logger.name == LOGGER_NAME
    assert logger.logger.handlers


def test_handler_not_duplicated():
    """Creating another logger with the same name reuses the handler."""
    count = len(logger.logger.handlers)
    StructuredLogger(LOGGER_NAME)
    assert len(logger.logger.handlers) == count


def test_log_operation_format(caplog):
    """Operations are logged as 'Operation: ..., Status: ..., Details: ...'."""
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    logger.log_operation("demo.populate", "success", {"entries": 6})

    assert "Operation: demo.populate, Status: success, Details: {'entries': 6}" in caplog.text


def test_rejection_logged_before_raise(caplog):
    """A dimension mismatch is logged as a warning."""
    caplog.set_level(logging.WARNING, logger=LOGGER_NAME)
    store = InMemoryVectorStore(dimension=3)

    with pytest.raises(DimensionMismatchError):
        store.insert(uuid.uuid4(), [1.0, 0.0])

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings
    assert "vector.insert" in warnings[0].getMessage()
    assert "dimension_mismatch" in warnings[0].getMessage()


def test_insert_logged_in_debug_mode(monkeypatch, caplog):
    """Inserts are only logged when DEBUG is on."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    record_id = uuid.uuid4()

    monkeypatch.setenv("DEBUG", "false")
    InMemoryVectorStore().insert(record_id, [1.0, 0.0])
    assert "vector.insert" not in caplog.text

    monkeypatch.setenv("DEBUG", "true")
    InMemoryVectorStore().insert(record_id, [1.0, 0.0])
    assert "vector.insert" in caplog.text
    assert str(record_id) in caplog.text


def test_query_logged_at_debug(caplog):
    """Queries log k and the number of results returned."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    store = InMemoryVectorStore()
    store.insert(uuid.uuid4(), [1.0, 0.0])

    store.query_top_k([1.0, 0.0], 5)

    assert "vector.query_top_k" in caplog.text
    assert "'k': 5" in caplog.text
    assert "'returned': 1" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
