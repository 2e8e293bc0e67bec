"""Structured Logging — JSON formatter fields and handler setup."""

import json
import logging

from replication_order.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "replication_order.test", logging.INFO, __file__, 1, msg, None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "replication_order.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(dropped_groups=2, group_count=5, unrelated="x"),
    ))
    assert payload["dropped_groups"] == 2
    assert payload["group_count"] == 5
    assert "unrelated" not in payload


def test_json_formatter_serializes_uuid_extras():
    import uuid
    article_id = uuid.uuid4()
    payload = json.loads(JSONFormatter().format(_record(article_id=article_id)))
    assert payload["article_id"] == str(article_id)


def test_setup_logging_replaces_its_own_handler():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert isinstance(second.formatter, logging.Formatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)
