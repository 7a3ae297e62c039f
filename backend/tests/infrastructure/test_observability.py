"""Structured Logging: JSON payload shape and idempotent setup."""

import json
import logging

from daily_puzzle.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "daily_puzzle.test", logging.INFO, __file__, 1, "Progress recorded", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_supplied_extras_only():
    payload = json.loads(JSONFormatter().format(_record(user_id=7, puzzle_id=3)))
    assert payload["message"] == "Progress recorded"
    assert payload["level"] == "INFO"
    assert payload["user_id"] == 7
    assert payload["puzzle_id"] == 3
    assert "open_id" not in payload


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")
        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        root.removeHandler(second)
        root.handlers[:] = before
        root.setLevel(level)
