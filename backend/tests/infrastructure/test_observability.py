"""JSONFormatter — structured fields and extras."""

import json
import logging

from planner.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "planner.services.notes", logging.INFO, __file__, 1, "Note %s", ("created",), None,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


def test_formats_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "planner.services.notes"
    assert out["message"] == "Note created"
    assert "timestamp" in out


def test_includes_known_extras_only():
    out = json.loads(JSONFormatter().format(_record(note_id=7, user_id=3, secret="x")))
    assert out["note_id"] == 7
    assert out["user_id"] == 3
    assert "secret" not in out


def test_includes_exception_text():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        import sys
        record = _record()
        record.exc_info = sys.exc_info()
    out = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in out["exception"]


def test_setup_logging_installs_handler():
    handler = setup_logging("warning", "json")
    try:
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(handler)
