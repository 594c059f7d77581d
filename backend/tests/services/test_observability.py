"""Structured Logging — JSONFormatter output and extra fields."""

import json
import logging

from witquery.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "witquery.services", logging.INFO, __file__, 1, "Loaded %s", ("checklist",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "witquery.services"
    assert log["message"] == "Loaded checklist"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(work_item_id=42, collection="CheckListItems", unrelated="x"),
    ))
    assert log["work_item_id"] == 42
    assert log["collection"] == "CheckListItems"
    assert "unrelated" not in log
