"""Structured Logging — JSON formatter fields and component tagging."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, component_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.admin", logging.WARNING, __file__, 1, "欄位未填寫正確", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "app.admin"
    assert log["message"] == "欄位未填寫正確"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(_record(component="Admin", fields=["name"])))
    assert log["component"] == "Admin"
    assert log["fields"] == ["name"]
    assert "path" not in log


def test_component_logger_tags_records(caplog):
    logger = component_logger("Admin")
    with caplog.at_level(logging.WARNING, logger="app.admin"):
        logger.warning("使用者不存在", extra={"resource_id": "abc"})
    record = caplog.records[-1]
    assert record.component == "Admin"
    assert record.resource_id == "abc"
    assert record.name == "app.admin"
