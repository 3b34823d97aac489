"""Structured Logging — JSON formatter, setup, and component-tagged loggers.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (component, path, error_code, fields) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - component_logger wraps a LoggerAdapter so handlers tag every line with their
      component name without repeating extra= at each call site
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = ("component", "path", "method", "error_code", "fields", "resource_id")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class ComponentAdapter(logging.LoggerAdapter):
    """Stamps a component tag on every record, merging per-call extras."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def component_logger(component: str) -> ComponentAdapter:
    """Logger for a named component, e.g. component_logger("Admin")."""
    return ComponentAdapter(
        logging.getLogger(f"app.{component.lower()}"), {"component": component},
    )


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(component)s] %(message)s",
            defaults={"component": "-"},
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
