"""Structured Logging — one JSON object per line on stderr.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Adoption context (pet_id, client_ip), error_code, path and service are
      copied from `extra=` when set; other extras are ignored
    - setup_logging() may run more than once (reloads, tests) without
      stacking handlers

Design Decisions:
    - stdlib logging with a small formatter, no logging dependency
    - uvicorn's access and error loggers propagate to the root handler so the
      server's own lines share the format
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "petadoption"
EXTRA_FIELDS = ("pet_id", "client_ip", "error_code", "path", "service")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the application handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
