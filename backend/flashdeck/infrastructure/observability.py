"""Structured Logging — JSON formatter and one-shot logging setup.

Invariants:
    - Every JSON line carries timestamp (record creation, UTC), level, logger, message
    - Store and model extras (error_code, path, table, operation, token counts)
      are emitted only when set on the record
    - setup_logging replaces its own handler instead of stacking a second one
    - httpx request lines stay at WARNING: every request builds a new Supabase
      client, so INFO would log each PostgREST call twice

Design Decisions:
    - stdlib logging only; setup_logging runs once from the FastAPI lifespan
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "error_code", "path", "table", "operation", "model",
    "card_count", "input_tokens", "output_tokens",
)
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack")
_HANDLER_NAME = "flashdeck"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: getattr(record, key)
            for key in _EXTRA_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the flashdeck handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
