"""Structured Logging: one JSON object per record, configured once per process.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Request-scoped extras (user_id, puzzle_id, open_id, error_code, path)
      appear only when the caller passed them via ``extra=``
    - setup_logging is idempotent: re-running it (one lifespan per test app)
      replaces its own handler instead of stacking another

Design Decisions:
    - stdlib logging + json: the extras are a fixed, small set
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("user_id", "puzzle_id", "open_id", "error_code", "path")
HUMAN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class _AppHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _AppHandler)]:
        root.removeHandler(existing)

    handler = _AppHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(HUMAN_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
