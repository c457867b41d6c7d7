"""Logging configuration.

- Plain console logs by default, structured JSON logs on request
- Library modules only call logging.getLogger(__name__); the CLI calls
  setup_logging() once
- stdlib only
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from .config import normalize_log_format


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "severity": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Structured fields passed via `extra=`
        for key in ("identifier", "reason", "position"):
            v = getattr(record, key, None)
            if v is not None:
                payload[key] = v

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(*, log_level: str = "WARNING", log_format: str = "console") -> None:
    """Configure root logging.

    Idempotent: safe to call multiple times.
    """

    level = getattr(logging, (log_level or "WARNING").upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    if normalize_log_format(log_format) == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    root.addHandler(handler)
