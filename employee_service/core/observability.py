"""
Structured logging setup shared by the Employee API and the BFF.

Text format for local development, JSON lines for log shippers.
"""

import json
import logging
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("employee_id", "path", "upstream_status", "field"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger. Safe to call more than once."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_employee_service", False):
            root.removeHandler(existing)
    handler._employee_service = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
