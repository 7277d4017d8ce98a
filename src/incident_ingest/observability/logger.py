"""Logging helpers for incident ingestion."""
from __future__ import annotations

import json
import logging
from logging import LogRecord
from pathlib import Path
from typing import Any, Dict

STRUCTURED_FIELDS = ("row_index", "reason", "path", "accepted", "rejected")


class JsonFormatter(logging.Formatter):
    """Formats log records as single line JSON objects."""

    def format(self, record: LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        for name in STRUCTURED_FIELDS:
            if name in record.__dict__:
                payload[name] = record.__dict__[name]
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(log_path: str | Path | None = None, level: str = "INFO") -> None:
    """Configure root logger to use JSON formatting."""
    handler: logging.Handler
    if log_path:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), handlers=[handler], force=True)


__all__ = ["configure_logging", "JsonFormatter"]
