"""
JSONL logging bootstrap.
Routes autoloader diagnostics to a single canonical JSONL sink.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

DEFAULT_PATH = os.environ.get("NAMESPACE_AUTOLOAD_LOG_PATH", "./namespace-autoload.log.jsonl")
DEFAULT_LEVEL = os.environ.get("NAMESPACE_AUTOLOAD_LOG_LEVEL", "INFO").upper()

_RESERVED = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonlHandler(logging.Handler):
    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def format_record(self, record: logging.LogRecord) -> dict:
        base = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "schema": {"name": "namespace_autoload.log", "ver": "1.0.0"},
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Fields passed through ``extra=``
        for k, v in record.__dict__.items():
            if k not in _RESERVED:
                base.setdefault(k, v)
        if record.exc_info:
            base["exc"] = logging.Formatter().formatException(record.exc_info)
        return base

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = json.dumps(self.format_record(record), ensure_ascii=False, default=str)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str | None = None, level: str | None = None, logger_name: str = "") -> JsonlHandler:
    """Attach a JsonlHandler, replacing any previous one on the same logger.

    Args:
        path: Output file (default: NAMESPACE_AUTOLOAD_LOG_PATH)
        level: Level name (default: NAMESPACE_AUTOLOAD_LOG_LEVEL)
        logger_name: Logger to configure (default: root)
    """
    path = path or DEFAULT_PATH
    level = (level or DEFAULT_LEVEL).upper()
    target = logging.getLogger(logger_name)
    target.setLevel(getattr(logging, level, logging.INFO))
    for h in list(target.handlers):
        if isinstance(h, JsonlHandler):
            target.removeHandler(h)
            h.close()
    handler = JsonlHandler(path)
    target.addHandler(handler)
    return handler
