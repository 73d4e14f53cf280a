# fastlonn/core/logging_config.py
"""
Logging for Fastlønn.

Development logs coloured lines to stdout and plain lines to logs/app.log.
Production writes one JSON object per line to logs/app.log and
logs/error.log; only warnings reach stdout.

Structured data is passed with ``extra={"extra_fields": {...}}`` and ends
up as top-level keys in the JSON output.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path

from fastlonn.core.config import IS_PRODUCTION, LOG_DIR_NAME, LOG_LEVEL

LOG_DIR = Path(LOG_DIR_NAME)
APP_LOG_FILE = LOG_DIR / "app.log"
ERROR_LOG_FILE = LOG_DIR / "error.log"

CONSOLE_FORMAT = "%(levelname)-8s %(asctime)s [%(name)s] %(message)s"
FILE_FORMAT = "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers and the level they are capped at.
_LIBRARY_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.INFO,
    "uvicorn.error": logging.INFO,
    "watchfiles": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "multipart": logging.WARNING,
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        payload.update(getattr(record, "extra_fields", {}))
        return json.dumps(payload, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Colours the level name with ANSI codes."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _rotating(path: Path, level: int, formatter: logging.Formatter, max_bytes: int, backups: int):
    handler = logging.handlers.RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _stdout(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _handlers() -> list[logging.Handler]:
    if IS_PRODUCTION:
        json_formatter = JSONFormatter()
        return [
            _rotating(APP_LOG_FILE, logging.INFO, json_formatter, 10_000_000, 5),
            _rotating(ERROR_LOG_FILE, logging.ERROR, json_formatter, 10_000_000, 10),
            _stdout(logging.WARNING, json_formatter),
        ]

    console_level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(console_level, int):
        console_level = logging.DEBUG
    return [
        _stdout(console_level, ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT)),
        _rotating(APP_LOG_FILE, logging.DEBUG, logging.Formatter(FILE_FORMAT), 5_000_000, 2),
    ]


def setup_logging() -> None:
    """
    Install the handlers on the root logger.

    Safe to call more than once; earlier handlers are replaced.
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.INFO if IS_PRODUCTION else logging.DEBUG)
    root.handlers.clear()
    for handler in _handlers():
        root.addHandler(handler)

    for name, level in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"extra_fields": {"log_dir": str(LOG_DIR.absolute()), "production": IS_PRODUCTION}},
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
