"""Shared logging setup for the CLI and embedding applications."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from ..domain.configuration import LoggingOptions

LOGGER_NAME = "format_converter"
PLAIN_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# LogRecord attributes that are not user-supplied ``extra`` fields.
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ``extra`` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED or key in payload:
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logger(options: LoggingOptions | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again only updates the level and formatter.
    """
    options = options or LoggingOptions()
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.getLevelName(options.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = getattr(logger, "_format_converter_handler", None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        logger.addHandler(handler)
        logger._format_converter_handler = handler  # type: ignore[attr-defined]

    handler.setFormatter(JsonFormatter() if options.json_mode else logging.Formatter(PLAIN_FORMAT))
    logger.setLevel(level)
    return logger


__all__ = ["JsonFormatter", "configure_logger", "LOGGER_NAME"]
