"""Logging configuration shared by the library, CLI and server.

Modules log with ``logging.getLogger(__name__)`` and pass structured context
via ``extra={...}``. :func:`configure_logging` installs a single handler on
the root logger that renders those extras either as ``key=value`` pairs or
as one JSON object per line.
"""

from __future__ import annotations

import json
import logging
import sys

from divi2html.config import DIVI2HTML_LOG_FORMAT, DIVI2HTML_LOG_LEVEL

# Attributes every LogRecord carries; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}

_configured = False


def _extras(record: logging.LogRecord) -> dict[str, object]:
    return {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}


class KeyValueFormatter(logging.Formatter):
    """Human-readable lines with ``extra`` appended as ``key=value``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)-8s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " " + " ".join(f"{key}={value!r}" for key, value in extras.items())
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extras(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Install the divi2html handler on the root logger (idempotent)."""
    global _configured

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if (fmt or DIVI2HTML_LOG_FORMAT) == "json" else KeyValueFormatter())

    root = logging.getLogger()
    if _configured:
        for existing in [h for h in root.handlers if getattr(h, "_divi2html", False)]:
            root.removeHandler(existing)
    handler._divi2html = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel((level or DIVI2HTML_LOG_LEVEL).upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
