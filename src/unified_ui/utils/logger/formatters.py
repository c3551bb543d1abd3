"""
Record formatters: a column layout for people and JSON Lines for tools.

Widgets tag records with ``extra={"widget": name}``; both formatters pick the
tag up when present.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

SEPARATOR = " | "


def _utc_time(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _widget_tag(record: logging.LogRecord) -> Optional[str]:
    return getattr(record, "widget", None) or None


class HumanFormatter(logging.Formatter):
    """One line per record, pipe separated.

    Columns: time (UTC, milliseconds), level, logger, file:line, message.

        2024-01-15 14:23:45.123 | DEBUG | unified_ui.notification | notification.py:88 | Timer armed [widget=toast]

    Tracebacks follow on the next lines.
    """

    LEVEL_WIDTH = 5
    NAME_WIDTH = 24

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        tag = _widget_tag(record)
        if tag:
            message += f" [widget={tag}]"

        columns = [
            _utc_time(record).strftime("%Y-%m-%d %H:%M:%S")
            + f".{int(record.msecs):03d}",
            f"{record.levelname:<{self.LEVEL_WIDTH}}",
            self.fit_name(record.name),
            f"{record.filename}:{record.lineno}",
            message,
        ]
        line = SEPARATOR.join(columns)

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line

    def fit_name(self, name: str) -> str:
        """Pad to NAME_WIDTH; long names keep their head and tail segments."""
        width = self.NAME_WIDTH
        if len(name) > width:
            head, _, tail = name.partition(".")
            tail = tail.rsplit(".", 1)[-1]
            name = f"{head}...{tail}" if tail else name
            if len(name) > width:
                return name[: width - 3] + "..."
        return name.ljust(width)


class JsonFormatter(logging.Formatter):
    """JSON Lines output, one object per record.

    Keys: timestamp (ISO 8601), level, logger, message, file, line, function,
    plus ``widget`` when tagged and ``exception`` when an error is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": _utc_time(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }
        tag = _widget_tag(record)
        if tag:
            payload["widget"] = tag
        if record.exc_info:
            payload["exception"] = self.describe_exception(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)

    def describe_exception(self, exc_info) -> dict[str, Any]:
        exc_type, exc_value, _ = exc_info
        lines = self.formatException(exc_info).splitlines()
        return {
            "type": exc_type.__name__ if exc_type else None,
            "message": str(exc_value) if exc_value is not None else None,
            "traceback": [line for line in lines if line.strip()],
        }
