"""Structured JSON log formatter and logging configuration.

steadywatch itself only *emits* records: a debug line when the process
epoch is captured or a stopwatch is reset, and one record per
:meth:`~steadywatch.Stopwatch.log_elapsed` call.  Routing them is the
embedding program's job; :func:`configure_logging` is a convenience for
programs that have no logging setup of their own.

:class:`JsonFormatter` emits one JSON object per record on a single
line (JSON Lines / NDJSON).  Lap records keep their measurement as
separate ``elapsed_ns``, ``value`` and ``unit`` fields so aggregators
can chart them without parsing the message.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from steadywatch._settings import LoggingSettings

_ONE_MB = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Extra attributes set by Stopwatch.log_elapsed
_MEASUREMENT_FIELDS = ("elapsed_ns", "value", "unit")


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects (NDJSON).

    Each record produces a JSON object with these fields:

    - ``timestamp``: ISO 8601 with timezone (always UTC)
    - ``level``: Python log level name
    - ``logger``: dotted logger name
    - ``message``: the formatted log message
    - ``service``: application name for log correlation
    - ``version``: application version (omitted when empty)
    - ``elapsed_ns`` / ``value`` / ``unit``: measurement fields
      (only present on stopwatch lap records)
    - ``exception``: formatted traceback (only present when
      an exception is logged)
    - ``stack_info``: stack trace (only present when
      ``stack_info=True``)

    Args:
        service: Application name included in every log line.
        version: Application version string.  Omitted from
            output when empty.
    """

    def __init__(
        self,
        *,
        service: str = "",
        version: str = "",
    ) -> None:
        super().__init__()
        self._service = service
        self._version = version

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a single-line JSON string."""
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }

        if self._version:
            entry["version"] = self._version

        for name in _MEASUREMENT_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


def configure_logging(
    settings: LoggingSettings,
    *,
    service: str = "steadywatch",
    version: str = "",
) -> None:
    """Configure the root logger from settings.

    Clears any existing handlers on the root logger, then installs a
    :class:`logging.StreamHandler` writing to ``stderr``.  When
    ``settings.file`` is set, a
    :class:`~logging.handlers.RotatingFileHandler` is added as well
    (``settings.max_file_size_mb`` per file, ``settings.backup_count``
    generations).

    Args:
        settings: Logging configuration (level, format, file).
        service: Name passed to :class:`JsonFormatter`.
        version: Version passed to :class:`JsonFormatter`.
    """
    root = logging.getLogger()

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if settings.format == "json":
        formatter: logging.Formatter = JsonFormatter(service=service, version=version)
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if settings.file is not None:
        file_handler = RotatingFileHandler(
            settings.file,
            maxBytes=settings.max_file_size_mb * _ONE_MB,
            backupCount=settings.backup_count,
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.setLevel(settings.level)
