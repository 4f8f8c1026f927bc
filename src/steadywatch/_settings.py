"""Configuration via pydantic-settings.

Configuration is loaded from environment variables and/or ``.env``
files only when the embedding program instantiates
:class:`Settings`.  Nothing is read at import time, so the default
clock binding stays :class:`~steadywatch.MonotonicClock` unless the
program opts in.

Nested models use ``__`` as the delimiter in env var names, e.g.
``STEADYWATCH_CLOCK__SOURCE=perf_counter``.

The schema covers two concerns:

* **Clock**: which monotonic source backs the process epoch.
* **Logging**: level, format, optional file sink, rotation.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings: nested via composition)
# -------------------------------------------------------------------


class ClockSettings(BaseModel):
    """Clock source selection.

    Environment variables (with ``__`` nesting)::

        STEADYWATCH_CLOCK__SOURCE=perf_counter
    """

    source: Literal["monotonic", "perf_counter"] = Field(
        default="monotonic",
        description=(
            "Monotonic source backing the process epoch. "
            "'monotonic' wraps time.monotonic_ns(); "
            "'perf_counter' wraps time.perf_counter_ns()."
        ),
    )


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).  When
    ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"text"`` (default): human-readable timestamped lines.
    - ``"json"``: structured JSON lines for log aggregators.  Lap
      records from :meth:`~steadywatch.Stopwatch.log_elapsed` carry
      their measurement as separate fields.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format: 'json' lines or human-readable 'text'.",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for programs embedding steadywatch.

    Example ``.env``::

        STEADYWATCH_CLOCK__SOURCE=perf_counter
        STEADYWATCH_LOGGING__LEVEL=DEBUG
        STEADYWATCH_LOGGING__FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="STEADYWATCH_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    """``extra="ignore"`` lets a shared ``.env`` carry keys for other
    components without failing validation here."""

    clock: ClockSettings = Field(
        default_factory=ClockSettings,
        description="Clock source selection.",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
