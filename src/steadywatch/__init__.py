"""steadywatch.

A lightweight stopwatch over monotonic clocks, with readouts converted
to units from nanoseconds through years.
"""

from importlib.metadata import PackageNotFoundError, version

from steadywatch._clock import (
    ClockPort,
    MonotonicClock,
    PerfCounterClock,
    clock_from_settings,
    resolve_clock,
)
from steadywatch._epoch import ProcessEpoch, init_process_epoch, process_epoch
from steadywatch._errors import (
    ClockSourceError,
    EpochAlreadyInitializedError,
    SteadywatchError,
)
from steadywatch._logging import JsonFormatter, configure_logging
from steadywatch._settings import ClockSettings, LoggingSettings, Settings
from steadywatch._stopwatch import Stopwatch
from steadywatch._units import (
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
    Duration,
    TimeUnit,
    breakdown,
    convert,
    to_nanoseconds,
)

try:
    # Prefer the generated version file (setuptools_scm at build time)
    from steadywatch._version import __version__
except ImportError:
    try:
        # Fallback to installed package metadata
        __version__ = version("steadywatch")
    except PackageNotFoundError:
        # Last resort fallback for editable installs without metadata
        __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Stopwatch
    "Stopwatch",
    # Clock
    "ClockPort",
    "MonotonicClock",
    "PerfCounterClock",
    "clock_from_settings",
    "resolve_clock",
    # Epoch
    "ProcessEpoch",
    "init_process_epoch",
    "process_epoch",
    # Units
    "DAYS_PER_WEEK",
    "DAYS_PER_YEAR",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "MONTHS_PER_YEAR",
    "SECONDS_PER_MINUTE",
    "Duration",
    "TimeUnit",
    "breakdown",
    "convert",
    "to_nanoseconds",
    # Errors
    "ClockSourceError",
    "EpochAlreadyInitializedError",
    "SteadywatchError",
    # Logging
    "JsonFormatter",
    "configure_logging",
    # Settings
    "ClockSettings",
    "LoggingSettings",
    "Settings",
]
