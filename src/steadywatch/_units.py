"""Time units and duration conversion.

Durations are canonically integer nanoseconds.  :func:`convert` maps a
duration into one of ten units by chained division:

    ns → µs → ms → s   (÷ 1000 each)
    s → min → h → d    (÷ 60, ÷ 60, ÷ 24)
    d → wk             (÷ 7)
    d → yr → mo        (÷ 365.24, ÷ 12)

Weeks, months and years use constant average ratios.  They are meant
for coarse human-readable reporting, not calendar arithmetic: no leap
years, no variable month lengths.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from enum import IntEnum
from typing import TypeVar

T = TypeVar("T")

Duration = int | timedelta

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
DAYS_PER_YEAR = 365.24
MONTHS_PER_YEAR = 12

_NS_PER_US = 1000
_NS_PER_SECOND = 1_000_000_000
_SECONDS_PER_DAY = 86_400


class TimeUnit(IntEnum):
    """Units a duration can be expressed in.

    The ordinal order is fixed: :func:`convert` indexes its table of
    derived values by member value.
    """

    NANOSECONDS = 0
    MICROSECONDS = 1
    MILLISECONDS = 2
    SECONDS = 3
    MINUTES = 4
    HOURS = 5
    DAYS = 6
    WEEKS = 7
    MONTHS = 8
    YEARS = 9

    @property
    def symbol(self) -> str:
        """Short unit suffix for display (``"ms"``, ``"h"``, ...)."""
        return _SYMBOLS[self]


_SYMBOLS = ("ns", "us", "ms", "s", "min", "h", "d", "wk", "mo", "yr")


def to_nanoseconds(duration: Duration) -> int:
    """Return *duration* as a signed integer count of nanoseconds.

    ``timedelta`` values are converted exactly from their day, second
    and microsecond fields.

    Raises:
        TypeError: If *duration* is neither ``int`` nor ``timedelta``.
    """
    if isinstance(duration, timedelta):
        seconds = duration.days * _SECONDS_PER_DAY + duration.seconds
        return seconds * _NS_PER_SECOND + duration.microseconds * _NS_PER_US
    # bool is an int subclass but never a meaningful duration
    if isinstance(duration, int) and not isinstance(duration, bool):
        return duration
    raise TypeError(
        f"duration must be int nanoseconds or timedelta, not {type(duration).__name__}"
    )


def _derive(nanos: int) -> tuple[float, ...]:
    """Every unit's value for *nanos*, indexed by :class:`TimeUnit`."""
    micros = nanos / 1000.0
    millis = micros / 1000.0
    secs = millis / 1000.0
    mins = secs / SECONDS_PER_MINUTE
    hours = mins / MINUTES_PER_HOUR
    days = hours / HOURS_PER_DAY
    weeks = days / DAYS_PER_WEEK
    years = days / DAYS_PER_YEAR
    months = years / MONTHS_PER_YEAR
    return (nanos, micros, millis, secs, mins, hours, days, weeks, months, years)


def convert(
    duration: Duration,
    unit: TimeUnit | int = TimeUnit.NANOSECONDS,
    return_type: Callable[[float], T] = float,  # type: ignore[assignment]
) -> T:
    """Express *duration* in *unit*, cast with *return_type*.

    Args:
        duration: Integer nanoseconds or a ``timedelta``.
        unit: Target unit.  A selector ``TimeUnit`` does not recognise
            falls back to the raw nanosecond count instead of raising.
        return_type: Numeric type (or any one-argument callable) applied
            to the result.  Integral types truncate; precision loss is
            the caller's concern.

    Example::

        >>> convert(60_000_000_000, TimeUnit.MINUTES)
        1.0
        >>> convert(1_500_000, TimeUnit.MILLISECONDS, int)
        1
    """
    nanos = to_nanoseconds(duration)
    try:
        index = TimeUnit(unit)
    except ValueError:
        return return_type(nanos)
    return return_type(_derive(nanos)[index])


def breakdown(
    duration: Duration,
    return_type: Callable[[float], T] = float,  # type: ignore[assignment]
) -> dict[TimeUnit, T]:
    """Return *duration* expressed in every unit, in ordinal order."""
    values = _derive(to_nanoseconds(duration))
    return {unit: return_type(values[unit]) for unit in TimeUnit}
