"""Monotonic clock port and system adapters.

Provides ClockPort (Protocol) plus the two concrete sources a stopwatch
can be bound to.

**Why monotonic?** ``time.monotonic_ns()`` and ``time.perf_counter_ns()``
are immune to NTP adjustments and manual system-clock changes, making
them suitable for measuring elapsed durations. Their epoch is arbitrary:
only *differences* between ``now()`` calls are meaningful (PEP 418).
Wall-clock sources (``time.time_ns()``) can jump backwards and are
deliberately not offered.

Time points are integer nanoseconds, so subtracting two of them yields
an exact signed nanosecond duration.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from steadywatch._errors import ClockSourceError

if TYPE_CHECKING:
    from steadywatch._settings import ClockSettings


@runtime_checkable
class ClockPort(Protocol):
    """Monotonic clock source for stopwatch measurements.

    The default implementation wraps ``time.monotonic_ns()``. Tests
    inject a deterministic fake clock for reproducible timing.
    """

    def now(self) -> int:
        """Return monotonic time in nanoseconds.

        Returns:
            An int of nanoseconds from an arbitrary origin. Only the
            *difference* between two calls is meaningful, and values
            never decrease within one process run.
        """
        ...


class MonotonicClock:
    """Production clock wrapping ``time.monotonic_ns()``.

    Satisfies :class:`ClockPort` via structural subtyping: no
    base-class inheritance required (PEP 544).

    Usage::

        clock = MonotonicClock()
        start = clock.now()
        # ... some work ...
        elapsed_ns = clock.now() - start
    """

    def now(self) -> int:
        """Return monotonic time in nanoseconds."""
        return time.monotonic_ns()

    def __repr__(self) -> str:
        return "MonotonicClock()"

    # Stateless: every instance reads the same source
    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))


class PerfCounterClock:
    """High-resolution clock wrapping ``time.perf_counter_ns()``.

    Also monotonic, but with the finest resolution the platform offers.
    Prefer it for micro-benchmarks of very short code sections.
    """

    def now(self) -> int:
        """Return the performance counter in nanoseconds."""
        return time.perf_counter_ns()

    def __repr__(self) -> str:
        return "PerfCounterClock()"

    # Stateless: every instance reads the same source
    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))


_SOURCES: dict[str, type[MonotonicClock] | type[PerfCounterClock]] = {
    "monotonic": MonotonicClock,
    "perf_counter": PerfCounterClock,
}


def resolve_clock(name: str) -> ClockPort:
    """Instantiate a clock source by its configuration name.

    Args:
        name: ``"monotonic"`` or ``"perf_counter"``.

    Raises:
        ClockSourceError: If *name* is not a known monotonic source.
    """
    try:
        source = _SOURCES[name]
    except KeyError:
        raise ClockSourceError(
            f"Unknown clock source {name!r}. Choose from: {', '.join(_SOURCES)}"
        ) from None
    return source()


def clock_from_settings(settings: ClockSettings) -> ClockPort:
    """Build the clock source selected by *settings*."""
    return resolve_clock(settings.source)
