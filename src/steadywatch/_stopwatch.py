"""Stopwatch measuring elapsed time against a process epoch.

A :class:`Stopwatch` remembers one reference time point, taken when it
is created or last reset ("tared").  All readings are integer
nanoseconds:

    since_epoch()  reference   − epoch origin
    uptime()       clock.now() − epoch origin
    elapsed()      uptime()    − since_epoch()   (= clock.now() − reference)

Each reading has an ``*_in`` variant that converts through
:func:`~steadywatch.convert`.

**Thread safety.**  Reads are pure apart from one clock sample, but
the reference point is not synchronised.  Sharing an instance between
threads that call :meth:`Stopwatch.reset` while others read it requires
external locking.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from steadywatch._clock import ClockPort
from steadywatch._epoch import ProcessEpoch, process_epoch
from steadywatch._units import TimeUnit, convert

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Stopwatch:
    """Per-instance stopwatch over a monotonic clock.

    Args:
        epoch: Zero-point for uptime readings.  Its clock is the one the
            stopwatch samples.  Defaults to the shared process epoch.

    Usage::

        sw = Stopwatch()
        do_work()
        ns = sw.elapsed()
        ms = sw.elapsed_in(TimeUnit.MILLISECONDS)
    """

    __slots__ = ("_epoch", "_reference")

    convert = staticmethod(convert)

    def __init__(self, epoch: ProcessEpoch | None = None) -> None:
        self._epoch = epoch if epoch is not None else process_epoch()
        self._reference = self._epoch.clock.now()

    @property
    def epoch(self) -> ProcessEpoch:
        return self._epoch

    @property
    def clock(self) -> ClockPort:
        return self._epoch.clock

    @property
    def reference(self) -> int:
        """Time point captured at construction or the last reset."""
        return self._reference

    # -- raw readings ---------------------------------------------------------

    def since_epoch(self) -> int:
        """Nanoseconds between the epoch and this stopwatch's reference."""
        return self._epoch.since(self._reference)

    def uptime(self) -> int:
        """Nanoseconds between the epoch and now."""
        return self._epoch.since(self._epoch.clock.now())

    def elapsed(self, tare: bool = False) -> int:
        """Nanoseconds since the reference point.

        Args:
            tare: Reset the stopwatch after reading.  The returned value
                is measured against the old reference.  The reset takes
                its own clock sample, so the short gap between the two
                reads belongs to neither interval.
        """
        result = self.uptime() - self.since_epoch()
        if tare:
            self.reset()
        return result

    def reset(self) -> None:
        """Move the reference point to now."""
        self._reference = self._epoch.clock.now()
        logger.debug("Stopwatch reset at %d ns after epoch", self.since_epoch())

    tare = reset

    # -- converted readings ---------------------------------------------------

    def elapsed_in(
        self,
        unit: TimeUnit | int = TimeUnit.NANOSECONDS,
        *,
        tare: bool = False,
        return_type: Callable[[float], T] = float,  # type: ignore[assignment]
    ) -> T:
        """:meth:`elapsed` expressed in *unit*."""
        return convert(self.elapsed(tare), unit, return_type)

    def since_epoch_in(
        self,
        unit: TimeUnit | int = TimeUnit.NANOSECONDS,
        *,
        return_type: Callable[[float], T] = float,  # type: ignore[assignment]
    ) -> T:
        """:meth:`since_epoch` expressed in *unit*."""
        return convert(self.since_epoch(), unit, return_type)

    def uptime_in(
        self,
        unit: TimeUnit | int = TimeUnit.NANOSECONDS,
        *,
        return_type: Callable[[float], T] = float,  # type: ignore[assignment]
    ) -> T:
        """:meth:`uptime` expressed in *unit*."""
        return convert(self.uptime(), unit, return_type)

    def log_elapsed(
        self,
        label: str,
        unit: TimeUnit | int = TimeUnit.MILLISECONDS,
        *,
        tare: bool = False,
        level: int = logging.INFO,
    ) -> int:
        """Log the elapsed time under *label* and return it in nanoseconds.

        The record carries ``elapsed_ns``, ``value`` and ``unit`` as
        extra attributes, which :class:`~steadywatch.JsonFormatter`
        emits as fields.  A *unit* ``TimeUnit`` does not recognise is
        reported in nanoseconds, as :func:`~steadywatch.convert` does.
        """
        try:
            unit = TimeUnit(unit)
        except ValueError:
            unit = TimeUnit.NANOSECONDS
        elapsed_ns = self.elapsed(tare)
        value = convert(elapsed_ns, unit)
        logger.log(
            level,
            "%s took %.3f %s",
            label,
            value,
            unit.symbol,
            extra={"elapsed_ns": elapsed_ns, "value": value, "unit": unit.symbol},
        )
        return elapsed_ns

    def __repr__(self) -> str:
        return f"Stopwatch(clock={self.clock!r}, since_epoch={self.since_epoch()})"
