"""Process-wide reference epoch.

Every stopwatch measures "uptime" against a :class:`ProcessEpoch`: a
clock paired with one time point read from it.  By default all
stopwatches share a single process epoch, captured lazily the first
time any stopwatch needs it and never changed afterwards.

The shared epoch is created under a lock with a double-checked fast
path, so concurrent first users observe the same value and later
readers never contend.  Code that wants isolation (tests, embedded
sub-systems) builds its own epoch with :meth:`ProcessEpoch.capture`
and hands it to :class:`~steadywatch.Stopwatch` explicitly.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from steadywatch._clock import ClockPort, MonotonicClock, PerfCounterClock
from steadywatch._errors import EpochAlreadyInitializedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessEpoch:
    """Immutable zero-point for uptime measurements.

    Attributes:
        clock: The clock source all readings are taken from.
        origin: A time point (nanoseconds) read from *clock*.
    """

    clock: ClockPort
    origin: int

    @classmethod
    def capture(cls, clock: ClockPort) -> ProcessEpoch:
        """Create an epoch at *clock*'s current time point."""
        return cls(clock=clock, origin=clock.now())

    def since(self, time_point: int) -> int:
        """Nanoseconds from the epoch origin to *time_point*."""
        return time_point - self.origin


_lock = threading.Lock()
_epoch: ProcessEpoch | None = None


def init_process_epoch(clock: ClockPort | None = None) -> ProcessEpoch:
    """Capture the process epoch on *clock* (default: monotonic).

    Call this early, before the first stopwatch is created, to bind
    the process epoch to a clock other than :class:`MonotonicClock`.

    Repeating the call with the same clock returns the existing epoch.
    "Same" means the same object, or any instance of the same stateless
    system source: two ``MonotonicClock()`` instances (for example from
    separate :func:`~steadywatch.clock_from_settings` calls) both match
    an epoch captured by a default :class:`~steadywatch.Stopwatch`.
    With ``clock=None`` any existing epoch is accepted.

    Raises:
        EpochAlreadyInitializedError: If the epoch already exists and is
            bound to a different clock.
    """
    global _epoch
    with _lock:
        if _epoch is None:
            _epoch = ProcessEpoch.capture(clock if clock is not None else MonotonicClock())
            logger.debug("Process epoch captured on %r at %d", _epoch.clock, _epoch.origin)
        elif clock is not None and not _same_source(clock, _epoch.clock):
            raise EpochAlreadyInitializedError(_epoch.clock, clock)
        return _epoch


def _same_source(requested: ClockPort, current: ClockPort) -> bool:
    if requested is current:
        return True
    return isinstance(requested, (MonotonicClock, PerfCounterClock)) and requested == current


def process_epoch() -> ProcessEpoch:
    """Return the shared process epoch, capturing it on first use."""
    epoch = _epoch
    if epoch is not None:
        return epoch
    return init_process_epoch()


def _reset_process_epoch() -> None:
    """Forget the shared epoch.  Test-only hook."""
    global _epoch
    with _lock:
        _epoch = None
