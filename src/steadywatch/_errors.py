"""Exception taxonomy for steadywatch.

The measurement path itself never fails: clock reads are assumed
infallible and unit conversion falls back to raw nanoseconds instead of
raising.  The exceptions here cover *wiring* mistakes only:

- selecting a clock source that does not exist, and
- re-binding the process epoch to a different clock after it has
  already been captured.

An exception raised by a clock source's ``now()`` is not wrapped.  It
propagates unchanged to the caller, because a stopwatch without a
working clock has no meaningful degraded behaviour.
"""

from __future__ import annotations


class SteadywatchError(Exception):
    """Base class for all steadywatch errors."""


class ClockSourceError(SteadywatchError, ValueError):
    """Raised when a clock source name cannot be resolved."""


class EpochAlreadyInitializedError(SteadywatchError, RuntimeError):
    """Raised when the process epoch is re-initialised with another clock.

    The process epoch is written exactly once.  Calling
    :func:`~steadywatch.init_process_epoch` again with the *same* clock
    object is a no-op; any other clock is rejected.

    Attributes:
        current: The clock the existing epoch is bound to.
        requested: The clock the caller attempted to bind.
    """

    def __init__(self, current: object, requested: object) -> None:
        super().__init__(
            f"Process epoch already initialised with {current!r}; "
            f"cannot rebind to {requested!r}"
        )
        self.current = current
        self.requested = requested
