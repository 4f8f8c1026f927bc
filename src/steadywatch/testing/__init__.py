"""Public test-support utilities for steadywatch.

Provided symbols:

- :class:`FakeClock`: deterministic nanosecond clock for timing tests.
- :func:`make_settings`: factory for ``Settings`` without ``.env`` files.
"""

from steadywatch.testing._clock import FakeClock
from steadywatch.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "make_settings",
]
