"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

# The steadywatch testing plugin is registered via a ``pytest11`` entry
# point (pyproject.toml) for external consumers.  In our own test
# suite we disable it (``-p no:steadywatch``) and load explicitly here
# instead, so the steadywatch import chain is measured by coverage.
pytest_plugins = ["steadywatch.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (real monotonic clock)"
    )


@pytest.fixture
def fresh_process_epoch() -> Iterator[None]:
    """Forget the shared process epoch before and after the test."""
    from steadywatch._epoch import _reset_process_epoch

    _reset_process_epoch()
    yield
    _reset_process_epoch()
