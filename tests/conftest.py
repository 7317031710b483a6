"""
Pytest fixtures for the money kernel test suite.

The default rounding scale and the logging configuration are process-wide
state as far as a single test thread is concerned, so both are reset around
every test.
"""

import pytest

from money_kernel.domain.precision import reset_default_scale
from money_kernel.logging_config import LogContext, reset_logging


@pytest.fixture(autouse=True)
def _reset_kernel_state():
    """Restore the default scale and logging between tests."""
    reset_default_scale()
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()
    reset_default_scale()


@pytest.fixture
def usd():
    """Shorthand constructor for USD amounts."""
    from money_kernel.domain.money import Money

    def _make(value):
        return Money.create(value, "USD")

    return _make
