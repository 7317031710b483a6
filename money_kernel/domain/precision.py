"""
Precision -- default rounding scale for decimal operations.

Responsibility:
    Holds the number of fractional digits used by rounding operations when
    the caller does not pass an explicit scale, and by division, which always
    rounds.

Architecture position:
    Kernel > Domain -- pure, no I/O apart from a log line on change.
    Read by DecimalNumber and Money at call time, never cached at
    construction time.

Invariants enforced:
    - The default scale is always a non-negative int.
    - set_default_scale() reconfigures the process-wide base value under a
      lock; every thread, including threads started later, observes it.
    - default_scale() is a scoped override held in a ContextVar: it applies
      only to the current thread or asyncio task and takes precedence over
      the base value until the block exits.

Failure modes:
    - InvalidScaleError when a negative, non-integer or bool scale is set.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from money_kernel.exceptions import InvalidScaleError
from money_kernel.logging_config import get_logger

logger = get_logger("domain.precision")

DEFAULT_SCALE: int = 20

_base_scale: int = DEFAULT_SCALE
_lock = threading.Lock()

_scoped_scale: ContextVar[int | None] = ContextVar("money_scoped_scale", default=None)


def validate_scale(scale: Any) -> int:
    """Return *scale* if it is a non-negative int, else raise InvalidScaleError."""
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
        raise InvalidScaleError(scale)
    return scale


def get_default_scale() -> int:
    """Scoped override if one is active, else the process-wide default."""
    scoped = _scoped_scale.get()
    if scoped is not None:
        return scoped
    return _base_scale


def resolve_scale(scale: int | None) -> int:
    """Resolve an optional explicit scale against the current default."""
    if scale is None:
        return get_default_scale()
    return validate_scale(scale)


def set_default_scale(scale: int) -> None:
    """
    Reconfigure the process-wide default scale.

    Active default_scale() blocks keep their override until they exit.

    Raises:
        InvalidScaleError: If scale is not a non-negative int.
    """
    global _base_scale
    validate_scale(scale)
    with _lock:
        previous = _base_scale
        _base_scale = scale
    logger.info(
        "default_scale_changed",
        extra={"previous_scale": previous, "default_scale": scale},
    )


def reset_default_scale() -> None:
    """Restore the documented default (20 fractional digits)."""
    global _base_scale
    with _lock:
        _base_scale = DEFAULT_SCALE
    _scoped_scale.set(None)


@contextmanager
def default_scale(scale: int) -> Iterator[int]:
    """
    Temporarily use *scale* as the default inside a ``with`` block.

    The override is local to the current thread or task. The previous value
    is restored on exit, even if the block raises.
    """
    token = _scoped_scale.set(validate_scale(scale))
    try:
        yield scale
    finally:
        _scoped_scale.reset(token)
