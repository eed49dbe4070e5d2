import asyncio
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import timedelta

_CTX = ContextVar[float | None]('Deadline', default=None)


@contextmanager
def timeout_context(timeout: timedelta | float):
    """
    Context manager for limiting the time of every request issued within.

    The deadline is shared: nested requests consume the same time budget.
    Must be entered from a running event loop.
    """
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else timeout
    deadline = asyncio.get_running_loop().time() + seconds
    current = _CTX.get()
    if current is not None:
        deadline = min(deadline, current)

    token = _CTX.set(deadline)
    try:
        yield
    finally:
        _CTX.reset(token)


def context_deadline() -> float | None:
    """Get the ambient deadline in event loop time, if any."""
    return _CTX.get()
