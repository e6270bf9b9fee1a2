from __future__ import annotations

from contextlib import contextmanager


@contextmanager
def blocked_signals(obj):
    """Silence a QObject's signals, restoring the previous blocked state on exit."""
    previous = obj.blockSignals(True)
    try:
        yield obj
    finally:
        obj.blockSignals(previous)
