"""Discrete save/timer requests a host application sends to the engine.

The host queues these from wherever a preference is edited and delivers
them through ``dispatch`` on its own update loop, so UI code never calls
into storage directly.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .autosave import AutosaveScheduler


class SavePreferences(enum.Enum):
    """Save now."""

    # Only files whose content differs from what was last persisted.
    IF_CHANGED = "if_changed"
    # Every resident file, unconditionally.
    ALWAYS = "always"


class TimerControl(enum.Enum):
    """Drive the autosave debounce timer."""

    # Something changed: (re)arm the timer for a full debounce window.
    START = "start"
    # Disarm without saving; dirty files stay dirty.
    STOP = "stop"


Request = Union[SavePreferences, TimerControl]


def dispatch(request: Request, scheduler: "AutosaveScheduler", *, now: float | None = None) -> list[str]:
    """Apply one request. Returns the names of files written (empty for timer requests)."""
    if isinstance(request, SavePreferences):
        return scheduler.on_explicit_flush(request)
    if request is TimerControl.START:
        scheduler.on_mark_changed(now)
        return []
    if request is TimerControl.STOP:
        scheduler.on_stop()
        return []
    raise TypeError(f"unknown preferences request: {request!r}")
