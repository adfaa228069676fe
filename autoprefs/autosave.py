"""Debounced autosave.

Bursts of changes (a dragged slider, a window being resized) collapse into a
single save once activity has stopped for a full window. Every change pushes
the deadline out again, so a continuous burst never saves mid-way.

The scheduler does no threading of its own: the host calls ``on_tick`` from
its update loop and any save happens synchronously inside that call.
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable

from .commands import SavePreferences
from .settings import DEBOUNCE_WINDOW, Settings, get_settings
from .store import Preferences

logger = logging.getLogger(__name__)


class AutosaveState(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"


class AutosaveScheduler:
    """Idle / Pending(deadline) state machine bound to one ``Preferences`` store.

    Every event accepts an explicit ``now`` (seconds, any monotonic origin);
    when omitted, ``clock`` supplies it.
    """

    def __init__(
        self,
        store: Preferences,
        *,
        window: float = DEBOUNCE_WINDOW,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if window < 0:
            raise ValueError(f"debounce window must be >= 0, got {window}")
        self._store = store
        self._window = window
        self._clock = clock
        self._deadline: float | None = None

    @classmethod
    def from_settings(cls, store: Preferences, settings: Settings | None = None) -> "AutosaveScheduler":
        settings = settings or get_settings()
        return cls(store, window=settings.debounce_seconds)

    @property
    def store(self) -> Preferences:
        return self._store

    @property
    def window(self) -> float:
        return self._window

    @property
    def state(self) -> AutosaveState:
        return AutosaveState.IDLE if self._deadline is None else AutosaveState.PENDING

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def _now(self, now: float | None) -> float:
        return self._clock() if now is None else now

    def on_mark_changed(self, now: float | None = None) -> None:
        """Arm, or re-arm, the timer for a full window from ``now``."""
        self._deadline = self._now(now) + self._window
        logger.debug("AUTOSAVE: pending until %.3f", self._deadline)

    def on_tick(self, now: float | None = None) -> list[str]:
        """Save changed files if the deadline has passed. Returns the names written."""
        if self._deadline is None or self._now(now) < self._deadline:
            return []
        self._deadline = None
        logger.debug("AUTOSAVE: deadline reached, saving changed files")
        return self._store.save_if_changed()

    def on_explicit_flush(self, mode: SavePreferences = SavePreferences.IF_CHANGED) -> list[str]:
        """Save immediately and cancel any pending deadline."""
        self._deadline = None
        if mode is SavePreferences.ALWAYS:
            return self._store.save_all()
        return self._store.save_if_changed()

    def on_stop(self) -> None:
        """Disarm without saving. Dirty files stay dirty for the next flush."""
        if self._deadline is not None:
            logger.debug("AUTOSAVE: stopped with a pending save")
        self._deadline = None
