"""Debouncer - coalesces bursts of triggers into one delayed action."""

from __future__ import annotations
from typing import Callable, Optional

from .animation import Timer, TimerController
from .logging import log


class Debouncer:
    """Runs `action` once, `wait_ms` after the last `trigger()` in a burst.

    Each trigger cancels the pending timer and starts a new one, so
    intermediate triggers are discarded.
    """

    def __init__(self, timers: TimerController, wait_ms: float,
                 action: Callable[[], None], tag: str = "DEBOUNCE"):
        self._timers = timers
        self._wait_ms = wait_ms
        self._action = action
        self._tag = tag
        self._pending: Optional[Timer] = None
        self.coalesced = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def trigger(self) -> None:
        if self._pending is not None:
            self._timers.cancel(self._pending.token)
            self.coalesced += 1
        self._pending = self._timers.start(self._wait_ms, self._fire, tag=self._tag)

    def cancel(self) -> None:
        if self._pending is not None:
            self._timers.cancel(self._pending.token)
            self._pending = None

    def _fire(self, timer: Timer) -> None:
        self._pending = None
        log(f"[{self._tag}] Fired after {self.coalesced + 1} trigger(s)")
        self.coalesced = 0
        self._action()
