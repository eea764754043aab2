"""Timer system - non-blocking timers polled from the frame loop."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from itertools import count

from .logging import log, now_ms


@dataclass
class Timer:
    """A one-shot timer. `token` identifies it for cancellation."""
    token: int
    start_ms: float
    duration_ms: float
    tag: str = "TIMER"
    cancelled: bool = False
    fired: bool = False

    @property
    def due_ms(self) -> float:
        return self.start_ms + self.duration_ms

    def progress(self, at_ms: float) -> float:
        """Linear progress (0.0 to 1.0)."""
        if self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(1.0, (at_ms - self.start_ms) / self.duration_ms))

    def is_due(self, at_ms: float) -> bool:
        return not self.cancelled and not self.fired and at_ms >= self.due_ms


class TimerController:
    """Owns pending timers and fires them when the clock passes their due time.

    Every timer fires exactly once unless cancelled. A callback that raises
    is logged; it never keeps the timer pending.
    """

    def __init__(self, clock: Callable[[], float] = now_ms):
        self._clock = clock
        self._timers: List[Timer] = []
        self._callbacks: Dict[int, Callable[[Timer], None]] = {}
        self._tokens = count(1)

    @property
    def has_pending(self) -> bool:
        return len(self._timers) > 0

    def get(self, token: int) -> Optional[Timer]:
        for timer in self._timers:
            if timer.token == token:
                return timer
        return None

    def start(self, duration_ms: float, on_fire: Callable[[Timer], None],
              tag: str = "TIMER") -> Timer:
        """Schedule on_fire to run once duration_ms from now."""
        timer = Timer(token=next(self._tokens), start_ms=self._clock(),
                      duration_ms=duration_ms, tag=tag)
        self._timers.append(timer)
        self._callbacks[timer.token] = on_fire
        return timer

    def cancel(self, token: int) -> bool:
        """Cancel a pending timer. Returns True if it was pending."""
        timer = self.get(token)
        if timer is None:
            return False
        timer.cancelled = True
        self._timers = [t for t in self._timers if t.token != token]
        self._callbacks.pop(token, None)
        log(f"[{timer.tag}] Cancelled timer #{token}")
        return True

    def cancel_all(self) -> None:
        for timer in self._timers:
            timer.cancelled = True
        self._timers.clear()
        self._callbacks.clear()

    def update(self) -> List[Timer]:
        """Fire all due timers in scheduling order and return them."""
        at = self._clock()
        fired = []
        still_pending = []

        for timer in self._timers:
            if timer.is_due(at):
                fired.append(timer)
            else:
                still_pending.append(timer)
        self._timers = still_pending

        for timer in fired:
            timer.fired = True
            callback = self._callbacks.pop(timer.token, None)
            if callback:
                try:
                    callback(timer)
                except Exception as e:
                    log(f"[{timer.tag}][ERR] Callback failed for timer #{timer.token}: {e!r}")
        return fired
