"""Transition scheduler - runs one slide transition at a time.

A transition is leave -> index swap -> enter -> settle -> unlock. The
unlock is driven only by the settle timer, never by a listener, so a
listener that raises or a missing slide can not leave the deck locked.
"""

from __future__ import annotations
from typing import Optional

from .animation import Timer, TimerController
from .listeners import ListenerSet
from .logging import log
from .state.navigation import NavigationState
from .types import TransitionPhase, TransitionResult


class TransitionScheduler:
    """Sole writer of NavigationState."""

    def __init__(self, state: NavigationState, timers: TimerController,
                 settle_delay_ms: float, listeners: Optional[ListenerSet] = None):
        self._state = state
        self._timers = timers
        self._settle_delay_ms = settle_delay_ms
        self.listeners = listeners if listeners is not None else ListenerSet("NAV")
        self._settle: Optional[Timer] = None

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current(self) -> int:
        return self._state.current

    @property
    def total(self) -> int:
        return self._state.total

    @property
    def locked(self) -> bool:
        return self._state.locked

    @property
    def phase(self) -> TransitionPhase:
        return TransitionPhase.TRANSITIONING if self._state.locked else TransitionPhase.IDLE

    @property
    def settle_timer(self) -> Optional[Timer]:
        """The in-flight transition's settle timer, if any."""
        return self._settle

    def check(self, target: int) -> TransitionResult:
        """Classify a request without acting on it."""
        if self._state.locked:
            return TransitionResult.LOCKED
        if target == self._state.current:
            return TransitionResult.ALREADY_THERE
        if not self._state.in_range(target):
            return TransitionResult.BOUNDARY
        return TransitionResult.ACCEPTED

    def request_transition(self, target: int) -> TransitionResult:
        """Start a transition to target, or report why not."""
        result = self.check(target)
        if not result.accepted:
            log(f"[NAV] Rejected {self._state.current} -> {target}: {result.name}")
            self.listeners.emit("on_rejected", result)
            return result

        state = self._state
        from_index = state.current
        state.locked = True
        self.listeners.emit("on_transition_start", from_index)
        state.current = target
        self.listeners.emit("on_will_enter", target)
        self._settle = self._timers.start(self._settle_delay_ms, self._on_settled, tag="NAV")
        log(f"[NAV] {from_index} -> {target} (settle #{self._settle.token} "
            f"in {self._settle_delay_ms:.0f}ms)")
        return result

    def next(self) -> TransitionResult:
        return self.request_transition(self._state.current + 1)

    def previous(self) -> TransitionResult:
        return self.request_transition(self._state.current - 1)

    def go_to(self, index: int) -> TransitionResult:
        return self.request_transition(index)

    def _on_settled(self, timer: Timer) -> None:
        if self._settle is None or timer.token != self._settle.token:
            log(f"[NAV][ERR] Ignoring settle for stale timer #{timer.token}")
            return
        self._settle = None
        self._state.locked = False
        log(f"[NAV] Settled on {self._state.current}")
        self.listeners.emit("on_transition_end", self._state.current)
