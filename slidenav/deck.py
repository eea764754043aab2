"""Slide deck - the navigation core behind one presentation.

Wires the transition scheduler, gesture classifier, fullscreen
synchronizer and resize debouncer to one listener set and one clock.
Call `update()` once per frame to fire due timers.
"""

from __future__ import annotations
from typing import Any, Callable, Optional

from .animation import TimerController
from .commands import Command
from .config import NavigatorConfig
from .debounce import Debouncer
from .fullscreen import FullscreenSynchronizer, NativeFullscreenApi
from .gesture import GestureClassifier
from .listeners import DeckListener, ListenerSet
from .logging import log, now_ms
from .scheduler import TransitionScheduler
from .state.navigation import NavigationState
from .types import GestureSample, SlideInfo, SwipeDecision, TransitionResult


def parse_slide_number(text: Optional[str], total: int) -> Optional[int]:
    """Parse jump-dialog input. Returns None unless it is a slide number in 1..total."""
    if text is None:
        return None
    try:
        n = int(text.strip(), 10)
    except ValueError:
        return None
    if 1 <= n <= total:
        return n
    return None


class SlideDeck:
    """One presentation's navigation core."""

    def __init__(self, config: NavigatorConfig,
                 native_fullscreen: Optional[NativeFullscreenApi] = None,
                 fullscreen_fallback: Optional[Callable[[bool], None]] = None,
                 clock: Callable[[], float] = now_ms,
                 start: int = 1):
        self.config = config
        self.listeners = ListenerSet("DECK")
        self.timers = TimerController(clock)
        self.navigation = NavigationState(total=config.total, current=start)
        self.scheduler = TransitionScheduler(
            self.navigation, self.timers, config.settle_delay_ms, self.listeners)
        self.classifier = GestureClassifier.from_config(config)
        self.fullscreen = FullscreenSynchronizer(
            native_fullscreen, fullscreen_fallback, self.listeners)
        self.resize = Debouncer(
            self.timers, config.resize_debounce_ms, self._resettle, tag="RESIZE")
        log(f"[DECK] Ready: {config.total} slides, start={start}")

    # ─── Listeners ───────────────────────────────────────────────────────────

    def add_listener(self, listener: DeckListener) -> None:
        self.listeners.add(listener)

    def remove_listener(self, listener: DeckListener) -> None:
        self.listeners.remove(listener)

    def feedback(self, message: str) -> None:
        self.listeners.emit("on_feedback", message)

    # ─── Navigation ──────────────────────────────────────────────────────────

    @property
    def current(self) -> int:
        return self.navigation.current

    @property
    def total(self) -> int:
        return self.navigation.total

    @property
    def locked(self) -> bool:
        return self.navigation.locked

    def next(self) -> TransitionResult:
        result = self.scheduler.next()
        if result is TransitionResult.BOUNDARY:
            self.feedback("Already at last slide")
        return result

    def previous(self) -> TransitionResult:
        result = self.scheduler.previous()
        if result is TransitionResult.BOUNDARY:
            self.feedback("Already at first slide")
        return result

    def go_to(self, index: int) -> TransitionResult:
        return self.scheduler.go_to(index)

    def jump_to(self, index: int) -> TransitionResult:
        """Public jump: out-of-range indices are ignored without notifying listeners."""
        if not self.navigation.in_range(index):
            return TransitionResult.BOUNDARY
        return self.go_to(index)

    def jump_from_text(self, text: Optional[str]) -> Optional[TransitionResult]:
        """Handle jump-dialog input. None means the dialog was dismissed."""
        if text is None:
            return None
        n = parse_slide_number(text, self.total)
        if n is None:
            self.feedback("Invalid slide number")
            return TransitionResult.BOUNDARY
        result = self.go_to(n)
        if result.accepted:
            self.feedback(f"Jumped to slide {n}")
        return result

    # ─── Fullscreen ──────────────────────────────────────────────────────────

    @property
    def is_fullscreen(self) -> bool:
        return self.fullscreen.current_state()

    def toggle_fullscreen(self) -> int:
        return self.fullscreen.toggle()

    def enter_fullscreen(self) -> int:
        return self.fullscreen.request_enter()

    def exit_fullscreen(self) -> int:
        return self.fullscreen.request_exit()

    # ─── Gestures ────────────────────────────────────────────────────────────

    def gesture_start(self, sample: GestureSample, target: Any = None) -> bool:
        return self.classifier.on_start(sample, target)

    def gesture_move(self, sample: GestureSample) -> bool:
        return self.classifier.on_move(sample)

    def gesture_cancel(self) -> SwipeDecision:
        return self.classifier.on_cancel()

    def gesture_end(self, sample: GestureSample) -> SwipeDecision:
        """Finish a gesture and navigate if it was a swipe."""
        decision = self.classifier.on_end(sample)
        if decision is SwipeDecision.NEXT:
            if self.next().accepted:
                self.feedback("Next →")
        elif decision is SwipeDecision.PREVIOUS:
            if self.previous().accepted:
                self.feedback("← Previous")
        return decision

    # ─── Commands / frame ────────────────────────────────────────────────────

    def dispatch(self, command: Command):
        """Execute a command and show its feedback if it took effect."""
        result = command.execute(self)
        if command.feedback and command.succeeded(result):
            self.feedback(command.feedback)
        return result

    def notify_resize(self) -> None:
        """Resize/orientation event; coalesced into one re-settle."""
        self.resize.trigger()

    def _resettle(self) -> None:
        self.listeners.emit("on_resettle")

    def update(self) -> None:
        """Fire due timers. Call once per frame."""
        self.timers.update()

    def info(self) -> SlideInfo:
        nav = self.navigation
        return SlideInfo(
            current=nav.current,
            total=nav.total,
            is_first=nav.is_first,
            is_last=nav.is_last,
            is_fullscreen=self.is_fullscreen,
            transitioning=nav.locked,
        )
