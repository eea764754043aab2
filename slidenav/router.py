"""Event router - maps raw input onto deck commands and gesture streams.

Raw input arrives as key codes, click targets, touch samples and resize
notifications. The router knows nothing about the windowing library; the
raylib poller in `input_handler` feeds it.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Optional

from .animation import Timer
from .commands import (
    Command,
    NavigateNext, NavigatePrev, NavigateToIndex,
    ToggleFullscreen, ExitFullscreen, ShowHelp,
)
from .config import (
    KEYS_NEXT, KEYS_PREV, KEY_HOME, KEY_END, KEY_F, KEY_H, KEY_ESCAPE,
    FULLSCREEN_HOLD_MS,
)
from .logging import log
from .types import GestureSample, SwipeDecision

if TYPE_CHECKING:
    from .deck import SlideDeck


class ClickTarget(Enum):
    """Clickable deck controls."""
    PREV_BUTTON = auto()
    NEXT_BUTTON = auto()
    INDICATOR = auto()
    COUNTER = auto()
    FULLSCREEN_BUTTON = auto()


@dataclass(frozen=True)
class Click:
    target: ClickTarget
    index: int = 0  # slide number for INDICATOR


def command_for_key(key: int, modifier: bool, total: int) -> Optional[Command]:
    """Keyboard map. `modifier` is Ctrl or Cmd held."""
    if key in KEYS_PREV:
        return NavigatePrev()
    if key in KEYS_NEXT:
        return NavigateNext()
    if key == KEY_HOME:
        return NavigateToIndex(1)
    if key == KEY_END:
        return NavigateToIndex(total)
    if key == KEY_F and modifier:
        return ToggleFullscreen()
    if key == KEY_ESCAPE:
        return ExitFullscreen()
    if key == KEY_H and modifier:
        return ShowHelp()
    return None


def command_for_click(click: Click) -> Optional[Command]:
    """Button/indicator map. The fullscreen button acts on hold, not click."""
    if click.target is ClickTarget.PREV_BUTTON:
        return NavigatePrev()
    if click.target is ClickTarget.NEXT_BUTTON:
        return NavigateNext()
    if click.target is ClickTarget.INDICATOR:
        return NavigateToIndex(click.index, feedback=f"Slide {click.index}")
    return None


class EventRouter:
    """Routes one deck's raw input."""

    def __init__(self, deck: "SlideDeck",
                 prompt: Optional[Callable[[str, str], Optional[str]]] = None,
                 hold_ms: float = FULLSCREEN_HOLD_MS):
        self.deck = deck
        # Jump dialog: prompt(message, default) -> entered text or None
        self._prompt = prompt
        self._hold_ms = hold_ms
        self._hold: Optional[Timer] = None

    # ─── Keys and clicks ─────────────────────────────────────────────────────

    def on_key(self, key: int, modifier: bool = False):
        command = command_for_key(key, modifier, self.deck.total)
        if command is None:
            return None
        return self.deck.dispatch(command)

    def on_click(self, click: Click):
        if click.target is ClickTarget.COUNTER:
            return self.open_jump_dialog()
        command = command_for_click(click)
        if command is None:
            return None
        log(f"[ROUTER] Click {click.target.name}"
            + (f" #{click.index}" if click.target is ClickTarget.INDICATOR else ""))
        return self.deck.dispatch(command)

    def open_jump_dialog(self):
        if self._prompt is None:
            return None
        deck = self.deck
        text = self._prompt(f"Jump to slide (1-{deck.total}):", str(deck.current))
        return deck.jump_from_text(text)

    # ─── Fullscreen button hold ──────────────────────────────────────────────

    @property
    def holding(self) -> bool:
        return self._hold is not None

    def press_fullscreen_button(self) -> None:
        self.release_fullscreen_button()
        self._hold = self.deck.timers.start(self._hold_ms, self._on_hold, tag="ROUTER")

    def release_fullscreen_button(self) -> None:
        """Mouse up, touch end or pointer leaving the button."""
        if self._hold is not None:
            self.deck.timers.cancel(self._hold.token)
            self._hold = None

    def _on_hold(self, timer: Timer) -> None:
        self._hold = None
        self.deck.dispatch(ToggleFullscreen(feedback="Fullscreen toggled"))

    # ─── Touch ───────────────────────────────────────────────────────────────

    def on_touch_start(self, x: float, y: float, t: float, target: Any = None) -> bool:
        return self.deck.gesture_start(GestureSample(x, y, t), target)

    def on_touch_move(self, x: float, y: float, t: float, touches: int = 1) -> bool:
        """Returns True when the move should not scroll natively."""
        if touches > 1:
            self.deck.gesture_cancel()
            return False
        return self.deck.gesture_move(GestureSample(x, y, t))

    def on_touch_end(self, x: float, y: float, t: float) -> SwipeDecision:
        return self.deck.gesture_end(GestureSample(x, y, t))

    def on_touch_cancel(self) -> SwipeDecision:
        return self.deck.gesture_cancel()

    # ─── Window ──────────────────────────────────────────────────────────────

    def on_resize(self) -> None:
        self.deck.notify_resize()
