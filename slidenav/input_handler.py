"""Input Handler - polls raylib input and feeds the event router.

Mouse and single touch share one pointer stream: raylib reports the first
touch point as the mouse. A press on a control is a click; a press
anywhere else starts a gesture that is classified on release.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .state import UIState

from .rl_compat import rl
from .config import (
    KEYS_NEXT, KEYS_PREV, KEYS_MODIFIER,
    KEY_HOME, KEY_END, KEY_F, KEY_H, KEY_Q, KEY_ESCAPE,
    KEY_ZERO, KEY_NINE, KEY_ENTER, KEY_BACKSPACE,
)
from .layout import DeckLayout
from .router import ClickTarget, EventRouter
from .logging import log


@dataclass
class MouseState:
    """Current pointer state snapshot."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False
    left_released: bool = False
    left_down: bool = False
    touches: int = 0
    on_screen: bool = True


@dataclass
class InputHandler:
    """Polls raylib each frame and routes what it finds."""

    router: EventRouter
    key_quit: int = KEY_Q
    routed_keys: List[int] = field(default_factory=lambda: [
        *KEYS_NEXT, *KEYS_PREV, KEY_HOME, KEY_END, KEY_F, KEY_H, KEY_ESCAPE,
    ])

    _gesture_active: bool = False
    _holding_fullscreen: bool = False
    quit_requested: bool = False

    def poll_mouse(self) -> MouseState:
        """Get current pointer state."""
        pos = rl.GetMousePosition()
        return MouseState(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            left_released=rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT),
            left_down=rl.IsMouseButtonDown(rl.MOUSE_BUTTON_LEFT),
            touches=rl.GetTouchPointCount(),
            on_screen=rl.IsCursorOnScreen(),
        )

    def is_modifier_down(self) -> bool:
        return any(rl.IsKeyDown(k) for k in KEYS_MODIFIER)

    def poll(self, layout: DeckLayout, ui: "UIState", t_ms: float) -> None:
        """Poll all inputs for one frame."""
        if rl.IsKeyPressed(self.key_quit):
            self.quit_requested = True
            return

        entry_closed = self._poll_jump_entry(ui)

        modifier = self.is_modifier_down()
        for key in self.routed_keys:
            if key == KEY_ESCAPE and entry_closed:
                continue
            if rl.IsKeyPressed(key):
                self.router.on_key(key, modifier)

        self._poll_pointer(self.poll_mouse(), layout, t_ms)

    def _poll_jump_entry(self, ui: "UIState") -> bool:
        """Digits then Enter jump to a slide; Backspace edits, Escape dismisses.

        Returns True if Escape was used to dismiss the entry.
        """
        for key in range(KEY_ZERO, KEY_NINE + 1):
            if rl.IsKeyPressed(key):
                ui.jump_entry = (ui.jump_entry or "") + chr(key)

        if ui.jump_entry is None:
            return False
        if rl.IsKeyPressed(KEY_ESCAPE):
            ui.jump_entry = None
            return True
        if rl.IsKeyPressed(KEY_BACKSPACE):
            ui.jump_entry = ui.jump_entry[:-1] or None
        elif rl.IsKeyPressed(KEY_ENTER):
            text, ui.jump_entry = ui.jump_entry, None
            self.router.deck.jump_from_text(text)
        return False

    def _poll_pointer(self, mouse: MouseState, layout: DeckLayout, t_ms: float) -> None:
        if mouse.left_pressed:
            hit = layout.hit_test(mouse.x, mouse.y)
            if hit is None:
                self._gesture_active = self.router.on_touch_start(mouse.x, mouse.y, t_ms)
            elif hit.target is ClickTarget.FULLSCREEN_BUTTON:
                self._holding_fullscreen = True
                self.router.press_fullscreen_button()
            else:
                self.router.on_click(hit)
            return

        if self._holding_fullscreen:
            hit = layout.hit_test(mouse.x, mouse.y)
            over = hit is not None and hit.target is ClickTarget.FULLSCREEN_BUTTON
            if mouse.left_released or not over:
                self._holding_fullscreen = False
                self.router.release_fullscreen_button()

        if not self._gesture_active:
            return

        if mouse.left_released:
            self._gesture_active = False
            self.router.on_touch_end(mouse.x, mouse.y, t_ms)
        elif not mouse.on_screen:
            log("[INPUT] Pointer left the window; cancelling gesture")
            self._gesture_active = False
            self.router.on_touch_cancel()
        elif mouse.left_down:
            touches = max(1, mouse.touches)
            self.router.on_touch_move(mouse.x, mouse.y, t_ms, touches)
            if touches > 1:
                self._gesture_active = False
