"""Deck configuration constants and the immutable navigator config."""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

# Performance
TARGET_FPS = 60

# Swipe classification
SWIPE_DISTANCE_THRESHOLD = 50.0   # px of horizontal travel
SWIPE_TIME_THRESHOLD_MS = 500.0   # a swipe faster than this is always accepted
SWIPE_VELOCITY_THRESHOLD = 0.3    # px/ms, accepts slower but long swipes
AXIS_LOCK_EPSILON = 10.0          # px before the gesture axis is decided

# Transitions (milliseconds)
SETTLE_DELAY_MS = 350
RESIZE_DEBOUNCE_MS = 250
FULLSCREEN_HOLD_MS = 800

# Feedback toast (milliseconds)
FEEDBACK_VISIBLE_MS = 1500
FEEDBACK_FADE_MS = 200

# Deck UI
NAV_BTN_RADIUS = 32
NAV_BTN_MARGIN = 24
DOT_RADIUS = 6
DOT_SPACING = 24
DOT_MARGIN_BOTTOM = 28
FULLSCREEN_BTN_SIZE = 40
FULLSCREEN_BTN_MARGIN = 20
SLIDE_FIT_SCALE = 0.92
FONT_SIZE = 22

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_SPACE = 32
KEY_ZERO = 48
KEY_NINE = 57
KEY_F = 70
KEY_H = 72
KEY_Q = 81
KEY_ESCAPE = 256
KEY_ENTER = 257
KEY_BACKSPACE = 259
KEY_RIGHT = 262
KEY_LEFT = 263
KEY_DOWN = 264
KEY_UP = 265
KEY_HOME = 268
KEY_END = 269
KEY_LEFT_CONTROL = 341
KEY_LEFT_SUPER = 343
KEY_RIGHT_CONTROL = 345
KEY_RIGHT_SUPER = 347

KEYS_NEXT = (KEY_RIGHT, KEY_DOWN, KEY_SPACE)
KEYS_PREV = (KEY_LEFT, KEY_UP)
KEYS_MODIFIER = (KEY_LEFT_CONTROL, KEY_RIGHT_CONTROL, KEY_LEFT_SUPER, KEY_RIGHT_SUPER)

# Supported slide extensions
SLIDE_EXTS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tga", ".qoi"})


@dataclass(frozen=True)
class NavigatorConfig:
    """Construction-time settings for a deck. Immutable once built."""
    total: int = 1
    distance_threshold: float = SWIPE_DISTANCE_THRESHOLD
    time_threshold_ms: float = SWIPE_TIME_THRESHOLD_MS
    velocity_threshold: float = SWIPE_VELOCITY_THRESHOLD
    settle_delay_ms: float = SETTLE_DELAY_MS
    axis_lock_epsilon: float = AXIS_LOCK_EPSILON
    resize_debounce_ms: float = RESIZE_DEBOUNCE_MS
    # Gesture targets matching this predicate keep native scrolling
    scroll_exempt: Optional[Callable[[Any], bool]] = None

    def __post_init__(self):
        if not isinstance(self.total, int) or self.total < 1:
            raise ValueError(f"total must be an int >= 1, got {self.total!r}")
        for name in ("distance_threshold", "time_threshold_ms",
                     "velocity_threshold", "axis_lock_epsilon",
                     "resize_debounce_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)!r}")
        if self.settle_delay_ms <= 0:
            raise ValueError(f"settle_delay_ms must be > 0, got {self.settle_delay_ms!r}")

    def with_total(self, total: int) -> NavigatorConfig:
        """Copy of this config for a deck of `total` slides."""
        return replace(self, total=total)
