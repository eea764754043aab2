"""Window state - screen dimensions."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class WindowState:
    """Window-related state."""
    screen_w: int = 0
    screen_h: int = 0

    def resized(self, w: int, h: int) -> bool:
        """Update size. Returns True if it changed."""
        if (w, h) == (self.screen_w, self.screen_h):
            return False
        self.screen_w = w
        self.screen_h = h
        return True
