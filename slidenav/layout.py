"""Deck control layout - shared by the renderer and hit-testing."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import (
    NAV_BTN_RADIUS, NAV_BTN_MARGIN,
    DOT_RADIUS, DOT_SPACING, DOT_MARGIN_BOTTOM,
    FULLSCREEN_BTN_SIZE, FULLSCREEN_BTN_MARGIN,
    FONT_SIZE,
)
from .math_utils import point_in_circle
from .router import Click, ClickTarget


@dataclass(frozen=True)
class DeckLayout:
    """Positions of the deck controls for one screen size."""
    screen_w: int
    screen_h: int
    total: int

    @property
    def prev_button(self) -> Tuple[int, int]:
        return (NAV_BTN_MARGIN + NAV_BTN_RADIUS, self.screen_h // 2)

    @property
    def next_button(self) -> Tuple[int, int]:
        return (self.screen_w - NAV_BTN_MARGIN - NAV_BTN_RADIUS, self.screen_h // 2)

    @property
    def fullscreen_button(self) -> Tuple[int, int, int, int]:
        """(x, y, w, h) in the top-right corner."""
        x = self.screen_w - FULLSCREEN_BTN_MARGIN - FULLSCREEN_BTN_SIZE
        return (x, FULLSCREEN_BTN_MARGIN, FULLSCREEN_BTN_SIZE, FULLSCREEN_BTN_SIZE)

    @property
    def counter(self) -> Tuple[int, int, int, int]:
        """(x, y, w, h) of the "n / total" counter, top-left."""
        return (FULLSCREEN_BTN_MARGIN, FULLSCREEN_BTN_MARGIN, FONT_SIZE * 5, FONT_SIZE + 8)

    def dots(self) -> List[Tuple[int, int]]:
        """Centers of the progress dots, slide 1 first."""
        y = self.screen_h - DOT_MARGIN_BOTTOM
        width = (self.total - 1) * DOT_SPACING
        start_x = (self.screen_w - width) // 2
        return [(start_x + i * DOT_SPACING, y) for i in range(self.total)]

    def hit_test(self, x: float, y: float) -> Optional[Click]:
        """Control under (x, y), if any."""
        bx, by, bw, bh = self.fullscreen_button
        if bx <= x <= bx + bw and by <= y <= by + bh:
            return Click(ClickTarget.FULLSCREEN_BUTTON)

        cx, cy, cw, ch = self.counter
        if cx <= x <= cx + cw and cy <= y <= cy + ch:
            return Click(ClickTarget.COUNTER)

        px, py = self.prev_button
        if point_in_circle(x, y, px, py, NAV_BTN_RADIUS):
            return Click(ClickTarget.PREV_BUTTON)

        nx, ny = self.next_button
        if point_in_circle(x, y, nx, ny, NAV_BTN_RADIUS):
            return Click(ClickTarget.NEXT_BUTTON)

        # Dots get a slightly larger touch target than they are drawn
        hit_r = DOT_RADIUS * 2
        for i, (dx, dy) in enumerate(self.dots()):
            if point_in_circle(x, y, dx, dy, hit_r):
                return Click(ClickTarget.INDICATOR, index=i + 1)
        return None
