"""Composite viewer state - everything the raylib front end draws from."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .window import WindowState
from .ui import UIState
from ..types import Slide


@dataclass
class ViewerState:
    """Viewer-side state. Navigation itself lives in the deck core."""
    window: WindowState = field(default_factory=WindowState)
    ui: UIState = field(default_factory=UIState)
    slides: List[Slide] = field(default_factory=list)
    # 1-based slide index -> loaded texture
    textures: Dict[int, Any] = field(default_factory=dict)
    current: int = 1
    is_fullscreen: bool = False
    # Last size the platform reported; applied to `window` on re-settle
    raw_size: Tuple[int, int] = (0, 0)

    @property
    def total(self) -> int:
        return len(self.slides)

    @property
    def screenW(self) -> int:
        return self.window.screen_w

    @property
    def screenH(self) -> int:
        return self.window.screen_h

    def note_raw_size(self, w: int, h: int) -> bool:
        """Record a platform size. Returns True if it differs from the last one."""
        if (w, h) == self.raw_size:
            return False
        self.raw_size = (w, h)
        return True

    def resettle(self) -> bool:
        """Lay out for the last raw size. Returns True if the layout changed.

        An in-flight slide-in is dropped; its offsets belong to the old width.
        """
        if not self.window.resized(*self.raw_size):
            return False
        self.ui.transition.active = False
        return True
