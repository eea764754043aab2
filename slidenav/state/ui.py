"""UI state - feedback toast, transition visuals, help and jump entry."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from ..config import FEEDBACK_VISIBLE_MS, FEEDBACK_FADE_MS


@dataclass
class FeedbackState:
    """A short message shown over the slide, then faded out."""
    message: Optional[str] = None
    shown_at_ms: float = 0.0

    def show(self, message: str, at_ms: float) -> None:
        """Replace any visible message."""
        self.message = message
        self.shown_at_ms = at_ms

    def alpha(self, at_ms: float) -> float:
        """Toast opacity at the given time; 0 once expired."""
        if self.message is None:
            return 0.0
        age = at_ms - self.shown_at_ms
        if age < 0:
            return 0.0
        if age <= FEEDBACK_VISIBLE_MS:
            return 1.0
        fade = (age - FEEDBACK_VISIBLE_MS) / FEEDBACK_FADE_MS
        if fade >= 1.0:
            self.message = None
            return 0.0
        return 1.0 - fade


@dataclass
class SlideTransitionVisual:
    """What the renderer needs to draw a slide-in."""
    active: bool = False
    from_index: int = 0
    to_index: int = 0
    started_ms: float = 0.0

    @property
    def direction(self) -> int:
        """1 when moving forward, -1 when moving back."""
        return 1 if self.to_index > self.from_index else -1


@dataclass
class UIState:
    """UI state for the deck viewer."""
    feedback: FeedbackState = field(default_factory=FeedbackState)
    transition: SlideTransitionVisual = field(default_factory=SlideTransitionVisual)
    show_help: bool = False
    # Digits typed for "go to slide", None when not typing
    jump_entry: Optional[str] = None
