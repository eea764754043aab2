"""Render collaborator interface and fan-out."""

from __future__ import annotations
from typing import List

from .types import TransitionResult
from .logging import log


class DeckListener:
    """Base class for anything that reacts to deck changes.

    All hooks are optional; override the ones you need.
    """

    def on_transition_start(self, from_index: int) -> None:
        """Called when leaving from_index, before the index changes."""
        pass

    def on_will_enter(self, to_index: int) -> None:
        """Called right after the index changed, before settling."""
        pass

    def on_transition_end(self, to_index: int) -> None:
        """Called when the settle window has passed."""
        pass

    def on_rejected(self, reason: TransitionResult) -> None:
        pass

    def on_fullscreen_changed(self, is_fullscreen: bool) -> None:
        pass

    def on_resettle(self) -> None:
        """Called once after a burst of resize/orientation events."""
        pass

    def on_feedback(self, message: str) -> None:
        pass

    def on_help(self) -> None:
        pass


class ListenerSet:
    """Dispatches hooks to registered listeners.

    A listener that raises is logged and skipped; the rest still run.
    """

    def __init__(self, tag: str = "NAV"):
        self._listeners: List[DeckListener] = []
        self._tag = tag

    def add(self, listener: DeckListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove(self, listener: DeckListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def __len__(self) -> int:
        return len(self._listeners)

    def emit(self, hook: str, *args) -> None:
        for listener in list(self._listeners):
            try:
                getattr(listener, hook)(*args)
            except Exception as e:
                log(f"[{self._tag}][ERR] {type(listener).__name__}.{hook} failed: {e!r}")
