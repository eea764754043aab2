"""
Pytest configuration and shared fixtures.

Everything here drives the navigation core without a window: a fake
millisecond clock, a listener that records every hook call, and fake
fullscreen targets standing in for the platform.
"""

from typing import Any, List, Optional, Tuple

import pytest

from slidenav.config import NavigatorConfig
from slidenav.deck import SlideDeck
from slidenav.listeners import DeckListener


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.t = start

    def __call__(self) -> float:
        return self.t

    def advance(self, ms: float) -> float:
        self.t += ms
        return self.t


class RecordingListener(DeckListener):
    """Records (hook, args) for every call."""

    def __init__(self):
        self.calls: List[Tuple[str, tuple]] = []

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def args_of(self, name: str) -> List[tuple]:
        return [args for n, args in self.calls if n == name]

    def on_transition_start(self, from_index):
        self._record("on_transition_start", from_index)

    def on_will_enter(self, to_index):
        self._record("on_will_enter", to_index)

    def on_transition_end(self, to_index):
        self._record("on_transition_end", to_index)

    def on_rejected(self, reason):
        self._record("on_rejected", reason)

    def on_fullscreen_changed(self, is_fullscreen):
        self._record("on_fullscreen_changed", is_fullscreen)

    def on_resettle(self):
        self._record("on_resettle")

    def on_feedback(self, message):
        self._record("on_feedback", message)

    def on_help(self):
        self._record("on_help")


class PendingTarget:
    """Fullscreen target whose requests stay pending until resolved by hand."""

    def __init__(self):
        self.pending: List[Tuple[str, Any]] = []

    def request_fullscreen(self, done):
        self.pending.append(("enter", done))

    def exit_fullscreen(self, done):
        self.pending.append(("exit", done))

    def resolve(self, index: int, error: Optional[BaseException] = None) -> None:
        _, done = self.pending[index]
        done(error)


class RejectingTarget:
    """Fullscreen target that rejects every request through its completion."""

    def request_fullscreen(self, done):
        done(RuntimeError("not allowed"))

    def exit_fullscreen(self, done):
        done(RuntimeError("not allowed"))


class RaisingTarget:
    """Fullscreen target whose methods raise instead of calling back."""

    def request_fullscreen(self, done):
        raise PermissionError("user gesture required")

    def exit_fullscreen(self, done):
        raise PermissionError("user gesture required")


class WebkitTarget:
    """Only the vendor-prefixed names."""

    def __init__(self):
        self.calls: List[str] = []

    def webkit_request_fullscreen(self, done):
        self.calls.append("enter")
        done(None)

    def webkit_exit_fullscreen(self, done):
        self.calls.append("exit")
        done(None)


class FallbackRecorder:
    """Fallback surface that records what it was asked to do."""

    def __init__(self):
        self.calls: List[bool] = []

    def __call__(self, enabled: bool) -> None:
        self.calls.append(enabled)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recorder() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def fallback() -> FallbackRecorder:
    return FallbackRecorder()


@pytest.fixture
def config() -> NavigatorConfig:
    """Default thresholds, five slides."""
    return NavigatorConfig(total=5)


@pytest.fixture
def deck(config, clock, recorder, fallback) -> SlideDeck:
    """
    Five-slide deck with no native fullscreen.

    The recording listener is already attached.
    """
    d = SlideDeck(config, fullscreen_fallback=fallback, clock=clock)
    d.add_listener(recorder)
    return d
