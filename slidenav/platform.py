"""Raylib platform glue for fullscreen.

raylib toggles fullscreen synchronously; completions are still posted to
the event queue so they resolve on a later frame, like any other async
platform. The window's fullscreen flag is polled every frame and only its
edges are forwarded to the synchronizer.
"""

from __future__ import annotations
from typing import Optional, Tuple

from .events import EventQueue
from .fullscreen import Completion, FullscreenSynchronizer
from .logging import log
from .rl_compat import rl


class RaylibFullscreenTarget:
    """Exposes raylib fullscreen under the standard request/exit names."""

    def __init__(self, events: EventQueue):
        self._events = events
        # Windowed size to return to on exit
        self._windowed_size: Optional[Tuple[int, int]] = None

    def request_fullscreen(self, done: Completion) -> None:
        if not rl.IsWindowFullscreen():
            self._windowed_size = (rl.GetScreenWidth(), rl.GetScreenHeight())
            # Fullscreen at monitor resolution, not window resolution
            monitor = rl.GetCurrentMonitor()
            rl.SetWindowSize(rl.GetMonitorWidth(monitor), rl.GetMonitorHeight(monitor))
            rl.ToggleFullscreen()
        self._events.post(done, None)

    def exit_fullscreen(self, done: Completion) -> None:
        if not rl.IsWindowFullscreen():
            self._events.post(done, RuntimeError("window is not fullscreen"))
            return
        rl.ToggleFullscreen()
        if self._windowed_size is not None:
            rl.SetWindowSize(*self._windowed_size)
            self._windowed_size = None
        self._events.post(done, None)


def native_target(events: EventQueue) -> Optional[RaylibFullscreenTarget]:
    """Target for the capability probe, or None if this binding lacks fullscreen."""
    if not (hasattr(rl, "ToggleFullscreen") and hasattr(rl, "IsWindowFullscreen")):
        log("[FS] raylib binding has no fullscreen support")
        return None
    return RaylibFullscreenTarget(events)


class BorderlessFallback:
    """Fallback surface: borderless windowed mode stands in for fullscreen."""

    def __init__(self):
        self.enabled = False

    def __call__(self, enabled: bool) -> None:
        if enabled == self.enabled:
            return
        toggle = getattr(rl, "ToggleBorderlessWindowed", None)
        if toggle is not None:
            toggle()
        elif enabled:
            rl.MaximizeWindow()
        else:
            rl.RestoreWindow()
        self.enabled = enabled


class FullscreenWatcher:
    """Polls the window flag and reports changes as platform events."""

    def __init__(self, sync: FullscreenSynchronizer):
        self._sync = sync
        self._last = bool(rl.IsWindowFullscreen())

    def poll(self) -> None:
        value = bool(rl.IsWindowFullscreen())
        if value != self._last:
            self._last = value
            self._sync.on_platform_event("fullscreenchange", value)
