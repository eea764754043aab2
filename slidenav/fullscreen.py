"""Fullscreen synchronizer - reconciles fullscreen intent with the platform.

Platforms expose fullscreen under several vendor-prefixed names, or not at
all. The capability probe picks one request/exit pair once, at init; the
rest of the code never looks at vendor names again.

Native requests are asynchronous: the platform calls back with `None` on
success or an exception on rejection. Success changes nothing here, the
platform's own change notification does. Rejection (or no native API)
applies the fallback surface straight away. Only the latest request's
outcome may touch state; older resolutions are dropped.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .listeners import ListenerSet
from .logging import log
from .state.fullscreen import FullscreenActual, FullscreenIntent

# Completion callback handed to native calls: None on success, else the error
Completion = Callable[[Optional[BaseException]], None]

# Probed in order; the first name present wins
REQUEST_METHODS = (
    "request_fullscreen",
    "webkit_request_fullscreen",
    "moz_request_full_screen",
    "ms_request_fullscreen",
)
EXIT_METHODS = (
    "exit_fullscreen",
    "webkit_exit_fullscreen",
    "moz_cancel_full_screen",
    "ms_exit_fullscreen",
)
CHANGE_EVENTS = frozenset({
    "fullscreenchange",
    "webkitfullscreenchange",
    "mozfullscreenchange",
    "MSFullscreenChange",
})


@dataclass(frozen=True)
class NativeFullscreenApi:
    """A resolved request/exit pair."""
    request: Callable[[Completion], Any]
    exit: Callable[[Completion], Any]
    vendor: str = "standard"


def _first_method(obj: Any, names) -> Optional[tuple]:
    for name in names:
        fn = getattr(obj, name, None)
        if callable(fn):
            return name, fn
    return None


def probe_native_api(element: Any, document: Any = None) -> Optional[NativeFullscreenApi]:
    """Find a usable fullscreen API on element (request) and document (exit).

    Returns None when either half is missing.
    """
    if element is None:
        return None
    document = element if document is None else document

    req = _first_method(element, REQUEST_METHODS)
    ext = _first_method(document, EXIT_METHODS)
    if req is None or ext is None:
        return None

    name = req[0]
    vendor = name.split("_", 1)[0] if not name.startswith("request") else "standard"
    return NativeFullscreenApi(request=req[1], exit=ext[1], vendor=vendor)


class FullscreenSynchronizer:
    """Owns the authoritative fullscreen flag."""

    def __init__(self, native: Optional[NativeFullscreenApi] = None,
                 fallback: Optional[Callable[[bool], None]] = None,
                 listeners: Optional[ListenerSet] = None):
        self._native = native
        self._fallback = fallback
        self.listeners = listeners if listeners is not None else ListenerSet("FS")
        self._intent = FullscreenIntent()
        self._actual = FullscreenActual()
        if native is None:
            log("[FS] No native fullscreen API; using fallback path")
        else:
            log(f"[FS] Native fullscreen API: {native.vendor}")

    @classmethod
    def for_target(cls, element: Any, document: Any = None,
                   fallback: Optional[Callable[[bool], None]] = None,
                   listeners: Optional[ListenerSet] = None) -> FullscreenSynchronizer:
        """Probe element/document once and build a synchronizer around the result."""
        return cls(probe_native_api(element, document), fallback, listeners)

    @property
    def has_native(self) -> bool:
        return self._native is not None

    @property
    def latest_request_id(self) -> int:
        return self._intent.request_id

    def current_state(self) -> bool:
        return self._actual.reported

    def request_enter(self) -> int:
        return self._request(True)

    def request_exit(self) -> int:
        return self._request(False)

    def toggle(self) -> int:
        """Request the opposite of the current state."""
        return self._request(not self._actual.reported)

    def on_platform_change(self, reported: bool) -> bool:
        """Platform says fullscreen is now `reported`. Returns True if it was a change."""
        reported = bool(reported)
        if reported == self._actual.reported:
            return False
        if self._actual.via_fallback:
            self._set_fallback(reported)
        self._set_reported(reported, "platform")
        return True

    def on_platform_event(self, event_name: str, reported: bool) -> bool:
        """Vendor-named change event. All known names collapse to one change."""
        if event_name not in CHANGE_EVENTS:
            log(f"[FS] Ignoring unknown event {event_name!r}")
            return False
        return self.on_platform_change(reported)

    def _request(self, desired: bool) -> int:
        request_id = self._intent.issue(desired)
        action = "enter" if desired else "exit"
        log(f"[FS] Request #{request_id}: {action}")

        if self._native is None:
            self._apply_fallback(desired)
            return request_id

        method = self._native.request if desired else self._native.exit
        done = self._completion(request_id, desired)
        try:
            method(done)
        except Exception as e:
            done(e)
        return request_id

    def _completion(self, request_id: int, desired: bool) -> Completion:
        answered = False

        def done(error: Optional[BaseException] = None) -> None:
            nonlocal answered
            if answered:
                return
            answered = True
            self._on_resolved(request_id, desired, error)

        return done

    def _on_resolved(self, request_id: int, desired: bool,
                     error: Optional[BaseException]) -> None:
        if not self._intent.is_current(request_id):
            log(f"[FS] Dropping stale resolution #{request_id} "
                f"(latest #{self._intent.request_id})")
            return
        if error is None:
            return
        log(f"[FS] Native request #{request_id} failed: {error!r}; applying fallback")
        self._apply_fallback(desired)

    def _apply_fallback(self, desired: bool) -> None:
        self._set_fallback(desired)
        self._set_reported(desired, "fallback")

    def _set_fallback(self, enabled: bool) -> None:
        self._actual.via_fallback = enabled
        if self._fallback is None:
            return
        try:
            self._fallback(enabled)
        except Exception as e:
            log(f"[FS][ERR] Fallback surface failed: {e!r}")

    def _set_reported(self, value: bool, source: str) -> None:
        if value == self._actual.reported:
            return
        self._actual.reported = value
        log(f"[FS] Fullscreen {'on' if value else 'off'} ({source})")
        self.listeners.emit("on_fullscreen_changed", value)
