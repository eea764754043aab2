"""
Tests for the fullscreen capability probe and synchronizer.
"""

from slidenav.fullscreen import FullscreenSynchronizer, probe_native_api
from slidenav.listeners import ListenerSet

from conftest import (
    FallbackRecorder, PendingTarget, RaisingTarget, RecordingListener,
    RejectingTarget, WebkitTarget,
)


def make_sync(target=None, fallback=None):
    rec = RecordingListener()
    listeners = ListenerSet("FS")
    listeners.add(rec)
    sync = FullscreenSynchronizer(probe_native_api(target), fallback, listeners)
    return sync, rec


class TestProbe:
    """One-time capability detection."""

    def test_standard_names(self):
        api = probe_native_api(PendingTarget())
        assert api is not None
        assert api.vendor == "standard"

    def test_vendor_prefixed_names(self):
        api = probe_native_api(WebkitTarget())
        assert api is not None
        assert api.vendor == "webkit"

    def test_missing_api(self):
        assert probe_native_api(object()) is None
        assert probe_native_api(None) is None

    def test_for_target_probes_once(self):
        native = FullscreenSynchronizer.for_target(WebkitTarget())
        missing = FullscreenSynchronizer.for_target(object())
        assert native.has_native
        assert not missing.has_native

    def test_exit_on_separate_document(self):
        class Element:
            def moz_request_full_screen(self, done):
                done(None)

        class Document:
            def moz_cancel_full_screen(self, done):
                done(None)

        api = probe_native_api(Element(), Document())
        assert api is not None
        assert api.vendor == "moz"
        assert probe_native_api(Element()) is None


class TestFallbackPath:
    """No native API, or the platform refuses."""

    def test_enter_without_native_emits_once(self):
        fb = FallbackRecorder()
        sync, rec = make_sync(None, fb)

        sync.request_enter()

        assert sync.current_state() is True
        assert rec.args_of("on_fullscreen_changed") == [(True,)]
        assert fb.calls == [True]

    def test_repeated_enter_without_native_emits_once(self):
        sync, rec = make_sync(None, FallbackRecorder())
        sync.request_enter()
        sync.request_enter()
        assert rec.args_of("on_fullscreen_changed") == [(True,)]

    def test_toggle_without_native(self):
        sync, rec = make_sync(None, None)
        sync.toggle()
        sync.toggle()
        assert sync.current_state() is False
        assert rec.args_of("on_fullscreen_changed") == [(True,), (False,)]

    def test_rejection_applies_fallback(self):
        fb = FallbackRecorder()
        sync, rec = make_sync(RejectingTarget(), fb)

        sync.request_enter()

        assert sync.current_state() is True
        assert fb.calls == [True]
        assert rec.args_of("on_fullscreen_changed") == [(True,)]

    def test_synchronous_raise_counts_as_rejection(self):
        fb = FallbackRecorder()
        sync, _ = make_sync(RaisingTarget(), fb)

        sync.request_enter()

        assert sync.current_state() is True
        assert fb.calls == [True]

    def test_failing_fallback_surface_is_logged_not_raised(self):
        def broken(enabled):
            raise OSError("no window")

        sync, rec = make_sync(None, broken)
        sync.request_enter()
        assert sync.current_state() is True
        assert rec.args_of("on_fullscreen_changed") == [(True,)]


class TestNativePath:
    """Async native requests."""

    def test_success_waits_for_platform_change(self):
        target = PendingTarget()
        sync, rec = make_sync(target, FallbackRecorder())

        sync.request_enter()
        target.resolve(0)

        assert sync.current_state() is False
        assert rec.args_of("on_fullscreen_changed") == []

        assert sync.on_platform_change(True) is True
        assert sync.current_state() is True
        assert rec.args_of("on_fullscreen_changed") == [(True,)]

    def test_vendor_api_is_used(self):
        target = WebkitTarget()
        sync, _ = make_sync(target, None)
        sync.request_enter()
        sync.request_exit()
        assert target.calls == ["enter", "exit"]

    def test_duplicate_platform_changes_emit_once(self):
        sync, rec = make_sync(PendingTarget(), None)

        sync.on_platform_event("fullscreenchange", True)
        sync.on_platform_event("webkitfullscreenchange", True)

        assert rec.args_of("on_fullscreen_changed") == [(True,)]

    def test_unknown_event_name_is_ignored(self):
        sync, rec = make_sync(PendingTarget(), None)
        assert sync.on_platform_event("resize", True) is False
        assert sync.current_state() is False

    def test_stale_resolution_does_not_override_exit(self):
        target = PendingTarget()
        fb = FallbackRecorder()
        sync, rec = make_sync(target, fb)

        enter_id = sync.request_enter()
        exit_id = sync.request_exit()
        assert exit_id > enter_id
        assert sync.latest_request_id == exit_id

        # The enter is rejected late; it must not switch the fallback on
        target.resolve(0, RuntimeError("denied"))
        target.resolve(1)

        assert sync.current_state() is False
        assert fb.calls == []
        assert rec.args_of("on_fullscreen_changed") == []

    def test_latest_rejection_still_applies(self):
        target = PendingTarget()
        fb = FallbackRecorder()
        sync, _ = make_sync(target, fb)

        sync.request_exit()
        sync.request_enter()
        target.resolve(1, RuntimeError("denied"))

        assert fb.calls == [True]
        assert sync.current_state() is True

    def test_completion_only_counts_once(self):
        target = PendingTarget()
        fb = FallbackRecorder()
        sync, _ = make_sync(target, fb)

        sync.request_enter()
        target.resolve(0)
        target.resolve(0, RuntimeError("late"))

        assert fb.calls == []

    def test_platform_exit_clears_fallback(self):
        fb = FallbackRecorder()
        sync, rec = make_sync(RejectingTarget(), fb)

        sync.request_enter()
        sync.on_platform_change(False)

        assert sync.current_state() is False
        assert fb.calls == [True, False]
        assert rec.args_of("on_fullscreen_changed") == [(True,), (False,)]
