"""
Tests for the raylib glue: renderer re-settle, the fullscreen target and
jump-entry keys. The `rl` module attribute is replaced with a MagicMock,
so no window is opened; the module is skipped without a raylib binding.
"""

from unittest.mock import MagicMock, call

import pytest

pytest.importorskip("slidenav.rl_compat")

from slidenav import input_handler, platform
from slidenav.config import KEY_ESCAPE
from slidenav.events import EventQueue
from slidenav.input_handler import InputHandler
from slidenav.renderer import Renderer
from slidenav.state import UIState, ViewerState


@pytest.fixture
def fake_rl(monkeypatch):
    """MagicMock standing in for the raylib binding in the glue modules."""
    rl = MagicMock()
    monkeypatch.setattr(platform, "rl", rl)
    monkeypatch.setattr(input_handler, "rl", rl)
    return rl


class TestRendererResettle:
    """The renderer applies the recorded size when the deck re-settles."""

    def test_resize_burst_applies_after_quiet_period(self, deck, clock):
        state = ViewerState()
        renderer = Renderer(state, deck.config.settle_delay_ms, clock=clock)
        deck.add_listener(renderer)
        state.note_raw_size(1280, 720)
        renderer.on_resettle()
        state.ui.transition.active = True

        for w in (1200, 1100, 1024):
            state.note_raw_size(w, 768)
            deck.notify_resize()
            clock.advance(50)
            deck.update()
        assert (state.screenW, state.screenH) == (1280, 720)

        clock.advance(deck.config.resize_debounce_ms)
        deck.update()

        assert (state.screenW, state.screenH) == (1024, 768)
        assert not state.ui.transition.active


class TestRaylibFullscreenTarget:
    """Entering fullscreen resizes to the monitor; exiting restores the window."""

    @pytest.fixture
    def window(self, fake_rl):
        flag = {"fullscreen": False}

        def toggle():
            flag["fullscreen"] = not flag["fullscreen"]

        fake_rl.IsWindowFullscreen.side_effect = lambda: flag["fullscreen"]
        fake_rl.ToggleFullscreen.side_effect = toggle
        fake_rl.GetScreenWidth.return_value = 1280
        fake_rl.GetScreenHeight.return_value = 720
        fake_rl.GetCurrentMonitor.return_value = 0
        fake_rl.GetMonitorWidth.return_value = 1920
        fake_rl.GetMonitorHeight.return_value = 1080
        return fake_rl

    def test_exit_restores_windowed_size(self, window):
        events = EventQueue()
        target = platform.RaylibFullscreenTarget(events)
        results = []

        target.request_fullscreen(results.append)
        target.exit_fullscreen(results.append)
        events.poll()

        assert window.SetWindowSize.call_args_list == [call(1920, 1080), call(1280, 720)]
        assert results == [None, None]

    def test_exit_when_windowed_is_rejected(self, window):
        events = EventQueue()
        target = platform.RaylibFullscreenTarget(events)
        results = []

        target.exit_fullscreen(results.append)
        events.poll()

        window.SetWindowSize.assert_not_called()
        assert isinstance(results[0], RuntimeError)

    def test_second_enter_keeps_first_windowed_size(self, window):
        events = EventQueue()
        target = platform.RaylibFullscreenTarget(events)

        target.request_fullscreen(lambda e: None)
        window.GetScreenWidth.return_value = 1920
        window.GetScreenHeight.return_value = 1080
        target.request_fullscreen(lambda e: None)
        target.exit_fullscreen(lambda e: None)

        assert window.SetWindowSize.call_args_list[-1] == call(1280, 720)


class TestJumpEntryKeys:
    """Escape closes an open jump entry before it reaches the router."""

    @pytest.fixture
    def handler(self, fake_rl):
        fake_rl.IsKeyDown.return_value = False
        fake_rl.IsMouseButtonPressed.return_value = False
        fake_rl.IsKeyPressed.side_effect = lambda key: key == KEY_ESCAPE
        return InputHandler(router=MagicMock())

    def test_escape_dismisses_entry(self, handler):
        ui = UIState()
        ui.jump_entry = "3"

        handler.poll(MagicMock(), ui, 0.0)

        assert ui.jump_entry is None
        handler.router.on_key.assert_not_called()
        handler.router.deck.jump_from_text.assert_not_called()

    def test_escape_without_entry_is_routed(self, handler):
        ui = UIState()

        handler.poll(MagicMock(), ui, 0.0)

        handler.router.on_key.assert_called_once_with(KEY_ESCAPE, False)
