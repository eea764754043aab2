"""
Tests for the SlideDeck facade: navigation, feedback, jumps, gestures,
fullscreen and resize re-settle wired together on one clock.
"""

import pytest

from slidenav.commands import (
    ExitFullscreen, NavigateNext, NavigateToIndex, ShowHelp,
    ToggleFullscreen,
)
from slidenav.config import NavigatorConfig
from slidenav.deck import SlideDeck, parse_slide_number
from slidenav.fullscreen import probe_native_api
from slidenav.types import GestureSample, SwipeDecision, TransitionResult

from conftest import PendingTarget


def settle(deck, clock):
    clock.advance(deck.config.settle_delay_ms)
    deck.update()


def swipe(deck, dx, dt=200):
    deck.gesture_start(GestureSample(400, 300, 0))
    deck.gesture_move(GestureSample(400 + dx / 2, 300, dt / 2))
    return deck.gesture_end(GestureSample(400 + dx, 300, dt))


class TestParseSlideNumber:
    """Jump-dialog input."""

    @pytest.mark.parametrize("text,expected", [
        ("3", 3),
        (" 5 ", 5),
        ("1", 1),
        ("0", None),
        ("6", None),
        ("-2", None),
        ("abc", None),
        ("", None),
        ("2.5", None),
        (None, None),
    ])
    def test_parse(self, text, expected):
        assert parse_slide_number(text, 5) == expected


class TestNavigation:
    """Deck-level navigation with feedback."""

    def test_next_then_settle(self, deck, clock, recorder):
        assert deck.next() is TransitionResult.ACCEPTED
        assert deck.locked
        settle(deck, clock)
        assert not deck.locked
        assert deck.current == 2
        assert "on_transition_end" in recorder.names()

    def test_boundary_feedback(self, deck, recorder):
        assert deck.previous() is TransitionResult.BOUNDARY
        assert recorder.args_of("on_feedback") == [("Already at first slide",)]

    def test_last_slide_feedback(self, clock, recorder):
        deck = SlideDeck(NavigatorConfig(total=2), clock=clock, start=2)
        deck.add_listener(recorder)
        deck.next()
        assert recorder.args_of("on_feedback") == [("Already at last slide",)]

    def test_locked_request_gives_no_feedback(self, deck, recorder):
        deck.next()
        assert deck.next() is TransitionResult.LOCKED
        assert recorder.args_of("on_feedback") == []

    def test_jump_to_ignores_out_of_range(self, deck, recorder):
        assert deck.jump_to(9) is TransitionResult.BOUNDARY
        assert deck.current == 1
        assert "on_rejected" not in recorder.names()

    def test_jump_from_text(self, deck, recorder):
        assert deck.jump_from_text("4") is TransitionResult.ACCEPTED
        assert deck.current == 4
        assert recorder.args_of("on_feedback") == [("Jumped to slide 4",)]

    def test_jump_from_invalid_text(self, deck, recorder):
        assert deck.jump_from_text("seven") is TransitionResult.BOUNDARY
        assert deck.current == 1
        assert recorder.args_of("on_feedback") == [("Invalid slide number",)]

    def test_dismissed_jump_dialog(self, deck, recorder):
        assert deck.jump_from_text(None) is None
        assert recorder.calls == []

    def test_info(self, deck, clock):
        info = deck.info()
        assert (info.current, info.total, info.is_first, info.is_last) == (1, 5, True, False)
        assert info.is_fullscreen is False

        deck.go_to(5)
        info = deck.info()
        assert info.is_last and info.transitioning
        settle(deck, clock)
        assert not deck.info().transitioning

    def test_start_out_of_range_raises(self, clock):
        with pytest.raises(ValueError):
            SlideDeck(NavigatorConfig(total=3), clock=clock, start=4)


class TestGestures:
    """Swipes through the deck."""

    def test_swipe_left_goes_next(self, deck, recorder):
        assert swipe(deck, -120) is SwipeDecision.NEXT
        assert deck.current == 2
        assert ("on_feedback", ("Next →",)) in recorder.calls

    def test_swipe_right_on_first_slide(self, deck, recorder):
        assert swipe(deck, 120) is SwipeDecision.PREVIOUS
        assert deck.current == 1
        assert recorder.args_of("on_feedback") == [("Already at first slide",)]

    def test_swipe_during_settle_is_dropped(self, deck, clock):
        swipe(deck, -120)
        swipe(deck, -120)
        assert deck.current == 2
        settle(deck, clock)
        swipe(deck, 120)
        assert deck.current == 1

    def test_cancel(self, deck):
        deck.gesture_start(GestureSample(0, 0, 0))
        deck.gesture_move(GestureSample(-60, 0, 50))
        assert deck.gesture_cancel() is SwipeDecision.NO_DECISION
        assert deck.current == 1


class TestFullscreen:
    """Fullscreen through the deck."""

    def test_fallback_toggle(self, deck, recorder, fallback):
        deck.toggle_fullscreen()
        assert deck.is_fullscreen
        assert fallback.calls == [True]
        deck.toggle_fullscreen()
        assert not deck.is_fullscreen
        assert recorder.args_of("on_fullscreen_changed") == [(True,), (False,)]

    def test_native_request(self, clock, recorder):
        target = PendingTarget()
        deck = SlideDeck(NavigatorConfig(total=3),
                         native_fullscreen=probe_native_api(target), clock=clock)
        deck.add_listener(recorder)

        deck.enter_fullscreen()
        target.resolve(0)
        assert not deck.is_fullscreen

        deck.fullscreen.on_platform_change(True)
        assert deck.is_fullscreen
        assert deck.info().is_fullscreen


class TestCommands:
    """Commands dispatched through the deck."""

    def test_feedback_only_on_success(self, deck, recorder):
        deck.dispatch(NavigateToIndex(3, feedback="Slide 3"))
        deck.dispatch(NavigateToIndex(4, feedback="Slide 4"))
        assert recorder.args_of("on_feedback") == [("Slide 3",)]

    def test_exit_fullscreen_when_windowed_does_nothing(self, deck, recorder, fallback):
        assert deck.dispatch(ExitFullscreen()) is False
        assert fallback.calls == []

    def test_toggle_command(self, deck):
        assert deck.dispatch(ToggleFullscreen(feedback="Fullscreen toggled")) is True
        assert deck.is_fullscreen

    def test_next_command(self, deck):
        assert deck.dispatch(NavigateNext()) is TransitionResult.ACCEPTED

    def test_show_help(self, deck, recorder):
        deck.dispatch(ShowHelp())
        assert recorder.names() == ["on_help"]


class TestResize:
    """Resize bursts re-settle once."""

    def test_burst_resettles_once(self, deck, clock, recorder):
        for _ in range(6):
            deck.notify_resize()
            clock.advance(50)
            deck.update()
        assert recorder.args_of("on_resettle") == []

        clock.advance(deck.config.resize_debounce_ms)
        deck.update()
        assert recorder.names().count("on_resettle") == 1

    def test_resize_does_not_disturb_transition(self, deck, clock, recorder):
        deck.next()
        deck.notify_resize()
        settle(deck, clock)
        assert not deck.locked
        clock.advance(deck.config.resize_debounce_ms)
        deck.update()
        assert recorder.names().count("on_resettle") == 1
        assert deck.current == 2
