"""Gesture classifier - turns a touch/pointer stream into a swipe decision.

The axis is decided once, on the first move that leaves the epsilon box
around the start point, and held for the rest of the gesture. A gesture
that locks vertical belongs to native scrolling: it is never claimed and
never produces a swipe. A gesture that locks horizontal stays a swipe
candidate even if it later drifts vertically.
"""

from __future__ import annotations
from typing import Any, Callable, Optional

from .config import (
    SWIPE_DISTANCE_THRESHOLD, SWIPE_TIME_THRESHOLD_MS,
    SWIPE_VELOCITY_THRESHOLD, AXIS_LOCK_EPSILON,
    NavigatorConfig,
)
from .logging import log
from .state.gesture import GestureState
from .types import AxisLock, GestureSample, SwipeDecision


class GestureClassifier:
    """Classifies one gesture at a time."""

    def __init__(self,
                 distance_threshold: float = SWIPE_DISTANCE_THRESHOLD,
                 time_threshold_ms: float = SWIPE_TIME_THRESHOLD_MS,
                 velocity_threshold: float = SWIPE_VELOCITY_THRESHOLD,
                 epsilon: float = AXIS_LOCK_EPSILON,
                 scroll_exempt: Optional[Callable[[Any], bool]] = None):
        self.distance_threshold = distance_threshold
        self.time_threshold_ms = time_threshold_ms
        self.velocity_threshold = velocity_threshold
        self.epsilon = epsilon
        self._scroll_exempt = scroll_exempt
        self._gesture: Optional[GestureState] = None

    @classmethod
    def from_config(cls, config: NavigatorConfig) -> GestureClassifier:
        return cls(
            distance_threshold=config.distance_threshold,
            time_threshold_ms=config.time_threshold_ms,
            velocity_threshold=config.velocity_threshold,
            epsilon=config.axis_lock_epsilon,
            scroll_exempt=config.scroll_exempt,
        )

    @property
    def gesture(self) -> Optional[GestureState]:
        """The in-progress gesture, if attached."""
        return self._gesture

    @property
    def active(self) -> bool:
        return self._gesture is not None

    def _is_exempt(self, target: Any) -> bool:
        if self._scroll_exempt is None or target is None:
            return False
        try:
            return bool(self._scroll_exempt(target))
        except Exception as e:
            log(f"[GESTURE][ERR] Scroll-exempt predicate failed: {e!r}")
            return False

    def on_start(self, sample: GestureSample, target: Any = None) -> bool:
        """Begin a gesture. Returns False if the target is scroll-exempt."""
        if self._gesture is not None:
            log("[GESTURE] New start while active; dropping previous gesture")
            self._gesture = None

        if self._is_exempt(target):
            return False

        self._gesture = GestureState(start=sample, last=sample)
        return True

    def on_move(self, sample: GestureSample) -> bool:
        """Track a move. Returns True if the caller may claim the event."""
        g = self._gesture
        if g is None:
            return False

        g.last = sample
        if g.axis_lock is None:
            dx, dy = g.displacement(sample)
            if abs(dx) > self.epsilon or abs(dy) > self.epsilon:
                g.lock_axis(AxisLock.HORIZONTAL if abs(dx) > abs(dy) else AxisLock.VERTICAL)

        return g.is_horizontal

    def on_end(self, sample: GestureSample) -> SwipeDecision:
        """Finish the gesture and classify it."""
        g = self._gesture
        self._gesture = None
        if g is None or not g.is_horizontal:
            return SwipeDecision.NO_DECISION

        decision = self.classify(g.start, sample)
        log(f"[GESTURE] {decision.name} dx={sample.x - g.start.x:.0f} "
            f"dy={abs(sample.y - g.start.y):.0f} dt={sample.t - g.start.t:.0f}ms")
        return decision

    def on_cancel(self) -> SwipeDecision:
        """Abort the gesture (pointer left, multi-touch)."""
        if self._gesture is not None:
            log("[GESTURE] Cancelled")
        self._gesture = None
        return SwipeDecision.NO_DECISION

    def classify(self, start: GestureSample, end: GestureSample) -> SwipeDecision:
        """Apply the swipe thresholds to a start/end pair."""
        dx = end.x - start.x
        dy = abs(end.y - start.y)
        dt = end.t - start.t
        abs_x = abs(dx)
        velocity = abs_x / max(dt, 1.0)

        is_horizontal = abs_x > dy
        is_long_enough = abs_x > self.distance_threshold
        is_quick_enough = dt < self.time_threshold_ms
        has_velocity = velocity > self.velocity_threshold

        if is_horizontal and is_long_enough and (is_quick_enough or has_velocity):
            return SwipeDecision.PREVIOUS if dx > 0 else SwipeDecision.NEXT
        return SwipeDecision.NO_DECISION
