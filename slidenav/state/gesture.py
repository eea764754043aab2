"""Gesture state - one in-progress pointer/touch gesture."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from ..types import AxisLock, GestureSample


@dataclass
class GestureState:
    """State for a single gesture, from start sample to end or cancel."""
    start: GestureSample
    last: GestureSample
    axis_lock: Optional[AxisLock] = None

    def displacement(self, sample: GestureSample) -> Tuple[float, float]:
        """Signed (dx, dy) of sample relative to the gesture start."""
        return (sample.x - self.start.x, sample.y - self.start.y)

    def lock_axis(self, axis: AxisLock) -> bool:
        """Set the axis lock once. Returns True if it was set now."""
        if self.axis_lock is not None:
            return False
        self.axis_lock = axis
        return True

    @property
    def is_horizontal(self) -> bool:
        return self.axis_lock is AxisLock.HORIZONTAL
