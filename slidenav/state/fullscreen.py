"""Fullscreen state - latest intent and what the platform last reported."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class FullscreenIntent:
    """The most recent fullscreen request."""
    desired: bool = False
    request_id: int = 0

    def issue(self, desired: bool) -> int:
        """Record a new request and return its id."""
        self.request_id += 1
        self.desired = desired
        return self.request_id

    def is_current(self, request_id: int) -> bool:
        """Check if request_id is the latest issued."""
        return request_id == self.request_id


@dataclass
class FullscreenActual:
    """Authoritative fullscreen flag."""
    reported: bool = False
    # True once a fallback was applied; cleared when the platform reports
    via_fallback: bool = False
