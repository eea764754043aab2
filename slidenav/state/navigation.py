"""Navigation state - where the deck is and whether it is mid-transition."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class NavigationState:
    """Current/total slide index plus the transition lock.

    Owned and mutated only by TransitionScheduler. Indices are 1-based.
    """
    total: int
    current: int = 1
    locked: bool = False

    def __post_init__(self):
        if self.total < 1:
            raise ValueError(f"total must be >= 1, got {self.total}")
        if not self.in_range(self.current):
            raise ValueError(f"current {self.current} outside 1..{self.total}")

    def in_range(self, index: int) -> bool:
        """Check if index is a valid slide number."""
        return 1 <= index <= self.total

    @property
    def is_first(self) -> bool:
        return self.current == 1

    @property
    def is_last(self) -> bool:
        return self.current == self.total
