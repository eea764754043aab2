"""Core data types for slidenav."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
from enum import Enum, auto


class TransitionResult(Enum):
    """Outcome of a navigation request."""
    ACCEPTED = auto()
    LOCKED = auto()          # A transition is already in flight
    ALREADY_THERE = auto()   # Target is the current slide
    BOUNDARY = auto()        # Target outside 1..total

    @property
    def accepted(self) -> bool:
        return self is TransitionResult.ACCEPTED


class SwipeDecision(Enum):
    """Outcome of a classified gesture."""
    NEXT = auto()
    PREVIOUS = auto()
    NO_DECISION = auto()


class AxisLock(Enum):
    """Axis a gesture committed to on its first significant move."""
    HORIZONTAL = auto()
    VERTICAL = auto()


class TransitionPhase(Enum):
    """Scheduler state machine."""
    IDLE = auto()
    TRANSITIONING = auto()


@dataclass(frozen=True)
class GestureSample:
    """A single pointer/touch sample. `t` is in milliseconds."""
    x: float
    y: float
    t: float


@dataclass
class UIEvent:
    """A callback to be run on the main loop."""
    callback: Callable
    args: tuple


@dataclass(frozen=True)
class SlideInfo:
    """Snapshot of where the deck is."""
    current: int
    total: int
    is_first: bool
    is_last: bool
    is_fullscreen: bool
    transitioning: bool = False


@dataclass(frozen=True)
class Slide:
    """A slide image on disk."""
    path: str
    width: int
    height: int
    title: Optional[str] = None
