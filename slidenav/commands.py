"""Command Pattern for navigation intents.

Input handling turns keys, clicks and gestures into these commands; the
deck executes them. Each command reports a typed result instead of
raising.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .deck import SlideDeck

from .types import TransitionResult

CommandResult = Union[TransitionResult, bool]


class Command(ABC):
    """Base class for all commands."""

    # Feedback text shown when the command takes effect
    feedback: Optional[str] = None

    @abstractmethod
    def execute(self, deck: "SlideDeck") -> CommandResult:
        """Execute the command against the deck."""
        pass

    def succeeded(self, result: CommandResult) -> bool:
        if isinstance(result, TransitionResult):
            return result.accepted
        return bool(result)


# ═══════════════════════════════════════════════════════════════════════════
# Navigation Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class NavigateNext(Command):
    """Go to the next slide."""
    feedback: Optional[str] = None

    def execute(self, deck: "SlideDeck") -> CommandResult:
        return deck.next()


@dataclass
class NavigatePrev(Command):
    """Go to the previous slide."""
    feedback: Optional[str] = None

    def execute(self, deck: "SlideDeck") -> CommandResult:
        return deck.previous()


@dataclass
class NavigateToIndex(Command):
    """Go to a specific slide (indicator tap, Home/End, jump dialog)."""
    target_index: int
    feedback: Optional[str] = None

    def execute(self, deck: "SlideDeck") -> CommandResult:
        return deck.go_to(self.target_index)


# ═══════════════════════════════════════════════════════════════════════════
# Fullscreen Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ToggleFullscreen(Command):
    """Flip fullscreen."""
    feedback: Optional[str] = None

    def execute(self, deck: "SlideDeck") -> CommandResult:
        deck.toggle_fullscreen()
        return True


@dataclass
class ExitFullscreen(Command):
    """Leave fullscreen if currently in it."""
    feedback: Optional[str] = None

    def execute(self, deck: "SlideDeck") -> CommandResult:
        if not deck.is_fullscreen:
            return False
        deck.exit_fullscreen()
        return True


# ═══════════════════════════════════════════════════════════════════════════
# UI Commands
# ═══════════════════════════════════════════════════════════════════════════

class ShowHelp(Command):
    """Open the controls overlay."""

    def execute(self, deck: "SlideDeck") -> CommandResult:
        deck.listeners.emit("on_help")
        return True
