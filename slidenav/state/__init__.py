"""State management submodules for slidenav."""

from .navigation import NavigationState
from .gesture import GestureState
from .fullscreen import FullscreenIntent, FullscreenActual
from .window import WindowState
from .ui import UIState, FeedbackState, SlideTransitionVisual
from .viewer_state import ViewerState

__all__ = [
    'NavigationState',
    'GestureState',
    'FullscreenIntent',
    'FullscreenActual',
    'WindowState',
    'UIState',
    'FeedbackState',
    'SlideTransitionVisual',
    'ViewerState',
]
