"""Application - main loop orchestrator.

The Application class coordinates, once per frame:
- Queued platform completions (via EventQueue)
- Input handling (via InputHandler -> EventRouter -> SlideDeck)
- Window size and fullscreen polling
- Timers (settle, resize debounce, fullscreen hold)
- Rendering (via Renderer)
"""

from __future__ import annotations
from typing import List, Optional
import traceback

from .config import NavigatorConfig, TARGET_FPS
from .deck import SlideDeck
from .events import EventQueue
from .fullscreen import probe_native_api
from .input_handler import InputHandler
from .layout import DeckLayout
from .logging import log, now_ms, increment_frame, get_frame
from .platform import BorderlessFallback, FullscreenWatcher, native_target
from .renderer import Renderer
from .rl_compat import rl, RL_VERSION, init_window, draw_text as RL_DrawText
from .router import EventRouter
from .state import ViewerState
from .types import Slide

WINDOW_TITLE = "Slides"
DEFAULT_WINDOW_W = 1280
DEFAULT_WINDOW_H = 720


def init_window_for_deck(state: ViewerState) -> None:
    log("[INIT] Starting window initialization")
    flags = getattr(rl, "FLAG_WINDOW_RESIZABLE", 0) | getattr(rl, "FLAG_MSAA_4X_HINT", 0)
    if flags:
        rl.SetConfigFlags(flags)
    init_window(DEFAULT_WINDOW_W, DEFAULT_WINDOW_H, WINDOW_TITLE)
    # Escape is a deck key (exit fullscreen), not the close key
    try:
        rl.SetExitKey(0)
    except Exception:
        pass
    rl.SetTargetFPS(TARGET_FPS)
    state.note_raw_size(rl.GetScreenWidth(), rl.GetScreenHeight())
    state.resettle()
    log(f"[INIT] RL_VER={RL_VERSION} window={state.screenW}x{state.screenH}")


class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(slides)
        app.initialize()
        app.run()
    """

    def __init__(self, slides: List[Slide], start: int = 1,
                 config: Optional[NavigatorConfig] = None):
        self.state = ViewerState(slides=list(slides), current=start)
        self.config = (config or NavigatorConfig()).with_total(len(slides))
        self.events = EventQueue()
        self.deck: Optional[SlideDeck] = None
        self.router: Optional[EventRouter] = None
        self.input_handler: Optional[InputHandler] = None
        self.renderer: Optional[Renderer] = None
        self.watcher: Optional[FullscreenWatcher] = None
        self.running = False

    def initialize(self) -> bool:
        """Open the window and wire the deck. Returns True on success."""
        try:
            init_window_for_deck(self.state)
        except Exception as e:
            log(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
            log(f"[INIT][CRITICAL] Traceback:\n{traceback.format_exc()}")
            return False

        native = probe_native_api(native_target(self.events))
        self.deck = SlideDeck(
            self.config,
            native_fullscreen=native,
            fullscreen_fallback=BorderlessFallback(),
            start=self.state.current,
        )
        self.renderer = Renderer(self.state, self.config.settle_delay_ms)
        self.deck.add_listener(self.renderer)
        self.router = EventRouter(self.deck, prompt=self._open_jump_entry)
        self.input_handler = InputHandler(self.router)
        self.watcher = FullscreenWatcher(self.deck.fullscreen)
        self.renderer.texture_for(self.state.current)
        log("[APP] Application initialized")
        return True

    def _open_jump_entry(self, message: str, default: str) -> Optional[str]:
        # Counter click starts inline digit entry; the text arrives later via Enter
        log(f"[APP] {message}")
        self.state.ui.jump_entry = ""
        return None

    def run(self) -> None:
        self.running = True
        log("[APP] Starting main loop")

        try:
            while self.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        if rl.WindowShouldClose():
            self.running = False
            return

        # 1. Platform completions posted on earlier frames
        self.events.poll()

        # 2. Input
        layout = DeckLayout(self.state.screenW, self.state.screenH, self.state.total)
        self.input_handler.poll(layout, self.state.ui, now_ms())
        if self.input_handler.quit_requested:
            log("[APP] Quit requested")
            self.running = False
            return

        # 3. Window changes
        if self.state.note_raw_size(rl.GetScreenWidth(), rl.GetScreenHeight()):
            self.router.on_resize()
        self.watcher.poll()

        # 4. Timers
        self.deck.update()

        # 5. Render
        layout = DeckLayout(self.state.screenW, self.state.screenH, self.state.total)
        self.renderer.draw_frame(layout)

        increment_frame()

    def _cleanup(self) -> None:
        log("[APP] Starting cleanup")
        if self.deck is not None:
            self.deck.timers.cancel_all()
        self.events.clear()
        if self.renderer is not None:
            self.renderer.unload_all()
        try:
            log("[APP] Closing window")
            rl.CloseWindow()
        except Exception as e:
            log(f"[APP][ERR] CloseWindow failed: {e!r}")
        log(f"[APP] Cleanup complete, frames={get_frame()}")

    def stop(self) -> None:
        """Stop the main loop."""
        self.running = False


def show_no_slides(message: str) -> None:
    """Error screen for an empty deck."""
    state = ViewerState()
    try:
        init_window_for_deck(state)
        while not rl.WindowShouldClose():
            rl.BeginDrawing()
            rl.ClearBackground(rl.BLACK)
            RL_DrawText(message, 40, 40, 28, rl.GRAY)
            rl.EndDrawing()
    except Exception as e:
        log(f"[ERROR_SCREEN][ERR] {e!r}")
    finally:
        try:
            rl.CloseWindow()
        except Exception:
            pass
