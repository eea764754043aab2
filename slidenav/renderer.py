"""Renderer - draws the deck and listens for deck changes.

Drawing only reads ViewerState. The listener hooks are the one place the
viewer state follows the navigation core.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .state import ViewerState

from .rl_compat import (
    rl,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    draw_text as RL_DrawText, measure_text as RL_MeasureText,
    load_texture, is_texture_valid,
)
from .config import (
    NAV_BTN_RADIUS, DOT_RADIUS, SLIDE_FIT_SCALE, FONT_SIZE,
)
from .layout import DeckLayout
from .listeners import DeckListener
from .math_utils import clamp, lerp, fit_scale, ease_in_out_cubic
from .logging import log, now_ms

HELP_LINES = (
    "Arrow keys / Space: navigate slides",
    "Home / End: first / last slide",
    "Digits + Enter: jump to slide",
    "Swipe left / right: navigate",
    "Hold the fullscreen button, or Ctrl+F: fullscreen",
    "Escape: exit fullscreen",
    "Ctrl+H: this help    Q: quit",
)


class Renderer(DeckListener):
    """Draws one deck; registered as a listener on it."""

    def __init__(self, state: "ViewerState", settle_ms: float, clock=now_ms):
        self.state = state
        self.settle_ms = settle_ms
        self._clock = clock

    # ═══════════════════════════════════════════════════════════════════════
    # Deck listener hooks
    # ═══════════════════════════════════════════════════════════════════════

    def on_transition_start(self, from_index: int) -> None:
        self.state.ui.transition.from_index = from_index

    def on_will_enter(self, to_index: int) -> None:
        tr = self.state.ui.transition
        tr.active = True
        tr.to_index = to_index
        tr.started_ms = self._clock()
        self.state.current = to_index
        self.texture_for(to_index)

    def on_transition_end(self, to_index: int) -> None:
        self.state.ui.transition.active = False

    def on_fullscreen_changed(self, is_fullscreen: bool) -> None:
        self.state.is_fullscreen = is_fullscreen

    def on_resettle(self) -> None:
        if self.state.resettle():
            log(f"[RENDER] Re-settled at {self.state.screenW}x{self.state.screenH}")

    def on_feedback(self, message: str) -> None:
        self.state.ui.feedback.show(message, self._clock())

    def on_help(self) -> None:
        self.state.ui.show_help = not self.state.ui.show_help

    # ═══════════════════════════════════════════════════════════════════════
    # Textures
    # ═══════════════════════════════════════════════════════════════════════

    def texture_for(self, index: int) -> Optional[Any]:
        """Texture for a 1-based slide index, loaded on first use."""
        st = self.state
        tex = st.textures.get(index)
        if tex is not None:
            return tex
        if not 1 <= index <= st.total:
            return None
        slide = st.slides[index - 1]
        try:
            tex = load_texture(slide.path)
        except Exception as e:
            log(f"[RENDER][ERR] Failed to load slide {index}: {e!r}")
            return None
        if not is_texture_valid(tex):
            log(f"[RENDER][ERR] Slide {index} produced no texture")
            return None
        st.textures[index] = tex
        return tex

    def unload_all(self) -> None:
        for tex in self.state.textures.values():
            try:
                rl.UnloadTexture(tex)
            except Exception as e:
                log(f"[RENDER][ERR] Unload failed: {e!r}")
        self.state.textures.clear()

    # ═══════════════════════════════════════════════════════════════════════
    # Frame
    # ═══════════════════════════════════════════════════════════════════════

    def draw_frame(self, layout: DeckLayout) -> None:
        st = self.state
        t = self._clock()
        rl.BeginDrawing()
        rl.ClearBackground(RL_Color(18, 18, 22, 255))
        self.draw_slides(t)
        self.draw_nav_buttons(layout)
        self.draw_dots(layout)
        self.draw_counter(layout)
        self.draw_fullscreen_button(layout)
        self.draw_feedback(t)
        if st.ui.show_help:
            self.draw_help()
        rl.EndDrawing()

    def _draw_slide(self, index: int, x_offset: float, alpha: float) -> None:
        st = self.state
        tex = self.texture_for(index)
        if tex is None:
            return
        slide = st.slides[index - 1]
        scale = fit_scale(slide.width, slide.height, st.screenW, st.screenH, SLIDE_FIT_SCALE)
        w = slide.width * scale
        h = slide.height * scale
        x = (st.screenW - w) / 2.0 + x_offset
        y = (st.screenH - h) / 2.0
        rl.DrawTexturePro(
            tex,
            RL_Rect(0, 0, tex.width, tex.height),
            RL_Rect(x, y, w, h),
            RL_V2(0, 0), 0.0, RL_Color(255, 255, 255, int(255 * clamp(alpha, 0.0, 1.0))),
        )

    def draw_slides(self, t: float) -> None:
        """Current slide; during settle the old one slides out and the new one in."""
        st = self.state
        tr = st.ui.transition
        if not tr.active or self.settle_ms <= 0:
            self._draw_slide(st.current, 0.0, 1.0)
            return

        p = ease_in_out_cubic(clamp((t - tr.started_ms) / self.settle_ms, 0.0, 1.0))
        offset = st.screenW * tr.direction
        self._draw_slide(tr.from_index, lerp(0, -offset, p), 1.0 - p)
        self._draw_slide(tr.to_index, lerp(offset, 0, p), p)

    def draw_nav_buttons(self, layout: DeckLayout) -> None:
        st = self.state
        for (cx, cy), enabled, left in (
            (layout.prev_button, st.current > 1, True),
            (layout.next_button, st.current < st.total, False),
        ):
            a = 255 if enabled else 128
            rl.DrawCircle(cx, cy, NAV_BTN_RADIUS, RL_Color(0, 0, 0, a // 2))
            rl.DrawCircleLines(cx, cy, NAV_BTN_RADIUS, RL_Color(255, 255, 255, a))
            s = NAV_BTN_RADIUS * 0.4
            dx = -s if left else s
            col = RL_Color(255, 255, 255, a)
            rl.DrawLineEx(RL_V2(cx - dx, cy - s), RL_V2(cx + dx, cy), 3.0, col)
            rl.DrawLineEx(RL_V2(cx + dx, cy), RL_V2(cx - dx, cy + s), 3.0, col)

    def draw_dots(self, layout: DeckLayout) -> None:
        current = self.state.current
        for i, (x, y) in enumerate(layout.dots(), start=1):
            if i == current:
                rl.DrawCircle(x, y, DOT_RADIUS, RL_Color(220, 220, 235, 255))
            else:
                rl.DrawCircleLines(x, y, DOT_RADIUS, RL_Color(110, 110, 130, 255))

    def draw_counter(self, layout: DeckLayout) -> None:
        st = self.state
        x, y, _, _ = layout.counter
        if st.ui.jump_entry is not None:
            text = f"Go to: {st.ui.jump_entry}_"
        else:
            text = f"{st.current} / {st.total}"
        RL_DrawText(text, x, y, FONT_SIZE, RL_Color(230, 230, 240, 255))

    def draw_fullscreen_button(self, layout: DeckLayout) -> None:
        x, y, w, h = layout.fullscreen_button
        col = RL_Color(255, 255, 255, 200)
        rl.DrawRectangleLines(x, y, w, h, col)
        inset = w // 4
        if self.state.is_fullscreen:
            rl.DrawRectangleLines(x + inset, y + inset, w - 2 * inset, h - 2 * inset, col)
        else:
            rl.DrawRectangle(x + inset, y + inset, w - 2 * inset, h - 2 * inset, col)

    def draw_feedback(self, t: float) -> None:
        st = self.state
        fb = st.ui.feedback
        alpha = fb.alpha(t)
        if alpha <= 0.0 or fb.message is None:
            return
        tw = RL_MeasureText(fb.message, FONT_SIZE)
        pad = 16
        x = (st.screenW - tw) // 2
        y = st.screenH // 2 - FONT_SIZE // 2
        rl.DrawRectangleRounded(
            RL_Rect(x - pad, y - pad // 2, tw + pad * 2, FONT_SIZE + pad),
            0.5, 8, RL_Color(0, 0, 0, int(217 * alpha)))
        RL_DrawText(fb.message, x, y, FONT_SIZE, RL_Color(255, 255, 255, int(255 * alpha)))

    def draw_help(self) -> None:
        st = self.state
        line_h = FONT_SIZE + 8
        box_h = line_h * (len(HELP_LINES) + 1)
        y0 = (st.screenH - box_h) // 2
        rl.DrawRectangle(0, 0, st.screenW, st.screenH, RL_Color(0, 0, 0, 180))
        for i, line in enumerate(HELP_LINES):
            tw = RL_MeasureText(line, FONT_SIZE)
            RL_DrawText(line, (st.screenW - tw) // 2, y0 + i * line_h,
                        FONT_SIZE, RL_Color(240, 240, 240, 255))
