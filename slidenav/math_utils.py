"""Pure math utilities - no external dependencies."""

from __future__ import annotations


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (clamped to [0, 1])."""
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out: acceleration until halfway, then deceleration."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    if t < 0.5:
        return 4.0 * t * t * t
    else:
        p = 2.0 * t - 2.0
        return 1.0 + 0.5 * p * p * p


def fit_scale(iw: float, ih: float, sw: float, sh: float, frac: float) -> float:
    """Scale that fits an iw x ih image into frac of an sw x sh screen."""
    if iw <= 0 or ih <= 0:
        return 1.0
    return min(sw * frac / iw, sh * frac / ih)


def point_in_circle(px: float, py: float, cx: float, cy: float, r: float) -> bool:
    """Check if (px, py) lies within radius r of (cx, cy)."""
    dx = px - cx
    dy = py - cy
    return dx * dx + dy * dy <= r * r
