"""Easing functions applied inside interpolation segments."""
from __future__ import annotations

import math
from typing import Callable

from reel.types import DomainError

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Build a CSS-style cubic-bezier easing through (0,0), (x1,y1), (x2,y2), (1,1)."""
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise DomainError(f"bezier x values must lie in [0, 1], got {x1}, {x2}")

    def curve(a: float, b: float, s: float) -> float:
        return 3 * a * (1 - s) ** 2 * s + 3 * b * (1 - s) * s * s + s ** 3

    def slope(a: float, b: float, s: float) -> float:
        return 3 * a * (1 - s) ** 2 + 6 * (b - a) * (1 - s) * s + 3 * (1 - b) * s * s

    def solve_s(x: float) -> float:
        s = x
        for _ in range(8):
            err = curve(x1, x2, s) - x
            if abs(err) < 1e-7:
                return s
            d = slope(x1, x2, s)
            if abs(d) < 1e-6:
                break
            s -= err / d
        lo, hi = 0.0, 1.0
        s = x
        for _ in range(40):
            if curve(x1, x2, s) < x:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
        return s

    def eased(t: float) -> float:
        if t <= 0.0 or t >= 1.0:
            return t
        return curve(y1, y2, solve_s(t))

    return eased


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_sine": ease_in_out_sine,
}


def resolve(easing: str | Easing) -> Easing:
    """Look up a named easing, or pass a callable through."""
    if callable(easing):
        return easing
    fn = EASINGS.get(easing)
    if fn is None:
        raise DomainError(f"Unknown easing {easing!r}, expected one of {sorted(EASINGS)}")
    return fn
