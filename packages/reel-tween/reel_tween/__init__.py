"""reel-tween - Breakpoint interpolation and easing for the reel engine."""
from __future__ import annotations

from reel_tween.easing import EASINGS, bezier
from reel_tween.interpolation import Extrapolate, Interpolation, interpolate

__all__ = ["EASINGS", "Extrapolate", "Interpolation", "bezier", "interpolate"]
