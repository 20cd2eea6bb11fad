"""reel-spring - Damped spring progress curves for the reel engine."""
from __future__ import annotations

from reel_spring.config import SpringConfig
from reel_spring.solver import (
    REST_TOLERANCE,
    Spring,
    displacement,
    is_overshooting,
    measure_spring,
    settle_time,
    spring_progress,
)

__all__ = [
    "REST_TOLERANCE",
    "Spring",
    "SpringConfig",
    "displacement",
    "is_overshooting",
    "measure_spring",
    "settle_time",
    "spring_progress",
]
