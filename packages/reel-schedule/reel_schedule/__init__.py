"""reel-schedule - Staggered start scheduling for the reel engine."""
from __future__ import annotations

from reel_schedule.stagger import StaggerScheduler

__all__ = ["StaggerScheduler"]
