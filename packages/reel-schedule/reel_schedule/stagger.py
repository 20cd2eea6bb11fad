"""Staggered start frames for sequenced entrances."""
from __future__ import annotations

from reel.types import ConfigError


class StaggerScheduler:
    """Start frame of entity *index* is ``base_start + index * stagger_frames``."""

    def __init__(self, base_start: int, stagger_frames: int) -> None:
        if stagger_frames <= 0:
            raise ConfigError(f"stagger_frames must be > 0, got {stagger_frames}")
        self._base_start = base_start
        self._stagger_frames = stagger_frames

    @property
    def base_start(self) -> int:
        return self._base_start

    @property
    def stagger_frames(self) -> int:
        return self._stagger_frames

    def start_frame(self, index: int) -> int:
        if index < 0:
            raise ValueError(f"index must be >= 0, got {index}")
        return self._base_start + index * self._stagger_frames

    def started(self, frame: int, count: int) -> int:
        """How many of the first *count* entities have a start frame <= *frame*."""
        if frame < self._base_start:
            return 0
        return min(count, (frame - self._base_start) // self._stagger_frames + 1)

    def last_start(self, count: int) -> int:
        """Start frame of the final entity in a sequence of *count*."""
        if count <= 0:
            raise ValueError(f"count must be > 0, got {count}")
        return self.start_frame(count - 1)
