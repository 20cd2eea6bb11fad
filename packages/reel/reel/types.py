"""Shared errors, frame context and scene configuration types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


class ReelError(Exception):
    """Base class for all reel errors."""


class ConfigError(ReelError, ValueError):
    """Raised when scene, timing or spring configuration is invalid."""


class DomainError(ReelError, ValueError):
    """Raised for malformed interpolation curves or out-of-domain evaluation."""


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


@dataclass(frozen=True)
class SceneConfig:
    """Video configuration the scene is rendered at.

    Attributes:
        fps: Frames per second. Must be positive.
        width: Viewport width in pixels. Must be positive.
        height: Viewport height in pixels. Must be positive.
    """

    fps: int = 30
    width: int = 1080
    height: int = 1920

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ConfigError(f"fps must be > 0, got {self.fps}")
        if self.width <= 0:
            raise ConfigError(f"width must be > 0, got {self.width}")
        if self.height <= 0:
            raise ConfigError(f"height must be > 0, got {self.height}")


@dataclass(frozen=True)
class Timing:
    """Global entrance timing shared by every entity in a scene.

    Attributes:
        base_start_frame: Frame the first entity starts entering.
        stagger_frames: Delay between consecutive entity starts. Must be positive.
        enter_duration_frames: Frames the entrance spring takes to settle.
    """

    base_start_frame: int = 12
    stagger_frames: int = 18
    enter_duration_frames: int = 28

    def __post_init__(self) -> None:
        if self.stagger_frames <= 0:
            raise ConfigError(f"stagger_frames must be > 0, got {self.stagger_frames}")
        if self.enter_duration_frames <= 0:
            raise ConfigError(
                f"enter_duration_frames must be > 0, got {self.enter_duration_frames}"
            )
