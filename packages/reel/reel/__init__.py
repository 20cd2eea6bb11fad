"""reel - Deterministic frame-state engine for staggered UI entrance scenes."""

from reel.clock import FrameClock
from reel.player import Player
from reel.types import (
    ConfigError,
    DomainError,
    FrameContext,
    ReelError,
    SceneConfig,
    Timing,
)

__all__ = [
    "Player",
    "FrameClock",
    "FrameContext",
    "SceneConfig",
    "Timing",
    "ReelError",
    "ConfigError",
    "DomainError",
]
