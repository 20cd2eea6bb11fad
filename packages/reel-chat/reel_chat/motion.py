"""Motion constants for bubbles, header and idle float."""
from __future__ import annotations

from dataclasses import dataclass, field

from reel.types import ConfigError
from reel_spring import SpringConfig


@dataclass(frozen=True)
class BubbleMotion:
    """Per-bubble entrance constants.

    Attributes:
        fade_in_frames: Frames from start to full opacity.
        slide_distance: Horizontal distance a bubble slides in from.
        pop_low: Scale at the start of the entrance spring.
        pop_high: Scale the entrance spring lands on.
        settle_high: Scale the settle spring starts from.
        settle_delay_frames: Frames after start before the settle spring runs.
        entrance_spring: Entrance spring. Its duration comes from Timing.
        settle_spring: Settle spring, including its own duration.
        pulse_frames: Rest, peak and rest frames of the post-landing pulse,
            relative to the bubble's start frame.
        pulse_peak: Scale at the pulse peak.
        max_blur: Blur radius while fully transparent.
    """

    fade_in_frames: int = 10
    slide_distance: float = 54.0
    pop_low: float = 0.92
    pop_high: float = 1.0
    settle_high: float = 1.02
    settle_delay_frames: int = 6
    entrance_spring: SpringConfig = field(
        default_factory=lambda: SpringConfig(damping=10.0, stiffness=190.0, mass=0.75)
    )
    settle_spring: SpringConfig = field(
        default_factory=lambda: SpringConfig(
            damping=18.0, stiffness=120.0, mass=1.1, duration_in_frames=40
        )
    )
    pulse_frames: tuple[int, int, int] = (16, 22, 30)
    pulse_peak: float = 1.03
    max_blur: float = 8.0

    def __post_init__(self) -> None:
        if self.fade_in_frames <= 0:
            raise ConfigError(f"fade_in_frames must be > 0, got {self.fade_in_frames}")
        if self.slide_distance <= 0:
            raise ConfigError(f"slide_distance must be > 0, got {self.slide_distance}")
        if self.pop_low <= 0 or self.pop_high <= 0 or self.settle_high <= 0:
            raise ConfigError("pop and settle scales must be > 0")
        if self.settle_delay_frames < 0:
            raise ConfigError(
                f"settle_delay_frames must be >= 0, got {self.settle_delay_frames}"
            )
        if self.settle_spring.duration_in_frames is None:
            raise ConfigError("settle_spring needs a duration_in_frames")
        if len(self.pulse_frames) != 3 or not (
            self.pulse_frames[0] < self.pulse_frames[1] < self.pulse_frames[2]
        ):
            raise ConfigError(
                f"pulse_frames must be three increasing frames, got {self.pulse_frames}"
            )
        if self.max_blur < 0:
            raise ConfigError(f"max_blur must be >= 0, got {self.max_blur}")

    @property
    def settle_window(self) -> int:
        """Frames after start until the settle spring is at rest."""
        return self.settle_delay_frames + self.settle_spring.duration_in_frames


@dataclass(frozen=True)
class HeaderMotion:
    """Header drop-in: a spring after *delay_frames* moves it down by *drop*."""

    delay_frames: int = 2
    drop: float = 14.0
    spring: SpringConfig = field(
        default_factory=lambda: SpringConfig(
            damping=16.0, stiffness=170.0, mass=0.8, duration_in_frames=26
        )
    )

    def __post_init__(self) -> None:
        if self.delay_frames < 0:
            raise ConfigError(f"delay_frames must be >= 0, got {self.delay_frames}")
        if self.drop < 0:
            raise ConfigError(f"drop must be >= 0, got {self.drop}")


@dataclass(frozen=True)
class IdleMotion:
    """Ambient vertical float: amplitude in pixels, angular rate in rad/s."""

    angular_rate: float = 1.1
    amplitude: float = 2.0

    def __post_init__(self) -> None:
        if self.amplitude < 0:
            raise ConfigError(f"amplitude must be >= 0, got {self.amplitude}")
