"""Spring configuration."""
from __future__ import annotations

import math
from dataclasses import dataclass

from reel.types import ConfigError


@dataclass(frozen=True)
class SpringConfig:
    """Immutable physical description of one damped spring.

    Attributes:
        damping: Viscous damping coefficient (c). Must be > 0.
        stiffness: Spring constant (k). Must be > 0.
        mass: Moving mass (m). Must be > 0.
        duration_in_frames: When set, time is stretched so the spring is at
            rest (within tolerance) exactly at this many frames.
        overshoot_clamping: Cap progress at 1 instead of bouncing past it.
    """

    damping: float = 10.0
    stiffness: float = 100.0
    mass: float = 1.0
    duration_in_frames: int | None = None
    overshoot_clamping: bool = False

    def __post_init__(self) -> None:
        if self.damping <= 0:
            raise ConfigError(f"damping must be > 0, got {self.damping}")
        if self.stiffness <= 0:
            raise ConfigError(f"stiffness must be > 0, got {self.stiffness}")
        if self.mass <= 0:
            raise ConfigError(f"mass must be > 0, got {self.mass}")
        if self.duration_in_frames is not None and self.duration_in_frames <= 0:
            raise ConfigError(
                f"duration_in_frames must be > 0, got {self.duration_in_frames}"
            )

    @property
    def natural_frequency(self) -> float:
        """Undamped angular frequency sqrt(k / m), in rad/s."""
        return math.sqrt(self.stiffness / self.mass)

    @property
    def damping_ratio(self) -> float:
        """c / (2 * sqrt(k * m)). Below 1 the spring overshoots."""
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))

    @classmethod
    def bouncy(cls, duration_in_frames: int | None = None) -> SpringConfig:
        """Underdamped preset that overshoots and rings before settling."""
        return cls(damping=10.0, stiffness=190.0, mass=0.75, duration_in_frames=duration_in_frames)

    @classmethod
    def gentle(cls, duration_in_frames: int | None = None) -> SpringConfig:
        """Overdamped preset that approaches rest without overshoot."""
        return cls(damping=26.0, stiffness=120.0, mass=1.0, duration_in_frames=duration_in_frames)
