"""Closed-form damped harmonic oscillator.

The spring is released from displacement 1 with zero velocity and pulled
toward rest at 0 by ``m * x'' + c * x' + k * x = 0``. Progress is reported
as ``1 - x(t)`` so it starts at 0 and approaches 1, overshooting when the
damping ratio is below 1.
"""
from __future__ import annotations

import math
from typing import Iterable

from reel.types import ConfigError

from reel_spring.config import SpringConfig

# Rest tolerance used to stretch duration-bound springs. Progress is within
# this distance of 1 from duration_in_frames onward.
REST_TOLERANCE = 5e-4

_CRITICAL_EPSILON = 1e-9
_BISECT_STEPS = 64


def displacement(config: SpringConfig, t: float) -> float:
    """Distance from rest after *t* seconds of natural spring time."""
    if t <= 0.0:
        return 1.0
    omega = config.natural_frequency
    zeta = config.damping_ratio

    if zeta < 1.0 - _CRITICAL_EPSILON:
        decay = zeta * omega
        omega_d = omega * math.sqrt(1.0 - zeta * zeta)
        envelope = math.exp(-decay * t)
        return envelope * (math.cos(omega_d * t) + (decay / omega_d) * math.sin(omega_d * t))

    if zeta <= 1.0 + _CRITICAL_EPSILON:
        return (1.0 + omega * t) * math.exp(-omega * t)

    spread = math.sqrt(zeta * zeta - 1.0)
    # Slow root via r1 * r2 == omega**2 to avoid cancellation at high damping.
    r2 = -omega * (zeta + spread)
    r1 = omega * omega / r2
    return (r2 * math.exp(r1 * t) - r1 * math.exp(r2 * t)) / (r2 - r1)


def settle_time(config: SpringConfig, tolerance: float = REST_TOLERANCE) -> float:
    """Natural time in seconds after which |displacement| stays <= *tolerance*."""
    if tolerance <= 0:
        raise ConfigError(f"tolerance must be > 0, got {tolerance}")
    zeta = config.damping_ratio

    if zeta < 1.0 - _CRITICAL_EPSILON:
        # Bound the ringing by its exponential envelope.
        amplitude = 1.0 / math.sqrt(1.0 - zeta * zeta)
        decay = zeta * config.natural_frequency
        return max(0.0, math.log(amplitude / tolerance) / decay)

    # Critically and overdamped springs decay monotonically.
    hi = 1.0 / config.natural_frequency
    while displacement(config, hi) > tolerance:
        hi *= 2.0
    lo = 0.0
    for _ in range(_BISECT_STEPS):
        mid = (lo + hi) / 2.0
        if displacement(config, mid) > tolerance:
            lo = mid
        else:
            hi = mid
    return hi


def measure_spring(config: SpringConfig, fps: int, tolerance: float = REST_TOLERANCE) -> int:
    """Frames the unstretched spring needs to come to rest at *fps*."""
    if fps <= 0:
        raise ConfigError(f"fps must be > 0, got {fps}")
    return math.ceil(settle_time(config, tolerance) * fps)


class Spring:
    """A spring bound to a frame rate, with its time scale computed once."""

    def __init__(self, config: SpringConfig, fps: int) -> None:
        if fps <= 0:
            raise ConfigError(f"fps must be > 0, got {fps}")
        self._config = config
        self._fps = fps
        if config.duration_in_frames is None:
            self._seconds_per_frame = 1.0 / fps
        else:
            self._seconds_per_frame = settle_time(config) / config.duration_in_frames

    @property
    def config(self) -> SpringConfig:
        return self._config

    @property
    def fps(self) -> int:
        return self._fps

    def progress(self, elapsed: float) -> float:
        """Progress toward 1 after *elapsed* frames. 0 for elapsed <= 0."""
        if elapsed <= 0:
            return 0.0
        value = 1.0 - displacement(self._config, elapsed * self._seconds_per_frame)
        if self._config.overshoot_clamping and value > 1.0:
            return 1.0
        return value

    __call__ = progress

    def sample(self, frames: Iterable[float]) -> list[float]:
        return [self.progress(f) for f in frames]


def spring_progress(elapsed: float, fps: int, config: SpringConfig) -> float:
    """Progress of *config* after *elapsed* frames at *fps*."""
    return Spring(config, fps).progress(elapsed)


def is_overshooting(samples: Iterable[float]) -> bool:
    """True if any sample passes beyond the rest value of 1."""
    return any(s > 1.0 for s in samples)
