"""Piecewise interpolation through ordered breakpoints."""
from __future__ import annotations

import math
from bisect import bisect_right
from typing import Literal, Sequence

from reel.types import DomainError

from reel_tween.easing import Easing, resolve

Extrapolate = Literal["clamp", "extend", "error"]

_POLICIES = ("clamp", "extend", "error")


class Interpolation:
    """A validated curve mapping input values onto an output range.

    Breakpoints may be strictly ascending or strictly descending. The left
    policy applies below the smallest breakpoint and the right policy above
    the largest, whichever end of the sequence those sit at. The easing is
    applied to the local 0..1 position inside each segment; extension past
    either end follows the boundary segment's straight-line slope.
    """

    __slots__ = ("_xs", "_ys", "_left", "_right", "_easing")

    def __init__(
        self,
        breakpoints: Sequence[float],
        outputs: Sequence[float],
        extrapolate_left: Extrapolate = "clamp",
        extrapolate_right: Extrapolate = "clamp",
        easing: str | Easing = "linear",
    ) -> None:
        xs = tuple(float(b) for b in breakpoints)
        ys = tuple(float(o) for o in outputs)
        if len(xs) < 2:
            raise DomainError(f"need at least 2 breakpoints, got {len(xs)}")
        if len(xs) != len(ys):
            raise DomainError(
                f"breakpoints and outputs differ in length: {len(xs)} != {len(ys)}"
            )
        if not all(math.isfinite(v) for v in xs + ys):
            raise DomainError("breakpoints and outputs must be finite")
        for policy in (extrapolate_left, extrapolate_right):
            if policy not in _POLICIES:
                raise DomainError(f"Unknown extrapolation {policy!r}, expected one of {_POLICIES}")

        ascending = xs[1] > xs[0]
        for a, b in zip(xs, xs[1:]):
            if (b <= a) if ascending else (b >= a):
                raise DomainError(f"breakpoints must be strictly monotonic, got {list(xs)}")
        if not ascending:
            xs = xs[::-1]
            ys = ys[::-1]

        self._xs = xs
        self._ys = ys
        self._left = extrapolate_left
        self._right = extrapolate_right
        self._easing = resolve(easing)

    @property
    def breakpoints(self) -> tuple[float, ...]:
        """Breakpoints in ascending order."""
        return self._xs

    @property
    def outputs(self) -> tuple[float, ...]:
        return self._ys

    @property
    def domain(self) -> tuple[float, float]:
        return self._xs[0], self._xs[-1]

    def __call__(self, value: float) -> float:
        if not math.isfinite(value):
            raise DomainError(f"cannot interpolate non-finite value {value}")
        xs = self._xs
        ys = self._ys
        if value <= xs[0]:
            if value == xs[0]:
                return ys[0]
            return self._below(value)
        if value >= xs[-1]:
            if value == xs[-1]:
                return ys[-1]
            return self._above(value)

        i = bisect_right(xs, value) - 1
        x0, x1 = xs[i], xs[i + 1]
        t = (value - x0) / (x1 - x0)
        return ys[i] + (ys[i + 1] - ys[i]) * self._easing(t)

    def _below(self, value: float) -> float:
        if self._left == "clamp":
            return self._ys[0]
        if self._left == "error":
            self._raise_outside(value)
        return self._extend(value, 0)

    def _above(self, value: float) -> float:
        if self._right == "clamp":
            return self._ys[-1]
        if self._right == "error":
            self._raise_outside(value)
        return self._extend(value, len(self._xs) - 2)

    def _raise_outside(self, value: float) -> None:
        raise DomainError(f"{value} is outside the interpolation domain {self.domain}")

    def _extend(self, value: float, segment: int) -> float:
        x0, x1 = self._xs[segment], self._xs[segment + 1]
        y0, y1 = self._ys[segment], self._ys[segment + 1]
        return y0 + (y1 - y0) * (value - x0) / (x1 - x0)


def interpolate(
    value: float,
    breakpoints: Sequence[float],
    outputs: Sequence[float],
    extrapolate: Extrapolate = "clamp",
    *,
    extrapolate_left: Extrapolate | None = None,
    extrapolate_right: Extrapolate | None = None,
    easing: str | Easing = "linear",
) -> float:
    """One-shot evaluation. Build an Interpolation to reuse a curve."""
    curve = Interpolation(
        breakpoints,
        outputs,
        extrapolate_left=extrapolate_left or extrapolate,
        extrapolate_right=extrapolate_right or extrapolate,
        easing=easing,
    )
    return curve(value)
