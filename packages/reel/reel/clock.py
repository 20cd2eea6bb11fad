"""FrameClock - playback cursor and range for fixed-fps rendering."""

from typing import Callable

from reel.types import ConfigError, FrameContext


class FrameClock:
    """Cursor over a frame range at a fixed frame rate.

    ``seek`` may be called between frames or from inside a frame that is
    being rendered. In the second case the frame in flight still finishes
    and the following ``advance`` lands on the seek target instead of
    stepping past it.
    """

    def __init__(self, fps: int, frame: int = 0, end_frame: int | None = None) -> None:
        if fps <= 0:
            raise ConfigError(f"fps must be > 0, got {fps}")
        if end_frame is not None and end_frame < frame:
            raise ConfigError(f"end_frame must be >= {frame}, got {end_frame}")
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame = frame
        self._end_frame = end_frame
        self._held = False

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame(self) -> int:
        """Next frame to be rendered."""
        return self._frame

    @property
    def end_frame(self) -> int | None:
        """Last frame of the range, inclusive. None plays forever."""
        return self._end_frame

    @property
    def finished(self) -> bool:
        return self._end_frame is not None and self._frame > self._end_frame

    @property
    def remaining(self) -> int | None:
        if self._end_frame is None:
            return None
        return max(0, self._end_frame - self._frame + 1)

    def seconds(self, frame: int | float) -> float:
        """Wall-clock position of *frame*, in seconds."""
        return frame * self._dt

    def context(self, stop_fn: Callable[[], None]) -> FrameContext:
        """Open the current frame for rendering."""
        self._held = False
        return FrameContext(
            frame=self._frame,
            dt=self._dt,
            elapsed=self.seconds(self._frame),
            request_stop=stop_fn,
        )

    def advance(self) -> int:
        """Close the current frame and move to the next one, or to a pending seek."""
        if self._held:
            self._held = False
        else:
            self._frame += 1
        return self._frame

    def seek(self, frame: int) -> None:
        self._frame = frame
        self._held = True
