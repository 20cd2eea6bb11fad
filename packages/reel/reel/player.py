"""Player - frame loop, pacing, sinks and lifecycle hooks."""

import logging
import time
from typing import Callable, Generic, TypeVar

from reel.clock import FrameClock
from reel.types import FrameContext

logger = logging.getLogger(__name__)

S = TypeVar("S")
Sink = Callable[[FrameContext, S], None]


class Player(Generic[S]):
    """Walks a pure ``query(frame)`` function frame by frame.

    Each frame is queried fresh and handed to every sink in registration
    order. The player only owns a playback cursor; nothing computed for
    one frame is visible to the next.
    """

    def __init__(
        self,
        query: Callable[[int], S],
        fps: int,
        start_frame: int = 0,
        end_frame: int | None = None,
    ) -> None:
        self._query = query
        self._clock = FrameClock(fps, frame=start_frame, end_frame=end_frame)
        self._sinks: list[Sink[S]] = []
        self._start_hooks: list[Callable[[FrameContext], None]] = []
        self._stop_hooks: list[Callable[[FrameContext], None]] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def frame(self) -> int:
        """Next frame to be rendered."""
        return self._clock.frame

    @property
    def finished(self) -> bool:
        return self._clock.finished

    def add_sink(self, sink: Sink[S]) -> None:
        self._sinks.append(sink)

    def on_start(self, hook: Callable[[FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    def seek(self, frame: int) -> None:
        """Move the cursor. Called from a sink, takes effect after that frame."""
        logger.debug("seek to frame %d", frame)
        self._clock.seek(frame)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _render(self) -> S:
        ctx = self._clock.context(self._request_stop)
        state = self._query(ctx.frame)
        for sink in self._sinks:
            sink(ctx, state)
            if self._stop_requested:
                break
        self._clock.advance()
        return state

    def _fire(self, hooks: list[Callable[[FrameContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(ctx)

    def step(self) -> S:
        """Render the current frame and move the cursor forward by one."""
        self._stop_requested = False
        return self._render()

    def run(self, n: int) -> None:
        self._stop_requested = False
        logger.debug("run %d frames from frame %d", n, self._clock.frame)
        self._fire(self._start_hooks)

        for _ in range(n):
            if self.finished:
                break
            self._render()
            if self._stop_requested:
                break

        self._fire(self._stop_hooks)
        logger.debug("stopped at frame %d", self._clock.frame)

    def run_forever(self) -> None:
        """Render in real time at the clock's fps until stopped or finished."""
        self._stop_requested = False
        logger.debug("playing from frame %d", self._clock.frame)
        self._fire(self._start_hooks)

        dt = self._clock.dt
        while not self._stop_requested and not self.finished:
            start = time.monotonic()
            self._render()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)
        logger.debug("stopped at frame %d", self._clock.frame)
