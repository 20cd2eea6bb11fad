"""ChatScene - header, idle float and staggered bubbles for any frame."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from reel.types import ConfigError, SceneConfig, Timing
from reel_schedule import StaggerScheduler
from reel_spring import Spring
from reel_tween import Interpolation

from reel_chat.composer import BubbleComposer
from reel_chat.motion import BubbleMotion, HeaderMotion, IdleMotion
from reel_chat.types import HeaderState, Layout, Message, Phase, SceneRenderState

logger = logging.getLogger(__name__)


class ChatScene:
    """Immutable chat scene answering ``query(frame)``.

    Configuration and messages are validated once here. Afterwards every
    query is a pure function of the frame number, so frames may be
    evaluated in any order, repeatedly, or from several workers at once.
    """

    def __init__(
        self,
        config: SceneConfig,
        messages: Sequence[Message],
        timing: Timing | None = None,
        bubble: BubbleMotion | None = None,
        header: HeaderMotion | None = None,
        idle: IdleMotion | None = None,
    ) -> None:
        self._config = config
        self._messages = tuple(messages)
        self._timing = timing or Timing()
        self._bubble = bubble or BubbleMotion()
        self._header = header or HeaderMotion()
        self._idle = idle or IdleMotion()

        seen: set[str] = set()
        for message in self._messages:
            if message.id in seen:
                raise ConfigError(f"Duplicate message id {message.id!r}")
            seen.add(message.id)

        self._scheduler = StaggerScheduler(
            self._timing.base_start_frame, self._timing.stagger_frames
        )
        self._starts = tuple(
            self._scheduler.start_frame(i) for i in range(len(self._messages))
        )
        self._composer = BubbleComposer(self._bubble, self._timing, config.fps)

        self._header_spring = Spring(self._header.spring, config.fps)
        self._header_offset = Interpolation([0, 1], [-self._header.drop, 0.0])
        self._header_opacity = Interpolation([0, 1], [0.0, 1.0])
        self._idle_curve = Interpolation(
            [-1, 1], [-self._idle.amplitude, self._idle.amplitude]
        )
        self._layout = Layout.for_viewport(config.width, config.height)

        logger.debug(
            "chat scene: %d messages at %d fps, starts %s",
            len(self._messages),
            config.fps,
            list(self._starts),
        )

    @property
    def config(self) -> SceneConfig:
        return self._config

    @property
    def timing(self) -> Timing:
        return self._timing

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._messages

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def composer(self) -> BubbleComposer:
        return self._composer

    @property
    def settled_frame(self) -> int:
        """First frame from which every bubble is at rest, pulse included."""
        if not self._messages:
            return self._header.delay_frames + (self._header.spring.duration_in_frames or 0)
        last = self._starts[-1]
        return last + max(
            self._timing.enter_duration_frames + self._bubble.settle_window,
            self._bubble.pulse_frames[-1],
        )

    def start_frame(self, index: int) -> int:
        return self._scheduler.start_frame(index)

    def phase(self, frame: int, index: int) -> Phase:
        start = self._scheduler.start_frame(index)
        if index >= len(self._messages):
            raise IndexError(f"no message at index {index}, scene has {len(self._messages)}")
        return self._composer.phase(start, frame)

    def header_state(self, frame: int) -> HeaderState:
        progress = self._header_spring.progress(frame - self._header.delay_frames)
        return HeaderState(
            offset_y=self._header_offset(progress),
            opacity=self._header_opacity(progress),
        )

    def idle_offset(self, frame: int) -> float:
        seconds = frame / self._config.fps
        return self._idle_curve(math.sin(seconds * self._idle.angular_rate))

    def query(self, frame: int) -> SceneRenderState:
        return SceneRenderState(
            frame=frame,
            header=self.header_state(frame),
            idle_offset_y=self.idle_offset(frame),
            entities=tuple(
                self._composer.compose(message, start, frame)
                for message, start in zip(self._messages, self._starts)
            ),
        )

    def query_many(self, frames: Iterable[int]) -> list[SceneRenderState]:
        return [self.query(frame) for frame in frames]
