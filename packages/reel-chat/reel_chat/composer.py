"""Per-bubble animation state from springs and interpolation curves."""
from __future__ import annotations

from dataclasses import replace

from reel.types import Timing
from reel_spring import Spring
from reel_tween import Interpolation

from reel_chat.motion import BubbleMotion
from reel_chat.types import Message, Phase, RenderState


class BubbleComposer:
    """Combines the entrance, settle and pulse curves of one bubble.

    All curves are built once. ``compose`` is a pure function of the
    message direction, its start frame and the queried frame.
    """

    def __init__(self, motion: BubbleMotion, timing: Timing, fps: int) -> None:
        self._motion = motion
        self._enter_duration = timing.enter_duration_frames
        self._entrance = Spring(
            replace(motion.entrance_spring, duration_in_frames=timing.enter_duration_frames),
            fps,
        )
        self._settle = Spring(motion.settle_spring, fps)

        self._fade = Interpolation([0, motion.fade_in_frames], [0.0, 1.0])
        self._slide_outbound = Interpolation([0, 1], [motion.slide_distance, 0.0])
        self._slide_inbound = Interpolation([0, 1], [-motion.slide_distance, 0.0])
        self._pop = Interpolation([0, 1], [motion.pop_low, motion.pop_high])
        self._settle_scale = Interpolation([0, 1], [motion.settle_high, 1.0])
        self._pulse = Interpolation(motion.pulse_frames, [1.0, motion.pulse_peak, 1.0])
        self._blur = Interpolation([0, 1], [motion.max_blur, 0.0])

    @property
    def motion(self) -> BubbleMotion:
        return self._motion

    def from_offset(self, message: Message) -> float:
        """Horizontal offset a bubble starts from: right if outbound, left if not."""
        return self._slide(message).outputs[0]

    def _slide(self, message: Message) -> Interpolation:
        return self._slide_outbound if message.outbound else self._slide_inbound

    def phase(self, start_frame: int, frame: int) -> Phase:
        elapsed = frame - start_frame
        if elapsed <= 0:
            return Phase.PENDING
        if elapsed < self._enter_duration:
            return Phase.ENTERING
        return Phase.SETTLED

    def compose(self, message: Message, start_frame: int, frame: int) -> RenderState:
        elapsed = frame - start_frame

        opacity = self._fade(elapsed)

        entrance = self._entrance.progress(elapsed)
        offset_x = self._slide(message)(entrance)
        pop_scale = self._pop(entrance)

        settle = self._settle.progress(elapsed - self._motion.settle_delay_frames)
        settle_scale = self._settle_scale(settle)

        pulse = self._pulse(elapsed)

        return RenderState(
            id=message.id,
            offset_x=offset_x,
            scale=pop_scale * settle_scale * pulse,
            opacity=opacity,
            blur_radius=self._blur(opacity),
        )
