"""Tests for ChatScene queries: header, idle float and bubble aggregation."""
from __future__ import annotations

import json
import math
import random

import pytest

from reel import ConfigError, Player, SceneConfig, Timing
from reel_chat import (
    ChatScene,
    HeaderMotion,
    HeaderState,
    IdleMotion,
    Message,
    Phase,
    SceneRenderState,
)
from reel_spring import Spring

MESSAGES = [
    Message(id="m1", outbound=False, content="Hey! Are we still on for later?"),
    Message(id="m2", outbound=True, content="Yep, 7pm works. I'll bring the laptop."),
    Message(id="m3", outbound=False, content="Perfect. Want me to grab snacks?"),
    Message(id="m4", outbound=True, content="Yes please. Anything spicy is a win."),
    Message(id="m5", outbound=False, content="Deal. See you soon!"),
    Message(id="m6", outbound=True, content="See you"),
]


def build_scene() -> ChatScene:
    return ChatScene(
        SceneConfig(fps=30, width=1080, height=1920),
        MESSAGES,
        Timing(base_start_frame=12, stagger_frames=18, enter_duration_frames=28),
    )


@pytest.fixture
def scene() -> ChatScene:
    return build_scene()


class TestReferenceScenario:
    def test_third_bubble_starts_at_48(self, scene: ChatScene) -> None:
        assert scene.start_frame(2) == 48

    def test_before_start(self, scene: ChatScene) -> None:
        state = scene.query(40).entity("m3")
        assert state.opacity == 0
        assert state.offset_x == scene.composer.from_offset(MESSAGES[2])
        assert state.offset_x < 0

    def test_long_after_start(self, scene: ChatScene) -> None:
        state = scene.query(200).entity("m3")
        assert state.opacity == 1
        assert abs(state.offset_x) < 1e-3


class TestAggregation:
    def test_preserves_message_order(self, scene: ChatScene) -> None:
        ids = [state.id for state in scene.query(90).entities]
        assert ids == ["m1", "m2", "m3", "m4", "m5", "m6"]

    def test_frame_recorded(self, scene: ChatScene) -> None:
        assert scene.query(77).frame == 77

    def test_entity_lookup_unknown_id(self, scene: ChatScene) -> None:
        with pytest.raises(KeyError):
            scene.query(0).entity("nope")

    def test_empty_scene(self) -> None:
        scene = ChatScene(SceneConfig(), [])
        state = scene.query(50)
        assert state.entities == ()
        assert isinstance(state.header, HeaderState)

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Duplicate"):
            ChatScene(SceneConfig(), [Message("a", True), Message("a", False)])

    def test_caller_list_not_mutated(self) -> None:
        messages = list(MESSAGES)
        scene = ChatScene(SceneConfig(), messages)
        scene.query(60)
        assert messages == MESSAGES
        assert scene.messages == tuple(MESSAGES)

    def test_caller_list_changes_do_not_leak(self) -> None:
        messages = list(MESSAGES)
        scene = ChatScene(SceneConfig(), messages)
        messages.append(Message("late", True))
        assert len(scene.query(60).entities) == len(MESSAGES)


class TestStaggeredProperties:
    def test_start_frames_strictly_increasing(self, scene: ChatScene) -> None:
        starts = [scene.start_frame(i) for i in range(len(MESSAGES))]
        assert all(b > a for a, b in zip(starts, starts[1:]))

    @pytest.mark.parametrize("index", range(len(MESSAGES)))
    def test_pre_start_state(self, scene: ChatScene, index: int) -> None:
        start = scene.start_frame(index)
        for frame in (start - 30, start - 1):
            state = scene.query(frame).entities[index]
            assert state.opacity == 0
            assert state.offset_x == scene.composer.from_offset(MESSAGES[index])

    @pytest.mark.parametrize("index", range(len(MESSAGES)))
    def test_convergence(self, scene: ChatScene, index: int) -> None:
        settled = (
            scene.start_frame(index)
            + scene.timing.enter_duration_frames
            + scene.composer.motion.settle_window
        )
        for frame in (settled, settled + 1, settled + 100):
            state = scene.query(frame).entities[index]
            assert state.opacity == 1
            assert abs(state.offset_x) < 1e-3
            assert state.scale == pytest.approx(1.0, abs=1e-3)

    def test_directionality(self, scene: ChatScene) -> None:
        for message in MESSAGES:
            offset = scene.composer.from_offset(message)
            assert (offset > 0) == message.outbound
            assert (offset < 0) == (not message.outbound)

    def test_phases(self, scene: ChatScene) -> None:
        assert scene.phase(40, 2) is Phase.PENDING
        assert scene.phase(60, 2) is Phase.ENTERING
        assert scene.phase(76, 2) is Phase.SETTLED

    def test_phase_rejects_negative_index(self, scene: ChatScene) -> None:
        with pytest.raises(ValueError):
            scene.phase(60, -1)

    def test_phase_rejects_index_past_last_message(self, scene: ChatScene) -> None:
        with pytest.raises(IndexError):
            scene.phase(60, len(MESSAGES))

    def test_settled_frame(self, scene: ChatScene) -> None:
        assert scene.settled_frame == 102 + 28 + 46
        last = scene.query(scene.settled_frame).entities[-1]
        assert last.scale == pytest.approx(1.0, abs=1e-3)


class TestBubbleSweep:
    @pytest.mark.parametrize("index", range(len(MESSAGES)))
    def test_offset_stays_between_origin_and_rest(self, scene: ChatScene, index: int) -> None:
        origin = scene.composer.from_offset(MESSAGES[index])
        low, high = min(origin, 0.0), max(origin, 0.0)
        start = scene.start_frame(index)
        for frame in range(start - 5, start + 90):
            state = scene.query(frame).entities[index]
            assert low <= state.offset_x <= high
            assert 0.0 <= state.opacity <= 1.0
            assert 0.0 <= state.blur_radius <= 8.0

    @pytest.mark.parametrize("index", range(len(MESSAGES)))
    def test_never_jumps_back_to_origin(self, scene: ChatScene, index: int) -> None:
        """Once a bubble has left its origin it does not return there."""
        origin = scene.composer.from_offset(MESSAGES[index])
        start = scene.start_frame(index)
        offsets = [scene.query(f).entities[index].offset_x for f in range(start + 1, start + 90)]
        assert all(offset != origin for offset in offsets)

    @pytest.mark.parametrize("index", range(len(MESSAGES)))
    def test_fully_visible_after_fade(self, scene: ChatScene, index: int) -> None:
        start = scene.start_frame(index)
        for frame in range(start + 10, start + 90):
            state = scene.query(frame).entities[index]
            assert state.opacity == 1.0
            assert state.blur_radius == 0.0


class TestHeader:
    def test_hidden_before_delay(self, scene: ChatScene) -> None:
        for frame in (-10, 0, 2):
            header = scene.query(frame).header
            assert header.offset_y == -14.0
            assert header.opacity == 0.0

    def test_drops_in(self, scene: ChatScene) -> None:
        header = scene.query(8).header
        assert -14.0 < header.offset_y <= 0.0
        assert 0.0 < header.opacity <= 1.0

    def test_sweep_stays_in_range(self, scene: ChatScene) -> None:
        drop = HeaderMotion().drop
        for frame in range(0, 61):
            header = scene.query(frame).header
            assert -drop <= header.offset_y <= 0.0
            assert 0.0 <= header.opacity <= 1.0

    def test_rests_while_spring_overshoots(self, scene: ChatScene) -> None:
        """Progress past 1 pins the header at rest instead of snapping it back."""
        motion = HeaderMotion()
        spring = Spring(motion.spring, 30)
        overshooting = [
            frame for frame in range(0, 61) if spring.progress(frame - motion.delay_frames) > 1.0
        ]
        assert overshooting
        for frame in overshooting:
            header = scene.query(frame).header
            assert header.opacity == 1.0
            assert header.offset_y == 0.0

    def test_opacity_rises_until_first_overshoot(self, scene: ChatScene) -> None:
        motion = HeaderMotion()
        spring = Spring(motion.spring, 30)
        previous = 0.0
        for frame in range(0, 61):
            if spring.progress(frame - motion.delay_frames) > 1.0:
                break
            opacity = scene.query(frame).header.opacity
            assert opacity >= previous
            previous = opacity

    def test_at_rest_after_duration(self, scene: ChatScene) -> None:
        for frame in (28, 40, 500):
            header = scene.query(frame).header
            assert header.opacity == pytest.approx(1.0, abs=1e-3)
            assert abs(header.offset_y) < 14e-3

    def test_custom_header_motion(self) -> None:
        scene = ChatScene(SceneConfig(), MESSAGES, header=HeaderMotion(delay_frames=10, drop=30.0))
        assert scene.query(10).header.offset_y == -30.0


class TestIdle:
    def test_starts_centered(self, scene: ChatScene) -> None:
        assert scene.query(0).idle_offset_y == 0.0

    def test_bounded(self, scene: ChatScene) -> None:
        values = [scene.idle_offset(f) for f in range(0, 2000, 7)]
        assert all(-2.0 <= v <= 2.0 for v in values)
        assert max(values) > 1.9
        assert min(values) < -1.9

    def test_continuous(self, scene: ChatScene) -> None:
        step_bound = 2.0 * 1.1 / 30 + 1e-9
        for frame in range(-100, 400):
            assert abs(scene.idle_offset(frame + 1) - scene.idle_offset(frame)) <= step_bound

    def test_follows_sine(self, scene: ChatScene) -> None:
        for frame in (5, 33, 97):
            assert scene.idle_offset(frame) == pytest.approx(2.0 * math.sin(frame / 30 * 1.1))

    def test_zero_amplitude(self) -> None:
        scene = ChatScene(SceneConfig(), MESSAGES, idle=IdleMotion(amplitude=0.0))
        assert all(scene.idle_offset(f) == 0.0 for f in range(0, 100, 9))

    def test_negative_amplitude_rejected(self) -> None:
        with pytest.raises(ConfigError):
            IdleMotion(amplitude=-1.0)


class TestPurity:
    def test_repeated_query_identical(self, scene: ChatScene) -> None:
        for frame in (-5, 0, 13, 48, 60, 117, 200, 10_000):
            assert scene.query(frame) == scene.query(frame)

    def test_order_independent(self, scene: ChatScene) -> None:
        frames = list(range(-20, 220))
        forward = {f: scene.query(f) for f in frames}
        shuffled = frames[:]
        random.Random(7).shuffle(shuffled)
        for f in shuffled:
            assert scene.query(f) == forward[f]

    def test_identical_construction_identical_output(self) -> None:
        a = build_scene()
        b = build_scene()
        for frame in range(-10, 250, 3):
            assert a.query(frame) == b.query(frame)

    def test_query_many_matches_query(self, scene: ChatScene) -> None:
        frames = [200, 3, 48, 48, -1]
        assert scene.query_many(frames) == [scene.query(f) for f in frames]

    @pytest.mark.parametrize("frame", [-10**9, -1, 10**9])
    def test_extreme_frames_are_total(self, scene: ChatScene, frame: int) -> None:
        state = scene.query(frame)
        assert all(math.isfinite(e.scale) for e in state.entities)
        assert math.isfinite(state.idle_offset_y)

    def test_player_sees_same_states(self, scene: ChatScene) -> None:
        played: list[SceneRenderState] = []
        player = Player(scene.query, fps=scene.config.fps)
        player.add_sink(lambda ctx, state: played.append(state))
        player.run(60)
        assert played == scene.query_many(range(60))


class TestSerialization:
    def test_as_dict_is_json_compatible(self, scene: ChatScene) -> None:
        data = scene.query(60).as_dict()
        decoded = json.loads(json.dumps(data))
        assert decoded["frame"] == 60
        assert set(decoded["header"]) == {"offset_y", "opacity"}
        assert [e["id"] for e in decoded["entities"]] == [m.id for m in MESSAGES]
        assert set(decoded["entities"][0]) == {"id", "offset_x", "scale", "opacity", "blur_radius"}

    def test_as_dict_values_match(self, scene: ChatScene) -> None:
        state = scene.query(55)
        data = state.as_dict()
        assert data["idle_offset_y"] == state.idle_offset_y
        assert data["entities"][2]["scale"] == state.entities[2].scale
