"""Chat scene entities and per-frame render state."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Message:
    """One chat bubble. Owned by the caller; the engine reads only id and direction.

    Attributes:
        id: Unique identifier within a scene.
        outbound: Sent by the local user. Outbound bubbles enter from the
            right, inbound ones from the left.
        content: Opaque payload handed through to the renderer.
    """

    id: str
    outbound: bool
    content: str = ""


class Phase(Enum):
    PENDING = "pending"
    ENTERING = "entering"
    SETTLED = "settled"


@dataclass(frozen=True, slots=True)
class RenderState:
    id: str
    offset_x: float
    scale: float
    opacity: float
    blur_radius: float


@dataclass(frozen=True, slots=True)
class HeaderState:
    offset_y: float
    opacity: float


@dataclass(frozen=True)
class SceneRenderState:
    """Everything the renderer needs to paint one frame.

    ``entities`` follows message order, which is also the paint order.
    """

    frame: int
    header: HeaderState
    idle_offset_y: float
    entities: tuple[RenderState, ...]

    def entity(self, entity_id: str) -> RenderState:
        for state in self.entities:
            if state.id == entity_id:
                return state
        raise KeyError(f"No entity with id {entity_id!r} in frame {self.frame}")

    def as_dict(self) -> dict[str, Any]:
        """JSON-compatible form for the rendering collaborator."""
        return {
            "frame": self.frame,
            "header": asdict(self.header),
            "idle_offset_y": self.idle_offset_y,
            "entities": [asdict(state) for state in self.entities],
        }


def _js_round(value: float) -> int:
    # Half-up rounding, unlike Python's round-half-even.
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Layout:
    """Viewport-derived geometry passed through to the renderer untouched."""

    top_bar_height: int
    padding_x: int
    padding_y: int
    gap_y: int
    bubble_max_width: int
    corner_radius: int
    bubble_padding_x: int
    bubble_padding_y: int
    title_font_size: int
    meta_font_size: int
    body_font_size: int
    footer_font_size: int

    @classmethod
    def for_viewport(cls, width: int, height: int) -> Layout:
        return cls(
            top_bar_height=max(56, _js_round(height * 0.09)),
            padding_x=max(28, _js_round(width * 0.05)),
            padding_y=max(22, _js_round(height * 0.04)),
            gap_y=max(10, _js_round(height * 0.012)),
            bubble_max_width=max(420, _js_round(width * 0.68)),
            corner_radius=18,
            bubble_padding_x=max(14, _js_round(width * 0.018)),
            bubble_padding_y=max(10, _js_round(height * 0.012)),
            title_font_size=max(18, _js_round(width * 0.022)),
            meta_font_size=max(12, _js_round(width * 0.014)),
            body_font_size=max(16, _js_round(width * 0.02)),
            footer_font_size=max(11, _js_round(width * 0.013)),
        )

    @property
    def chat_inset_top(self) -> int:
        return self.top_bar_height + self.padding_y
