"""reel-chat - Staggered chat-bubble entrance scene for the reel engine."""
from __future__ import annotations

from reel_chat.composer import BubbleComposer
from reel_chat.motion import BubbleMotion, HeaderMotion, IdleMotion
from reel_chat.scene import ChatScene
from reel_chat.types import (
    HeaderState,
    Layout,
    Message,
    Phase,
    RenderState,
    SceneRenderState,
)

__all__ = [
    "BubbleComposer",
    "BubbleMotion",
    "ChatScene",
    "HeaderMotion",
    "HeaderState",
    "IdleMotion",
    "Layout",
    "Message",
    "Phase",
    "RenderState",
    "SceneRenderState",
]
