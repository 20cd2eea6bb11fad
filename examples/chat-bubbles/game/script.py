"""Demo conversation."""
from __future__ import annotations

from reel_chat import Message

MESSAGES = [
    Message(id="m1", outbound=False, content="Hey! Are we still on for later?"),
    Message(id="m2", outbound=True, content="Yep, 7pm works. I'll bring the laptop."),
    Message(id="m3", outbound=False, content="Perfect. Want me to grab snacks?"),
    Message(id="m4", outbound=True, content="Yes please. Anything spicy is a win."),
    Message(id="m5", outbound=False, content="Deal. See you soon!"),
    Message(id="m6", outbound=True, content="See you"),
]


def timestamp(index: int) -> str:
    return f"7:{10 + index} PM"
