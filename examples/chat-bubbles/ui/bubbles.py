"""Bubble surfaces and per-frame paint transforms."""
from __future__ import annotations

import pygame

from reel_chat import Layout, Message, RenderState
from ui.constants import (
    BUBBLE_BORDER,
    LINE_SPACING,
    META_COLOR,
    RECEIVED_COLOR,
    SENT_COLOR,
    TAIL_SIZE,
    TEXT_COLOR,
)


def wrap_text(font: pygame.font.Font, text: str, max_w: int) -> list[str]:
    """Greedy word wrap to *max_w* pixels."""
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}".strip()
        if line and font.size(candidate)[0] > max_w:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines or [""]


def build_bubble(
    font: pygame.font.Font,
    meta_font: pygame.font.Font,
    message: Message,
    stamp: str,
    layout: Layout,
) -> pygame.Surface:
    """Render one bubble at rest, tail included. Animation is applied at blit time."""
    pad_x = layout.bubble_padding_x
    pad_y = layout.bubble_padding_y
    lines = wrap_text(font, message.content, layout.bubble_max_width - 2 * pad_x)
    line_h = int(font.get_linesize() * LINE_SPACING)
    footer = stamp + ("  ✓✓" if message.outbound else "")
    footer_surf = meta_font.render(footer, True, META_COLOR)

    text_w = max(font.size(line)[0] for line in lines)
    body_w = max(text_w, footer_surf.get_width()) + 2 * pad_x
    body_h = line_h * len(lines) + footer_surf.get_height() + 6 + 2 * pad_y

    surf = pygame.Surface((body_w + TAIL_SIZE, body_h), pygame.SRCALPHA)
    body_x = 0 if message.outbound else TAIL_SIZE
    fill = SENT_COLOR if message.outbound else RECEIVED_COLOR
    rect = pygame.Rect(body_x, 0, body_w, body_h)
    pygame.draw.rect(surf, fill, rect, border_radius=layout.corner_radius)
    pygame.draw.rect(surf, BUBBLE_BORDER, rect, width=1, border_radius=layout.corner_radius)

    # Tail: small triangle at the bottom corner facing the sender side.
    tail_y = body_h - 10 - TAIL_SIZE
    if message.outbound:
        tip = (body_x + body_w + TAIL_SIZE - 2, tail_y + TAIL_SIZE)
        pts = [(body_x + body_w - 4, tail_y), tip, (body_x + body_w - 4, tail_y + TAIL_SIZE)]
    else:
        tip = (2, tail_y + TAIL_SIZE)
        pts = [(body_x + 4, tail_y), tip, (body_x + 4, tail_y + TAIL_SIZE)]
    pygame.draw.polygon(surf, fill, pts)

    y = pad_y
    for line in lines:
        surf.blit(font.render(line, True, TEXT_COLOR), (body_x + pad_x, y))
        y += line_h
    surf.blit(footer_surf, (body_x + body_w - pad_x - footer_surf.get_width(), y + 6))
    return surf


def slot_anchors(
    bubbles: list[pygame.Surface],
    messages: list[Message],
    layout: Layout,
    screen_w: int,
    screen_h: int,
) -> list[tuple[int, int]]:
    """Bottom anchor of each bubble, stacked upward from the bottom padding.

    Outbound anchors are bottom-right corners, inbound ones bottom-left.
    """
    anchors: list[tuple[int, int]] = []
    y = screen_h - layout.padding_y
    for surf, message in zip(reversed(bubbles), reversed(messages)):
        x = screen_w - layout.padding_x if message.outbound else layout.padding_x
        anchors.append((x, y))
        y -= surf.get_height() + layout.gap_y
    anchors.reverse()
    return anchors


def _blurred(surf: pygame.Surface, radius: float) -> pygame.Surface:
    if radius < 0.5:
        return surf
    factor = 1.0 + radius / 2.0
    w, h = surf.get_size()
    small = pygame.transform.smoothscale(
        surf, (max(1, int(w / factor)), max(1, int(h / factor)))
    )
    return pygame.transform.smoothscale(small, (w, h))


def draw_bubble(
    target: pygame.Surface,
    bubble: pygame.Surface,
    anchor: tuple[int, int],
    outbound: bool,
    state: RenderState,
    idle_offset_y: float,
) -> None:
    """Paint *bubble* with the frame's offset, scale, opacity and blur."""
    if state.opacity <= 0.0:
        return
    w, h = bubble.get_size()
    sw = max(1, round(w * state.scale))
    sh = max(1, round(h * state.scale))
    surf = pygame.transform.smoothscale(bubble, (sw, sh))
    surf = _blurred(surf, state.blur_radius)
    surf.set_alpha(round(255 * state.opacity))

    ax, ay = anchor
    x = ax - sw if outbound else ax
    x += state.offset_x
    y = ay - sh + idle_offset_y
    target.blit(surf, (round(x), round(y)))
