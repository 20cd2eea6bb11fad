"""Top bar renderer."""
from __future__ import annotations

import pygame

from reel_chat import HeaderState, Layout
from ui.constants import (
    META_COLOR,
    ONLINE_DOT,
    SUBTITLE_TEXT,
    TEXT_COLOR,
    TITLE_TEXT,
    TOP_BAR_BG,
    TOP_BAR_BORDER,
)


def draw_header(
    target: pygame.Surface,
    title_font: pygame.font.Font,
    meta_font: pygame.font.Font,
    layout: Layout,
    state: HeaderState,
) -> None:
    """Draw the top bar shifted by the header offset and faded by its opacity."""
    w = target.get_width()
    h = layout.top_bar_height
    bar = pygame.Surface((w, h), pygame.SRCALPHA)
    bar.fill(TOP_BAR_BG)
    pygame.draw.line(bar, TOP_BAR_BORDER, (0, h - 1), (w, h - 1))

    title = title_font.render(TITLE_TEXT, True, TEXT_COLOR)
    subtitle = meta_font.render(SUBTITLE_TEXT, True, META_COLOR)
    block_h = title.get_height() + 2 + subtitle.get_height()
    y = (h - block_h) // 2
    bar.blit(title, (layout.padding_x, y))
    bar.blit(subtitle, (layout.padding_x, y + title.get_height() + 2))

    online = meta_font.render("Online", True, META_COLOR)
    ox = w - layout.padding_x - online.get_width()
    bar.blit(online, (ox, (h - online.get_height()) // 2))
    pygame.draw.circle(bar, ONLINE_DOT, (ox - 15, h // 2), 5)

    bar.set_alpha(round(255 * state.opacity))
    target.blit(bar, (0, round(state.offset_y)))
