"""Chat Bubbles — staggered chat entrance preview.

Exercises reel, reel-spring, reel-tween, reel-schedule and reel-chat. The
scene computes numbers only; everything drawn here is this preview's job.

Controls:
  R       Restart from frame 0
  Esc     Quit

Headless:
  python main.py --frames 240 --dump frames.jsonl
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from game.recorder import FrameRecorder
from game.script import MESSAGES, timestamp
from reel import FrameContext, Player, SceneConfig, Timing
from reel_chat import ChatScene, SceneRenderState
from ui.bubbles import build_bubble, draw_bubble, slot_anchors
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.header import draw_header

logger = logging.getLogger("chat-bubbles")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Chat Bubbles — reel visual demo")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--width", type=int, default=SCREEN_W, help=f"Viewport width (default: {SCREEN_W})")
    p.add_argument("--height", type=int, default=SCREEN_H, help=f"Viewport height (default: {SCREEN_H})")
    p.add_argument("--stagger", type=int, default=18, help="Frames between bubbles (default: 18)")
    p.add_argument("--frames", type=int, default=None,
                   help="Render this many frames without a window and exit")
    p.add_argument("--dump", type=str, default=None,
                   metavar="FILE", help="Save JSONL frame states to FILE on exit")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def build_scene(args: argparse.Namespace) -> ChatScene:
    return ChatScene(
        SceneConfig(fps=args.fps, width=args.width, height=args.height),
        MESSAGES,
        Timing(stagger_frames=args.stagger),
    )


def run_headless(scene: ChatScene, frames: int, recorder: FrameRecorder | None) -> None:
    player: Player[SceneRenderState] = Player(scene.query, fps=scene.config.fps)
    if recorder is not None:
        player.add_sink(recorder)
    player.run(frames)


def run_window(scene: ChatScene, recorder: FrameRecorder | None) -> None:
    pygame.init()
    cfg = scene.config
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption("Chat Bubbles — reel demo")

    layout = scene.layout
    body_font = pygame.font.SysFont("sans", layout.body_font_size)
    meta_font = pygame.font.SysFont("sans", layout.footer_font_size)
    title_font = pygame.font.SysFont("sans", layout.title_font_size, bold=True)
    subtitle_font = pygame.font.SysFont("sans", layout.meta_font_size)

    messages = list(scene.messages)
    bubbles = [
        build_bubble(body_font, meta_font, m, timestamp(i), layout)
        for i, m in enumerate(messages)
    ]
    anchors = slot_anchors(bubbles, messages, layout, cfg.width, cfg.height)

    player: Player[SceneRenderState] = Player(scene.query, fps=cfg.fps)

    def handle_events(ctx: FrameContext, state: SceneRenderState) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                ctx.request_stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    ctx.request_stop()
                elif event.key == pygame.K_r:
                    player.seek(0)

    def paint(ctx: FrameContext, state: SceneRenderState) -> None:
        screen.fill(BG_COLOR)
        for bubble, anchor, message, entity in zip(bubbles, anchors, messages, state.entities):
            draw_bubble(screen, bubble, anchor, message.outbound, entity, state.idle_offset_y)
        draw_header(screen, title_font, subtitle_font, layout, state.header)
        pygame.display.flip()

    player.add_sink(handle_events)
    player.add_sink(paint)
    if recorder is not None:
        player.add_sink(recorder)
    player.run_forever()
    pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    scene = build_scene(args)
    recorder = FrameRecorder() if args.dump else None

    if args.frames is not None:
        run_headless(scene, args.frames, recorder)
    else:
        run_window(scene, recorder)

    if args.dump and recorder is not None:
        n = recorder.write(args.dump)
        logger.info("wrote %d frames to %s", n, args.dump)
    sys.exit()


if __name__ == "__main__":
    main()
