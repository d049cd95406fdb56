"""Window, event loop and keyboard handling for the asteroid shooter."""

from __future__ import annotations

import argparse
from typing import Mapping, Sequence

import pygame

from drillbox.entities import SCREEN_HEIGHT, SCREEN_WIDTH, Key, Spaceship

TITLE = "Blasteroids"
FRAMES_PER_SECOND = 60
BACKGROUND = (0, 0, 0)

_KEY_BINDINGS: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_a: Key.ROTATE_CCW,
    pygame.K_f: Key.ROTATE_CW,
}


def pressed_keys(state: Sequence[bool] | Mapping[int, bool]) -> frozenset[Key]:
    """Translate a keyboard state, indexed by key code, into held controls."""
    return frozenset(key for code, key in _KEY_BINDINGS.items() if state[code])


def run(max_frames: int | None = None) -> int:
    """Open the game window and play until it is closed.

    Stops after ``max_frames`` rendered frames when given. Returns the number
    of frames rendered.
    """
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        ship = Spaceship()
        frames = 0
        running = True
        while running and (max_frames is None or frames < max_frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            ship.update(pressed_keys(pygame.key.get_pressed()))
            screen.fill(BACKGROUND)
            ship.draw(screen)
            pygame.display.flip()
            frames += 1
            clock.tick(FRAMES_PER_SECOND)
        return frames
    finally:
        pygame.quit()


def _frame_count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("frame count must not be negative")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="blasteroids", description="Fly a ship around.")
    parser.add_argument(
        "--frames",
        type=_frame_count,
        default=None,
        help="stop after this many frames",
    )
    args = parser.parse_args(argv)
    run(args.frames)
    return 0