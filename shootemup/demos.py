"""Two small display demos: a plain white window and a centred sprite."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import pygame

from shootemup.entities import SCREEN_HEIGHT, SCREEN_WIDTH

WINDOW_TITLE = "SDL Test"
SPRITE_SCALE = 6
SPRITE_AREA = 1000
WHITE = (0xFF, 0xFF, 0xFF)
BLACK = (0, 0, 0)
SPRITE_FPS = 60


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def sprite_destination(width: int, height: int) -> pygame.Rect:
    """Shrink a sprite of this size to a sixth and centre it in a 1000x1000 area."""
    w = _trunc_div(width, SPRITE_SCALE)
    h = _trunc_div(height, SPRITE_SCALE)
    x = _trunc_div(SPRITE_AREA - w, 2)
    y = _trunc_div(SPRITE_AREA - h, 2)
    return pygame.Rect(x, y, w, h)


def _init_video() -> bool:
    try:
        pygame.display.init()
    except pygame.error as exc:
        print(f"SDL could not initialize! SDL_Error: {exc}")
        return False
    return True


def window_main(argv: Sequence[str] | None = None) -> int:
    """Show a white full-screen window until it is closed."""
    argparse.ArgumentParser(
        prog="sdl-window", description="Show a white full-screen window."
    ).parse_args(argv)

    if not _init_video():
        return 1
    try:
        try:
            surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        except pygame.error:
            print("Error at window creation")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        surface.fill(WHITE)
        pygame.display.flip()
        while pygame.event.wait().type != pygame.QUIT:
            pass
    finally:
        pygame.quit()
    return 0


def sprite_main(argv: Sequence[str] | None = None) -> int:
    """Draw one image, shrunk and centred, until the window is closed."""
    parser = argparse.ArgumentParser(prog="sdl-sprite", description="Draw a sprite in a window.")
    parser.add_argument("image", nargs="?", default="personaje.png", help="image file to show")
    args = parser.parse_args(argv)

    if not _init_video():
        return 1
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error:
            print("Error at window creation")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)

        try:
            sprite = pygame.image.load(args.image)
        except (pygame.error, OSError) as exc:
            print(f"Error loading sprite: {exc}")
            return 2

        dest = sprite_destination(*sprite.get_size())
        scaled = pygame.transform.scale(sprite, dest.size)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            screen.fill(BLACK)
            screen.blit(scaled, dest)
            pygame.display.flip()
            clock.tick(SPRITE_FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(sprite_main())