"""Window set-up, frame pacing and the main game loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import pygame

from shootemup.draw import prepare_scene, present_scene
from shootemup.entities import SCREEN_HEIGHT, SCREEN_WIDTH
from shootemup.input import InputState
from shootemup.stage import load_stage

WINDOW_TITLE = "Shooter 01"
DEFAULT_ASSET_DIR = "../assets"

FRAME_MS = 16
REMAINDER_STEP = 0.667


@dataclass
class FrameLimiter:
    """Paces the loop at about 60 frames a second, carrying fractional milliseconds."""

    then: int = 0
    remainder: float = 0.0
    ticks: Callable[[], int] = field(default=pygame.time.get_ticks, repr=False)
    delay: Callable[[int], object] = field(default=pygame.time.delay, repr=False)

    def next_wait(self, now: int) -> int:
        """Return how many milliseconds to sleep, given the current tick count."""
        wait = int(FRAME_MS + self.remainder)
        self.remainder -= int(self.remainder)
        wait -= now - self.then
        wait = max(wait, 1)
        self.remainder += REMAINDER_STEP
        return wait

    def wait(self) -> int:
        """Sleep until the next frame is due; return the time slept."""
        duration = self.next_wait(self.ticks())
        self.delay(duration)
        self.then = self.ticks()
        return duration


def init_display() -> pygame.Surface:
    """Open the game window; raise RuntimeError if that fails."""
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise RuntimeError(f"Couldn't initialize SDL: {exc}") from exc
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    except pygame.error as exc:
        raise RuntimeError(
            f"Failed to open {SCREEN_WIDTH} x {SCREEN_HEIGHT} window: {exc}"
        ) from exc
    pygame.display.set_caption(WINDOW_TITLE)
    return screen


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until the window is closed."""
    parser = argparse.ArgumentParser(prog="shootemup", description="A small side-scrolling shooter.")
    parser.add_argument(
        "--assets",
        default=DEFAULT_ASSET_DIR,
        help="directory holding personaje.png and bala.png",
    )
    args = parser.parse_args(argv)

    try:
        screen = init_display()
    except RuntimeError as exc:
        print(exc)
        return 1

    try:
        try:
            stage = load_stage(args.assets)
        except (OSError, ValueError) as exc:
            print(exc, file=sys.stderr)
            return 1

        keys = InputState()
        limiter = FrameLimiter(then=pygame.time.get_ticks())
        while not keys.should_close:
            prepare_scene(screen)
            keys.poll()
            stage.logic(keys)
            stage.draw(screen)
            present_scene()
            limiter.wait()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())