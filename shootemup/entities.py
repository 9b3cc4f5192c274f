"""Game-wide constants and the moving entity shared by fighters and bullets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SCREEN_WIDTH = 960
SCREEN_HEIGHT = 544

PLAYER_SPEED = 4
PLAYER_BULLET_SPEED = 16

MAX_KEYBOARD_KEYS = 350


@dataclass
class Entity:
    """Anything on the stage that has a position, a size and a velocity."""

    x: float = 0.0
    y: float = 0.0
    w: int = 0
    h: int = 0
    dx: float = 0.0
    dy: float = 0.0
    health: int = 0
    reload: int = 0
    texture: Any = None

    def move(self) -> None:
        """Advance the entity by one frame of its velocity."""
        self.x += self.dx
        self.y += self.dy