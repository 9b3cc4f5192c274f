"""The playing field: the player's fighter and the bullets it fires."""

from __future__ import annotations

import os
from collections.abc import Container
from pathlib import Path
from typing import Any

import pygame

from shootemup.draw import blit, load_texture
from shootemup.entities import (
    PLAYER_BULLET_SPEED,
    PLAYER_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Entity,
)
from shootemup.input import (
    SCANCODE_DOWN,
    SCANCODE_LCTRL,
    SCANCODE_LEFT,
    SCANCODE_RIGHT,
    SCANCODE_UP,
)

PLAYER_START = (100, 100)
PLAYER_MARGIN = 70
BULLET_OFFSET = 35
RELOAD_FRAMES = 8

PLAYER_TEXTURE = "personaje.png"
BULLET_TEXTURE = "bala.png"


def _size(texture: Any) -> tuple[int, int]:
    return texture.get_size() if texture is not None else (0, 0)


class Stage:
    """Holds the player and live bullets, and advances them each frame."""

    def __init__(self, player_texture: Any = None, bullet_texture: Any = None) -> None:
        self.bullet_texture = bullet_texture
        width, height = _size(player_texture)
        x, y = PLAYER_START
        self.player = Entity(x=x, y=y, w=width, h=height, texture=player_texture)
        self.fighters: list[Entity] = [self.player]
        self.bullets: list[Entity] = []

    def fire_bullet(self) -> Entity:
        """Launch a bullet from the player's nose and start the reload."""
        player = self.player
        width, height = _size(self.bullet_texture)
        bullet = Entity(
            x=player.x + BULLET_OFFSET,
            y=player.y,
            w=width,
            h=height,
            dx=PLAYER_BULLET_SPEED,
            health=1,
            texture=self.bullet_texture,
        )
        bullet.y += player.h // 2 - bullet.h // 2
        self.bullets.append(bullet)
        player.reload = RELOAD_FRAMES
        return bullet

    def do_player(self, keys: Container[int]) -> None:
        """Steer the player from the held keys and fire when reloaded."""
        player = self.player
        player.dx = player.dy = 0

        if player.reload > 0:
            player.reload -= 1

        if SCANCODE_UP in keys and player.y > 0:
            player.dy = -PLAYER_SPEED
        if SCANCODE_DOWN in keys and player.y < SCREEN_HEIGHT - PLAYER_MARGIN:
            player.dy = PLAYER_SPEED
        if SCANCODE_LEFT in keys and player.x > 0:
            player.dx = -PLAYER_SPEED
        if SCANCODE_RIGHT in keys and player.x < SCREEN_WIDTH - PLAYER_MARGIN:
            player.dx = PLAYER_SPEED

        if SCANCODE_LCTRL in keys and player.reload == 0:
            self.fire_bullet()

        player.move()

    def do_bullets(self) -> None:
        """Move every bullet and drop those past the right edge."""
        for bullet in self.bullets:
            bullet.move()
        self.bullets = [bullet for bullet in self.bullets if bullet.x <= SCREEN_WIDTH]

    def logic(self, keys: Container[int]) -> None:
        """Advance the stage by one frame."""
        self.do_player(keys)
        self.do_bullets()

    def draw(self, target: pygame.Surface) -> None:
        """Draw the player, then the bullets."""
        for entity in (self.player, *self.bullets):
            if entity.texture is not None:
                blit(target, entity.texture, entity.x, entity.y)


def load_stage(asset_dir: str | os.PathLike[str]) -> Stage:
    """Build a stage with the player and bullet images from a directory."""
    directory = Path(asset_dir)
    player_texture = load_texture(directory / PLAYER_TEXTURE)
    bullet_texture = load_texture(directory / BULLET_TEXTURE)
    return Stage(player_texture, bullet_texture)