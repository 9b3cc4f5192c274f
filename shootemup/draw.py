"""Texture loading and scene drawing helpers."""

from __future__ import annotations

import logging
import os

import pygame

log = logging.getLogger(__name__)

BACKGROUND = (96, 128, 255, 255)


def load_texture(path: str | os.PathLike[str]) -> pygame.Surface:
    """Load an image file as a surface.

    Raises FileNotFoundError for a missing file and ValueError for one
    that cannot be decoded.
    """
    log.info("Loading %s", path)
    try:
        return pygame.image.load(os.fspath(path))
    except pygame.error as exc:
        raise ValueError(f"cannot load {path}: {exc}") from exc


def blit(target: pygame.Surface, texture: pygame.Surface, x: float, y: float) -> pygame.Rect:
    """Draw a texture at its natural size with its top-left corner at (x, y)."""
    return target.blit(texture, (int(x), int(y)))


def prepare_scene(target: pygame.Surface) -> None:
    """Clear the target to the background colour."""
    target.fill(BACKGROUND)


def present_scene() -> None:
    """Show the frame that was drawn."""
    pygame.display.flip()