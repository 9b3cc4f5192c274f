"""Keyboard state tracking driven by pygame events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pygame

from shootemup.entities import MAX_KEYBOARD_KEYS

# Scancodes are layout independent and fixed by SDL.
SCANCODE_RIGHT = 79
SCANCODE_LEFT = 80
SCANCODE_DOWN = 81
SCANCODE_UP = 82
SCANCODE_LCTRL = 224


def _tracked(scancode: int, repeat: int) -> bool:
    return repeat == 0 and 0 <= scancode < MAX_KEYBOARD_KEYS


@dataclass
class InputState:
    """Which keys are held down, and whether the window was asked to close."""

    keys: set[int] = field(default_factory=set)
    should_close: bool = False

    def key_down(self, scancode: int, repeat: int = 0) -> None:
        """Record a key press; auto-repeats and out-of-range keys are ignored."""
        if _tracked(scancode, repeat):
            self.keys.add(scancode)

    def key_up(self, scancode: int, repeat: int = 0) -> None:
        """Record a key release; auto-repeats and out-of-range keys are ignored."""
        if _tracked(scancode, repeat):
            self.keys.discard(scancode)

    def pressed(self, scancode: int) -> bool:
        """Return whether the key with this scancode is held down."""
        return scancode in self.keys

    def __contains__(self, scancode: object) -> bool:
        return isinstance(scancode, int) and self.pressed(scancode)

    def handle_event(self, event: Any) -> None:
        """Update the state from one pygame event."""
        if event.type == pygame.QUIT:
            self.should_close = True
        elif event.type == pygame.KEYDOWN:
            self.key_down(event.scancode, getattr(event, "repeat", 0))
        elif event.type == pygame.KEYUP:
            self.key_up(event.scancode, getattr(event, "repeat", 0))

    def poll(self) -> bool:
        """Drain the pygame event queue; return whether to close the window."""
        for event in pygame.event.get():
            self.handle_event(event)
        return self.should_close