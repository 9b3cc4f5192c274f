"""A small side-scrolling shoot 'em up and window/sprite demos built on pygame."""

__version__ = "0.1.0"

__all__ = ["app", "demos", "draw", "entities", "input", "stage"]