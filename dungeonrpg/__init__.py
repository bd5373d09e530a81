"""A small turn-based dungeon role-playing game with a text menu."""

__version__ = "0.1.0"