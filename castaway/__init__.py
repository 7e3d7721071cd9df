"""A turn-based island survival game for the terminal, with its game logic usable as a library."""

__version__ = "0.1.0"