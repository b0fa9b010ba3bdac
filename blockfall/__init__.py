"""A falling-block puzzle game on a 20x10 grid, with a pygame window."""

__version__ = "0.1.0"