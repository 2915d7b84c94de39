"""Run-length encoded lists, ASCII art tools, a game player model and small utilities."""

__version__ = "0.1.0"
__all__ = ["ascii_art", "dry", "player", "powers", "rle", "words"]