"""Polygraphic cipher engines."""

from app.services.engines.polygraphic.playfair import KeySquare, PlayfairEngine, playfair

__all__ = [
    "KeySquare",
    "PlayfairEngine",
    "playfair",
]
