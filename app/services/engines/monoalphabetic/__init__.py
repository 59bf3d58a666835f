"""Monoalphabetic cipher engines."""

from app.services.engines.monoalphabetic.caesar import CaesarEngine, caesar

__all__ = [
    "CaesarEngine",
    "caesar",
]
