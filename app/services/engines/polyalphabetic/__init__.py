"""Polyalphabetic cipher engines."""

from app.services.engines.polyalphabetic.vigenere import VigenereEngine, vigenere

__all__ = [
    "VigenereEngine",
    "vigenere",
]
