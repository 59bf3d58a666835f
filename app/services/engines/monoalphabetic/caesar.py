import string
from typing import ClassVar

from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry
from app.services.keys import parse_int_with_default

DEFAULT_SHIFT = 3


def shift_letter(char: str, shift: int) -> str:
    """Shift a single ASCII letter by ``shift`` places, keeping its case."""
    base = ord("A") if char in string.ascii_uppercase else ord("a")
    return chr((ord(char) - base + shift) % 26 + base)


def caesar(text: str, shift: int = DEFAULT_SHIFT, decrypt: bool = False) -> str:
    """
    Shift every ASCII letter of ``text`` by a fixed amount.

    Any integer shift is accepted; it is reduced modulo 26. Letters keep
    their case and everything else is copied through unchanged.

    Args:
        text: Text to transform
        shift: Number of positions to shift forward
        decrypt: Shift backwards instead

    Returns:
        The transformed text
    """
    if decrypt:
        shift = -shift

    result = []
    for char in text:
        if char in string.ascii_letters:
            result.append(shift_letter(char, shift))
        else:
            result.append(char)

    return "".join(result)


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. With only 26 possible keys, it can be trivially broken
    by trying all shifts.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    summary = "Shifts each letter by a fixed number of positions in the alphabet."
    description = (
        "The Caesar cipher shifts each letter in the plaintext by a fixed number "
        "of positions down the alphabet. For example, with a shift of 3, A becomes "
        "D, B becomes E, etc."
    )
    key_hint = "A whole number shift (defaults to 3)"

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt plaintext with the given shift."""
        return caesar(plaintext, self.parse_key(key))

    def decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt by shifting in reverse."""
        return caesar(ciphertext, self.parse_key(key), decrypt=True)

    def parse_key(self, key: str) -> int:
        """Parse key to integer shift value."""
        return parse_int_with_default(key, DEFAULT_SHIFT)

    def explain(self, key: str, decrypt: bool = False) -> str:
        """Generate human-readable explanation."""
        shift = self.parse_key(key)
        direction = "back" if decrypt else "forward"
        example = self.ALPHABET[(-shift if decrypt else shift) % 26]

        return (
            f"Caesar cipher with shift of {shift}. "
            f"Each letter was shifted {direction} {shift} positions in the alphabet, "
            f"so 'A' becomes '{example}'."
        )
