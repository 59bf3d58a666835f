import string

from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


def vigenere(text: str, key: str, decrypt: bool = False) -> str:
    """
    Apply the Vigenère cipher to ``text``.

    Each letter is shifted by the next letter of the repeating keyword
    (A=0 ... Z=25). Only letters consume key positions, so punctuation and
    spaces leave the key stream where it was and decryption stays in step
    with encryption. An empty key returns the text unchanged.

    Args:
        text: Text to transform
        key: Keyword; case-insensitive
        decrypt: Shift backwards instead

    Returns:
        The transformed text
    """
    if not key:
        return text

    key = key.upper()
    result = []
    key_index = 0

    for char in text:
        if char in string.ascii_letters:
            base = ord("A") if char in string.ascii_uppercase else ord("a")
            shift = ord(key[key_index % len(key)]) - ord("A")
            if decrypt:
                shift = -shift
            result.append(chr((ord(char) - base + shift) % 26 + base))
            key_index += 1
        else:
            result.append(char)

    return "".join(result)


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    summary = "Uses a keyword to shift letters by varying amounts."
    description = (
        "The Vigenère cipher uses a keyword to determine the shift for each letter. "
        "Each letter of the keyword corresponds to a shift value, creating a more "
        "complex encryption than Caesar cipher."
    )
    key_hint = "A keyword, e.g. LEMON"
    requires_keyword = True

    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt using the keyword."""
        return vigenere(plaintext, self.parse_key(key))

    def decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt using the keyword."""
        return vigenere(ciphertext, self.parse_key(key), decrypt=True)

    def parse_key(self, key: str) -> str:
        """Parse key to an upper-case keyword."""
        return (key or "").upper()

    def explain(self, key: str, decrypt: bool = False) -> str:
        """Generate human-readable explanation."""
        keyword = self.parse_key(key)
        if not keyword:
            return "Vigenère cipher with no keyword. The text was left unchanged."

        shifts = ", ".join(
            f"{c}={(ord(c) - ord('A')) % 26}" for c in keyword
        )
        direction = "backward" if decrypt else "forward"

        return (
            f"Vigenère cipher with keyword '{keyword}' (length {len(keyword)}). "
            f"Letters were shifted {direction} by the repeating key shifts {shifts}; "
            f"non-letters were copied without using up a key letter."
        )
