from typing import Iterator

from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry
from app.services.keys import parse_int_with_default

DEFAULT_RAILS = 3


def _zigzag(length: int, rails: int) -> Iterator[int]:
    """Yield the rail each of ``length`` consecutive positions is written on."""
    rail = 0
    direction = 1  # 1 = down, -1 = up

    for _ in range(length):
        yield rail

        # Change direction at top or bottom
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1

        rail += direction


def _encrypt(plaintext: str, rails: int) -> str:
    fence: list[list[str]] = [[] for _ in range(rails)]

    for char, rail in zip(plaintext, _zigzag(len(plaintext), rails)):
        fence[rail].append(char)

    # Read off each rail
    return "".join("".join(row) for row in fence)


def _decrypt(ciphertext: str, rails: int) -> str:
    n = len(ciphertext)

    # Mark the cells the zigzag passes through. Each column holds exactly
    # one marked cell, so the grid is kept as the marked columns per rail.
    marked: list[list[int]] = [[] for _ in range(rails)]
    for col, rail in enumerate(_zigzag(n, rails)):
        marked[rail].append(col)

    # Fill marked cells rail by rail, left to right
    fence: list[str] = [""] * n
    chars = iter(ciphertext)
    for columns in marked:
        for col in columns:
            fence[col] = next(chars)

    # Read back along the zigzag, one cell per column
    return "".join(fence)


def rail_fence(text: str, rails: int = DEFAULT_RAILS, decrypt: bool = False) -> str:
    """
    Apply the Rail Fence transposition to ``text``.

    Every character, including spaces and punctuation, occupies a position
    on the fence. One or fewer rails leaves the text unchanged, and so does
    a rail count at least as long as the text, since the zigzag never turns.

    Args:
        text: Text to transform
        rails: Number of rails
        decrypt: Reverse the transposition instead

    Returns:
        The transformed text
    """
    if rails <= 1 or rails >= len(text):
        return text

    if decrypt:
        return _decrypt(text, rails)
    return _encrypt(text, rails)


@EngineRegistry.register
class RailFenceEngine(CipherEngine):
    """
    Rail Fence cipher engine.

    The Rail Fence cipher writes the plaintext in a zigzag pattern across
    a number of "rails" (rows), then reads off each rail in order to
    produce the ciphertext.

    Example with 3 rails:
    Plaintext: WEAREDISCOVEREDFLEEATONCE

    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

    Read off rows: WECRLTE + ERDSOEEFEAOC + AIVDEN
    """

    name = "Rail Fence Cipher"
    cipher_type = CipherType.RAIL_FENCE
    cipher_family = CipherFamily.TRANSPOSITION
    summary = "Writes text in zigzag pattern across multiple rails."
    description = (
        "The Rail Fence cipher writes the plaintext in a zigzag pattern across "
        "multiple \"rails\" or lines, then reads off the letters row by row to "
        "create the ciphertext."
    )
    key_hint = "Number of rails (defaults to 3)"

    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt using the specified number of rails."""
        return rail_fence(plaintext, self.parse_key(key))

    def decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt using the specified number of rails."""
        return rail_fence(ciphertext, self.parse_key(key), decrypt=True)

    def parse_key(self, key: str) -> int:
        """Parse key to number of rails."""
        return parse_int_with_default(key, DEFAULT_RAILS)

    def explain(self, key: str, decrypt: bool = False) -> str:
        """Generate human-readable explanation."""
        rails = self.parse_key(key)

        if rails <= 1:
            return "Rail Fence cipher with fewer than two rails. The text was left unchanged."

        if decrypt:
            return (
                f"Rail Fence cipher with {rails} rails. "
                f"The ciphertext was laid back onto the {rails} rows of the zigzag "
                f"and read off diagonally to recover the plaintext."
            )
        return (
            f"Rail Fence cipher with {rails} rails. "
            f"The plaintext is written in a zigzag pattern across {rails} rows, "
            f"then each row is read in sequence to form the ciphertext."
        )
