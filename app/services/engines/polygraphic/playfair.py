from dataclasses import dataclass

from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
SIZE = 5
FILLER = "X"
# Used instead of FILLER when the letter being padded is FILLER itself
ALT_FILLER = "Q"


def _clean(text: str) -> str:
    """Upper-case, fold J into I and drop everything outside the square."""
    text = text.upper().replace("J", "I")
    return "".join(c for c in text if c in ALPHABET)


@dataclass(frozen=True)
class KeySquare:
    """5x5 Playfair key square, stored row by row as a 25-letter string."""

    letters: str

    @classmethod
    def from_keyword(cls, keyword: str) -> "KeySquare":
        """Build the key square from a keyword."""
        # Remove duplicates while preserving order
        seen: dict[str, None] = dict.fromkeys(_clean(keyword))

        # Add remaining alphabet letters
        for char in ALPHABET:
            seen.setdefault(char, None)

        return cls("".join(seen))

    def position(self, char: str) -> tuple[int, int]:
        """Find the row and column of a letter in the square."""
        idx = self.letters.index(char)
        return divmod(idx, SIZE)

    def letter_at(self, row: int, col: int) -> str:
        return self.letters[(row % SIZE) * SIZE + col % SIZE]

    def rows(self) -> list[list[str]]:
        return [list(self.letters[i:i + SIZE]) for i in range(0, len(self.letters), SIZE)]


def prepare_digraphs(text: str) -> list[tuple[str, str]]:
    """
    Split text into Playfair digraphs.

    - Convert to uppercase
    - Replace J with I
    - Drop non-letters
    - Insert X between double letters
    - Pad with X if a single letter is left over

    A doubled or trailing X is split or padded with Q instead, so no digraph
    ever holds two equal letters.
    """
    text = _clean(text)

    result = []
    i = 0
    while i < len(text):
        first = text[i]
        if i + 1 < len(text) and text[i + 1] != first:
            result.append((first, text[i + 1]))
            i += 2
        else:
            result.append((first, ALT_FILLER if first == FILLER else FILLER))
            i += 1

    return result


def transform_digraph(
    square: KeySquare,
    a: str,
    b: str,
    decrypt: bool = False,
) -> tuple[str, str]:
    """
    Substitute one digraph using the key square.

    Same row: take the letters to the right (left when decrypting).
    Same column: take the letters below (above when decrypting).
    Rectangle: swap columns.
    """
    row_a, col_a = square.position(a)
    row_b, col_b = square.position(b)
    step = -1 if decrypt else 1

    if row_a == row_b:
        return (
            square.letter_at(row_a, col_a + step),
            square.letter_at(row_b, col_b + step),
        )
    if col_a == col_b:
        return (
            square.letter_at(row_a + step, col_a),
            square.letter_at(row_b + step, col_b),
        )
    return square.letter_at(row_a, col_b), square.letter_at(row_b, col_a)


def playfair(text: str, key: str, decrypt: bool = False) -> str:
    """
    Apply the Playfair cipher to ``text``.

    Output is upper-case letters only. Fillers inserted while forming
    digraphs are part of the message from then on: decrypting gives back
    the padded text ("HELLO" comes back as "HELXLO"), not the original.
    An empty key returns the text unchanged.

    Args:
        text: Text to transform
        key: Keyword seeding the key square
        decrypt: Apply the inverse substitution

    Returns:
        The transformed text
    """
    if not key:
        return text

    square = KeySquare.from_keyword(key)

    result = []
    for a, b in prepare_digraphs(text):
        result.extend(transform_digraph(square, a, b, decrypt))

    return "".join(result)


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'X' (e.g., "BALLOON" -> "BA LX LO ON"),
    and an odd final letter is padded with 'X'. A doubled or trailing 'X' is
    split or padded with 'Q' instead ("BOX" -> "BO XQ").
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    summary = "Encrypts pairs of letters using a 5x5 key square."
    description = (
        "The Playfair cipher encrypts pairs of letters (digraphs) using a 5×5 square "
        "of letters built using a keyword. It follows specific rules for encryption "
        "based on letter positions."
    )
    key_hint = "A keyword, e.g. MONARCHY"
    requires_keyword = True

    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt using the keyword."""
        return playfair(plaintext, self.parse_key(key))

    def decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt using the keyword."""
        return playfair(ciphertext, self.parse_key(key), decrypt=True)

    def parse_key(self, key: str) -> str:
        """Parse key to string."""
        return key or ""

    def key_square(self, key: str) -> KeySquare:
        return KeySquare.from_keyword(self.parse_key(key))

    def explain(self, key: str, decrypt: bool = False) -> str:
        """Generate human-readable explanation."""
        key_str = self.parse_key(key)
        if not key_str:
            return "Playfair cipher with no keyword. The text was left unchanged."

        square = "\n".join(" ".join(row) for row in self.key_square(key_str).rows())
        note = (
            " Filler letters added during encryption remain in the output."
            if decrypt
            else ""
        )

        return (
            f"Playfair cipher with keyword '{key_str.upper()}'. "
            f"5x5 key square:\n{square}\n"
            f"Letters are {'decrypted' if decrypt else 'encrypted'} in pairs "
            f"using row/column rules.{note}"
        )
