"""
Routing from a cipher identifier, raw text and key string to a cipher.

This is the entry point used by the API layer. The cipher functions are
total and never raise; the only errors here come from an unknown cipher
identifier or from the pre-flight checks in ``validate_cipher_input``.
"""

import logging

from app.core.exceptions import EmptyTextError, EngineNotFoundError, MissingKeyError
from app.models.schemas import CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry
from app.services.keys import parse_int_with_default

logger = logging.getLogger(__name__)

__all__ = [
    "get_cipher_engine",
    "parse_int_with_default",
    "run_cipher",
    "validate_cipher_input",
]


def get_cipher_engine(cipher: CipherEngine | CipherType | str) -> CipherEngine:
    """
    Look up the engine for a cipher identifier.

    An engine instance is returned as-is.

    Raises:
        EngineNotFoundError: If no engine handles ``cipher``
    """
    if isinstance(cipher, CipherEngine):
        return cipher

    engine = EngineRegistry().get_engine(cipher)
    if engine is None:
        raise EngineNotFoundError(str(getattr(cipher, "value", cipher)))
    return engine


def validate_cipher_input(
    cipher: CipherEngine | CipherType | str,
    text: str,
    key: str,
    decrypt: bool = False,
) -> CipherEngine:
    """
    Reject requests that should never reach a cipher.

    Empty text is always rejected; keyword ciphers also need a keyword.
    The ciphers themselves would treat an empty keyword as "leave the
    text alone", which is never what a user asking for encryption wants.

    Raises:
        EmptyTextError: If ``text`` is empty
        MissingKeyError: If a keyword cipher gets an empty key
        EngineNotFoundError: If ``cipher`` is unknown
    """
    engine = get_cipher_engine(cipher)

    if not text:
        logger.info("Rejected %s request with empty text", engine.cipher_type.value)
        raise EmptyTextError(decrypt)

    if not engine.validate_key(key):
        logger.info("Rejected %s request without keyword", engine.cipher_type.value)
        raise MissingKeyError(engine.name)

    return engine


def run_cipher(
    cipher: CipherEngine | CipherType | str,
    text: str,
    key: str = "",
    decrypt: bool = False,
) -> str:
    """
    Encrypt or decrypt ``text`` with the named cipher.

    Numeric keys (Caesar shift, rail count) are parsed from ``key`` with
    ``parse_int_with_default``; keyword ciphers get ``key`` as-is.

    Args:
        cipher: One of caesar, vigenere, railfence, playfair, or its engine
        text: Input text
        key: Raw key string
        decrypt: Decrypt instead of encrypt

    Returns:
        The transformed text

    Raises:
        EngineNotFoundError: If ``cipher`` is unknown
    """
    engine = get_cipher_engine(cipher)

    logger.debug(
        "Running %s %s on %d characters",
        engine.cipher_type.value,
        "decrypt" if decrypt else "encrypt",
        len(text),
    )

    if decrypt:
        return engine.decrypt(text, key)
    return engine.encrypt(text, key)
