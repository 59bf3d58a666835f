from typing import Any


class CipherToolError(Exception):
    """Base exception for all cipher toolkit errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherToolError):
    """Raised when input validation fails."""

    pass


class EmptyTextError(ValidationError):
    """Raised when there is no text to encrypt or decrypt."""

    def __init__(self, decrypt: bool = False):
        action = "decrypt" if decrypt else "encrypt"
        super().__init__(
            f"Please enter some text to {action}!",
            {"action": action},
        )


class MissingKeyError(ValidationError):
    """Raised when a keyword cipher is invoked without a keyword."""

    def __init__(self, cipher_name: str):
        super().__init__(
            f"Please enter a keyword for {cipher_name}!",
            {"cipher": cipher_name},
        )


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineError(CipherToolError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
