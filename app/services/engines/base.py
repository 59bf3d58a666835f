from abc import ABC, abstractmethod

from app.models.schemas import CipherFamily, CipherInfo, CipherType


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt plaintext
    - decrypt(): Decrypt ciphertext
    - parse_key(): Turn the raw key string into the cipher's key type
    - explain(): Generate human-readable explanation

    Engines are thin, stateless wrappers around the module-level cipher
    functions, so a single instance can be shared between callers.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    summary: str
    description: str
    key_hint: str
    requires_keyword: bool = False

    @abstractmethod
    def encrypt(self, plaintext: str, key: str) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The raw key string

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str, key: str) -> str:
        """
        Decrypt ciphertext with the given key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The raw key string

        Returns:
            Plaintext
        """
        pass

    @abstractmethod
    def parse_key(self, key: str) -> int | str:
        """
        Parse a raw key string into the key this cipher operates on.

        Never raises: unusable keys map to the cipher's default.
        """
        pass

    @abstractmethod
    def explain(self, key: str, decrypt: bool = False) -> str:
        """
        Generate human-readable explanation of the transformation.

        Args:
            key: The raw key string
            decrypt: Whether the transformation was a decryption

        Returns:
            Explanation string
        """
        pass

    def validate_key(self, key: str) -> bool:
        """
        Check whether a key is usable without falling back to identity.

        Keyword ciphers need a non-empty keyword; numeric ciphers accept
        anything because unparseable keys fall back to a default.
        """
        if self.requires_keyword:
            return bool(key)
        return True

    def info(self) -> CipherInfo:
        """Describe this cipher for listings."""
        return CipherInfo(
            id=self.cipher_type,
            name=self.name,
            family=self.cipher_family,
            summary=self.summary,
            description=self.description,
            key_hint=self.key_hint,
            requires_keyword=self.requires_keyword,
        )
