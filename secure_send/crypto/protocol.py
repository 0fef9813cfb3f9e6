"""
Crypto provider protocol definition.

The upload pipeline only talks to this interface, so the primitives can come
from different libraries without touching the pipeline logic.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CryptoProvider(Protocol):
    """
    Abstract interface for the primitives the upload pipeline needs.

    All methods are synchronous; callers decide whether to run them in a
    worker thread.
    """

    def random_bytes(self, size: int) -> bytes:
        """Return ``size`` bytes from a cryptographically secure source."""
        ...

    def derive_key(self, password: bytes, salt: bytes, *, length: int, iterations: int) -> bytes:
        """
        Derive a key with PBKDF2-HMAC-SHA256.

        Args:
            password: Encoded passphrase.
            salt: Salt material.
            length: Key length in bytes.
            iterations: PBKDF2 iteration count.

        Returns:
            Derived key bytes.
        """
        ...

    def aead_encrypt(self, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        """
        Encrypt with AES-GCM.

        Returns:
            Ciphertext with the authentication tag appended.
        """
        ...

    def aead_decrypt(self, key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        """
        Authenticate and decrypt AES-GCM ciphertext with appended tag.

        Raises:
            DecryptionError: If authentication fails.
        """
        ...

    def digest(self, data: bytes) -> bytes:
        """Return the SHA-256 digest of ``data``."""
        ...
