"""
AES-256-GCM file encryption with a passphrase-derived key.

Packed output layout::

    [salt:16][iv:12][ciphertext || tag:16]
"""

import asyncio

import structlog

from secure_send.crypto.key_derivation import KeyDerivationService
from secure_send.crypto.protocol import CryptoProvider
from secure_send.crypto.secure_bytes import SecureBytes
from secure_send.exceptions import DecryptionError, EncryptionError
from secure_send.models.crypto import AES_KEY_BITS, IV_SIZE, SALT_SIZE, EncryptedPayload

logger = structlog.get_logger(__name__)


class EncryptionEngine:
    """
    Encrypts a whole file in one call.

    Every call draws a fresh salt and a fresh IV, so encrypting the same
    content twice with the same passphrase yields unrelated payloads.
    """

    def __init__(
        self,
        provider: CryptoProvider,
        key_derivation: KeyDerivationService,
        *,
        timeout: float | None = None,
    ) -> None:
        """
        Args:
            provider: Crypto primitives.
            key_derivation: Service deriving the AES key from the passphrase.
            timeout: Upper bound on the cipher call in seconds, None for no bound.
        """
        self._provider = provider
        self._kdf = key_derivation
        self._timeout = timeout

    async def encrypt(self, plaintext: bytes, password: SecureBytes) -> EncryptedPayload:
        """
        Encrypt file content under a key derived from ``password``.

        Args:
            plaintext: Full file content.
            password: Encoded passphrase.

        Returns:
            Salt, IV and ciphertext with appended tag.

        Raises:
            KeyDerivationError: If the key cannot be derived.
            EncryptionError: If the cipher call fails or times out.
        """
        salt = self._provider.random_bytes(SALT_SIZE)
        with await self._kdf.derive(password, salt, AES_KEY_BITS) as key:
            iv = self._provider.random_bytes(IV_SIZE)
            try:
                async with asyncio.timeout(self._timeout):
                    ciphertext = await asyncio.to_thread(
                        self._provider.aead_encrypt, bytes(key), iv, plaintext
                    )
            except TimeoutError as e:
                raise EncryptionError("Encryption timed out", timeout=self._timeout) from e
            except Exception as e:
                logger.warning("Encryption failed", error_type=type(e).__name__)
                raise EncryptionError("Encryption failed") from e

        logger.debug("File encrypted", plaintext_size=len(plaintext), ciphertext_size=len(ciphertext))
        return EncryptedPayload(salt=salt, iv=iv, ciphertext=ciphertext)

    async def decrypt(self, blob: bytes, password: SecureBytes) -> bytes:
        """
        Parse a packed payload and recover the plaintext.

        Args:
            blob: Packed ``[salt][iv][ciphertext || tag]`` bytes.
            password: Encoded passphrase.

        Returns:
            Original file content.

        Raises:
            DecryptionError: If the blob is malformed, the password is wrong or the data was altered.
            KeyDerivationError: If the key cannot be derived.
        """
        try:
            payload = EncryptedPayload.from_bytes(blob)
        except ValueError as e:
            raise DecryptionError(f"Malformed payload: {e}") from e

        with await self._kdf.derive(password, payload.salt, AES_KEY_BITS) as key:
            try:
                async with asyncio.timeout(self._timeout):
                    return await asyncio.to_thread(
                        self._provider.aead_decrypt, bytes(key), payload.iv, payload.ciphertext
                    )
            except TimeoutError as e:
                raise DecryptionError("Decryption timed out", timeout=self._timeout) from e
