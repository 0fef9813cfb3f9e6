"""
Passphrase-based key derivation (PBKDF2-HMAC-SHA256).
"""

import asyncio

import structlog

from secure_send.crypto.protocol import CryptoProvider
from secure_send.crypto.secure_bytes import SecureBytes
from secure_send.exceptions import KeyDerivationError
from secure_send.models.crypto import AES_KEY_BITS, PBKDF2_ITERATIONS, KdfSaltMode

logger = structlog.get_logger(__name__)

_AES_KEY_BITS = frozenset({128, 192, 256})


class KeyDerivationService:
    """
    Derives AES keys from a passphrase and salt.

    Identical (password, salt) inputs always produce identical key bytes.
    The derivation runs in a worker thread so the caller suspends until it
    completes.
    """

    def __init__(
        self,
        provider: CryptoProvider,
        *,
        iterations: int = PBKDF2_ITERATIONS,
        salt_mode: KdfSaltMode = KdfSaltMode.RAW,
        timeout: float | None = None,
    ) -> None:
        """
        Args:
            provider: Crypto primitives.
            iterations: PBKDF2 iteration count.
            salt_mode: How salt bytes are fed to PBKDF2.
            timeout: Upper bound on one derivation in seconds, None for no bound.
        """
        self._provider = provider
        self._iterations = iterations
        self._salt_mode = salt_mode
        self._timeout = timeout

    async def derive(
        self, password: SecureBytes, salt: bytes, key_length_bits: int = AES_KEY_BITS
    ) -> SecureBytes:
        """
        Derive a key for AES-GCM.

        Args:
            password: Encoded passphrase.
            salt: Random salt for this derivation.
            key_length_bits: AES key length (128, 192 or 256).

        Returns:
            Key bytes in a SecureBytes the caller must clear.

        Raises:
            KeyDerivationError: If the inputs are rejected or the derivation times out.
        """
        if key_length_bits not in _AES_KEY_BITS:
            msg = "Unsupported AES key length"
            raise KeyDerivationError(msg, key_length_bits=key_length_bits)

        material = self._salt_mode.salt_material(salt)
        try:
            async with asyncio.timeout(self._timeout):
                key = await asyncio.to_thread(
                    self._provider.derive_key,
                    bytes(password),
                    material,
                    length=key_length_bits // 8,
                    iterations=self._iterations,
                )
        except TimeoutError as e:
            raise KeyDerivationError("Key derivation timed out", timeout=self._timeout) from e
        except Exception as e:
            logger.warning("Key derivation failed", error_type=type(e).__name__)
            raise KeyDerivationError("Key derivation failed") from e

        return SecureBytes(key)
