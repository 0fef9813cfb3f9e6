"""
CryptoProvider implementation on top of the ``cryptography`` package.
"""

import hashlib
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from secure_send.exceptions import DecryptionError


class CryptographyProvider:
    """
    Default crypto provider.

    Uses ``os.urandom`` for randomness, PBKDF2HMAC for key derivation,
    AESGCM for authenticated encryption and hashlib for SHA-256.
    """

    def random_bytes(self, size: int) -> bytes:
        if size <= 0:
            msg = "size must be positive"
            raise ValueError(msg)
        return os.urandom(size)

    def derive_key(self, password: bytes, salt: bytes, *, length: int, iterations: int) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=length,
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(password)

    def aead_encrypt(self, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        return AESGCM(key).encrypt(iv, plaintext, None)

    def aead_decrypt(self, key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        try:
            return AESGCM(key).decrypt(iv, ciphertext, None)
        except InvalidTag as e:
            raise DecryptionError("Authentication failed, wrong password or tampered data") from e

    def digest(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()
