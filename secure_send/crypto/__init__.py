"""
Cryptographic operations for Secure Send.

This module provides:
- PBKDF2-HMAC-SHA256 key derivation
- AES-256-GCM encryption into the packed salt/iv/ciphertext layout
- SHA-256 password digest
- Zeroable secret buffers
"""

from secure_send.crypto.cryptography_backend import CryptographyProvider
from secure_send.crypto.encryption import EncryptionEngine
from secure_send.crypto.hashing import IntegrityHasher
from secure_send.crypto.key_derivation import KeyDerivationService
from secure_send.crypto.protocol import CryptoProvider
from secure_send.crypto.secure_bytes import SecureBytes

__all__ = [
    "SecureBytes",
    "CryptoProvider",
    "CryptographyProvider",
    "KeyDerivationService",
    "EncryptionEngine",
    "IntegrityHasher",
]
