"""Password digest sent alongside the encrypted file."""

from secure_send.crypto.protocol import CryptoProvider
from secure_send.crypto.secure_bytes import SecureBytes


class IntegrityHasher:
    """
    Computes the lowercase hex SHA-256 of a passphrase.

    The digest is a verifier artifact for the receiving service. It plays no
    part in key derivation; the AES key always comes from the raw passphrase.
    """

    def __init__(self, provider: CryptoProvider) -> None:
        self._provider = provider

    def hash_password(self, password: SecureBytes) -> str:
        return self._provider.digest(bytes(password)).hex()
