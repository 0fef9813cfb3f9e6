"""
Cryptographic domain models.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

SALT_SIZE = 16
IV_SIZE = 12
TAG_SIZE = 16
HEADER_SIZE = SALT_SIZE + IV_SIZE
PBKDF2_ITERATIONS = 1000
AES_KEY_BITS = 256


class KdfSaltMode(StrEnum):
    """
    How salt bytes are fed to PBKDF2.

    RAW uses the salt bytes directly. TEXT uses the comma-separated decimal
    text of the salt bytes (``b"12,201,7,..."``), which is what browser
    clients that pass a byte array through a text encoder end up deriving
    with.
    """

    RAW = "raw"
    TEXT = "text"

    def salt_material(self, salt: bytes) -> bytes:
        if self == KdfSaltMode.TEXT:
            return ",".join(str(b) for b in salt).encode("utf-8")
        return bytes(salt)


@dataclass(frozen=True, kw_only=True)
class EncryptedPayload:
    """
    Output of one encryption call.

    Wire layout: ``[salt:16][iv:12][ciphertext || tag]``.

    Attributes:
        salt: PBKDF2 salt.
        iv: AES-GCM nonce.
        ciphertext: Ciphertext with the GCM tag appended.
    """

    salt: bytes
    iv: bytes
    ciphertext: bytes

    def __post_init__(self) -> None:
        if len(self.salt) != SALT_SIZE:
            msg = f"salt must be {SALT_SIZE} bytes, got {len(self.salt)}"
            raise ValueError(msg)
        if len(self.iv) != IV_SIZE:
            msg = f"iv must be {IV_SIZE} bytes, got {len(self.iv)}"
            raise ValueError(msg)
        if len(self.ciphertext) < TAG_SIZE:
            msg = f"ciphertext must include a {TAG_SIZE}-byte tag, got {len(self.ciphertext)} bytes"
            raise ValueError(msg)

    def __len__(self) -> int:
        return HEADER_SIZE + len(self.ciphertext)

    def to_bytes(self) -> bytes:
        return self.salt + self.iv + self.ciphertext

    @classmethod
    def from_bytes(cls, blob: bytes) -> Self:
        """
        Parse a packed payload.

        Raises:
            ValueError: If the blob is too short to hold salt, iv and tag.
        """
        if len(blob) < HEADER_SIZE + TAG_SIZE:
            msg = f"Payload too short: {len(blob)} < {HEADER_SIZE + TAG_SIZE}"
            raise ValueError(msg)
        return cls(
            salt=bytes(blob[:SALT_SIZE]),
            iv=bytes(blob[SALT_SIZE:HEADER_SIZE]),
            ciphertext=bytes(blob[HEADER_SIZE:]),
        )
