"""
Secure Send Python Client.

An async client that encrypts a file with a passphrase-derived AES-256-GCM
key and uploads it for a receiver.

Example:
    ```python
    from secure_send import SecureSendClient

    async with SecureSendClient() as client:
        result = await client.send("report.pdf", "bob@mail.org", "ValidPassphrase12345")
        if not result.ok:
            print(result.message)
    ```
"""

from secure_send.client import SecureSendClient
from secure_send.config import SecureSendConfig
from secure_send.exceptions import (
    CryptoError,
    DecryptionError,
    EncryptionError,
    KeyDerivationError,
    SecureSendError,
    TransportError,
    UploadFailedError,
    UploadInProgressError,
    ValidationError,
    raise_for_failure,
)
from secure_send.models.crypto import EncryptedPayload, KdfSaltMode
from secure_send.models.upload import FailureKind, SelectedFile, UploadResult, UploadState

__version__ = "0.1.0"

__all__ = [
    # Main client
    "SecureSendClient",
    "SecureSendConfig",
    # Models
    "SelectedFile",
    "EncryptedPayload",
    "KdfSaltMode",
    "UploadResult",
    "UploadState",
    "FailureKind",
    # Exceptions
    "SecureSendError",
    "ValidationError",
    "CryptoError",
    "KeyDerivationError",
    "EncryptionError",
    "DecryptionError",
    "TransportError",
    "UploadFailedError",
    "UploadInProgressError",
    "raise_for_failure",
]
