"""
Domain models for Secure Send.

These are immutable (frozen) dataclasses representing the upload pipeline.
"""

from secure_send.models.crypto import (
    HEADER_SIZE,
    IV_SIZE,
    SALT_SIZE,
    TAG_SIZE,
    EncryptedPayload,
    KdfSaltMode,
)
from secure_send.models.upload import (
    FailureCategory,
    FailureKind,
    SelectedFile,
    UploadRequest,
    UploadResult,
    UploadState,
)

__all__ = [
    # Upload
    "SelectedFile",
    "UploadRequest",
    "UploadResult",
    "UploadState",
    "FailureKind",
    "FailureCategory",
    # Crypto
    "EncryptedPayload",
    "KdfSaltMode",
    "SALT_SIZE",
    "IV_SIZE",
    "TAG_SIZE",
    "HEADER_SIZE",
]
