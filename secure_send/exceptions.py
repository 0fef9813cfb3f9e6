"""
Secure Send exception hierarchy.

All exceptions inherit from SecureSendError for easy catching.
"""

from typing import Any

from secure_send.models.upload import FailureCategory, FailureKind, UploadResult


class SecureSendError(Exception):
    """Base exception for all secure_send errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class ValidationError(SecureSendError):
    """Input rejected before any cryptographic or network work."""

    def __init__(self, message: str, *, kind: FailureKind) -> None:
        super().__init__(message, kind=kind.value)
        self.kind = kind


class CryptoError(SecureSendError):
    """Cryptographic operation failed."""


class KeyDerivationError(CryptoError):
    """The crypto provider rejected the key derivation inputs."""


class EncryptionError(CryptoError):
    """Authenticated encryption of the file content failed."""


class DecryptionError(CryptoError):
    """Payload could not be authenticated (wrong password or tampered data)."""


class TransportError(SecureSendError):
    """Upload transport failed."""


class UploadFailedError(TransportError):
    """
    Upload did not complete with a 2xx response.

    Network failures and server rejections share this type. ``status_code``
    is None when no response was received.
    """

    def __init__(self, message: str, *, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message, status_code=status_code, url=url)
        self.status_code = status_code
        self.url = url


class UploadInProgressError(SecureSendError):
    """Another submission is still in flight."""

    def __init__(self, message: str = "An upload is already in progress") -> None:
        super().__init__(message)


def raise_for_failure(result: UploadResult) -> None:
    """
    Raise the exception matching a failed result. Does nothing on success.

    Raises:
        ValidationError: For validation failures.
        KeyDerivationError: If key derivation failed.
        EncryptionError: If encryption failed.
        UploadFailedError: If the upload failed.
        UploadInProgressError: If another upload was in flight.
    """
    failure = result.failure
    if failure is None:
        return

    match failure.category:
        case FailureCategory.VALIDATION:
            raise ValidationError(failure.message, kind=failure)
        case FailureCategory.CRYPTO if failure == FailureKind.KEY_DERIVATION_FAILED:
            raise KeyDerivationError(failure.message)
        case FailureCategory.CRYPTO:
            raise EncryptionError(failure.message)
        case FailureCategory.TRANSPORT:
            raise UploadFailedError(failure.message)
        case _:
            raise UploadInProgressError()
