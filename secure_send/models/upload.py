"""
Upload pipeline domain models.
"""

import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Self

from secure_send.models.crypto import EncryptedPayload

_DIGEST_PATTERN = re.compile(r"[0-9a-f]{64}")


class UploadState(StrEnum):
    """State of a single submission attempt."""

    IDLE = "idle"
    VALIDATING = "validating"
    ENCRYPTING = "encrypting"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (UploadState.SUCCESS, UploadState.FAILED)


class FailureCategory(StrEnum):
    VALIDATION = "validation"
    CRYPTO = "crypto"
    TRANSPORT = "transport"
    BUSY = "busy"


class FailureKind(StrEnum):
    """Why a submission attempt stopped."""

    TOO_LARGE = "too_large"
    DISALLOWED_EXTENSION = "disallowed_extension"
    EMPTY_EMAIL = "empty_email"
    INVALID_EMAIL = "invalid_email"
    TOO_SHORT = "too_short"
    NO_UPPERCASE = "no_uppercase"
    KEY_DERIVATION_FAILED = "key_derivation_failed"
    ENCRYPTION_FAILED = "encryption_failed"
    UPLOAD_FAILED = "upload_failed"
    BUSY = "busy"

    @property
    def category(self) -> FailureCategory:
        match self:
            case (
                FailureKind.TOO_LARGE
                | FailureKind.DISALLOWED_EXTENSION
                | FailureKind.EMPTY_EMAIL
                | FailureKind.INVALID_EMAIL
                | FailureKind.TOO_SHORT
                | FailureKind.NO_UPPERCASE
            ):
                return FailureCategory.VALIDATION
            case FailureKind.KEY_DERIVATION_FAILED | FailureKind.ENCRYPTION_FAILED:
                return FailureCategory.CRYPTO
            case FailureKind.UPLOAD_FAILED:
                return FailureCategory.TRANSPORT
            case _:
                return FailureCategory.BUSY

    @property
    def message(self) -> str:
        """User-facing message. Never includes provider or server details."""
        return _MESSAGES[self]


_MESSAGES = {
    FailureKind.TOO_LARGE: "File exceeds the maximum upload size",
    FailureKind.DISALLOWED_EXTENSION: "File type not allowed",
    FailureKind.EMPTY_EMAIL: "Please enter value for email",
    FailureKind.INVALID_EMAIL: "Please enter valid email",
    FailureKind.TOO_SHORT: "File password is shorter than the minimum length",
    FailureKind.NO_UPPERCASE: "File password should have at least 1 uppercase character",
    FailureKind.KEY_DERIVATION_FAILED: "Error uploading file",
    FailureKind.ENCRYPTION_FAILED: "Error uploading file",
    FailureKind.UPLOAD_FAILED: "Error uploading file",
    FailureKind.BUSY: "An upload is already in progress",
}


@dataclass(frozen=True, kw_only=True)
class SelectedFile:
    """
    A file chosen for upload.

    Attributes:
        name: Original filename, sent unmodified.
        content: Full file content.
    """

    name: str
    content: bytes

    def __post_init__(self) -> None:
        if not self.name:
            msg = "name must not be empty"
            raise ValueError(msg)

    @property
    def size(self) -> int:
        """Size in bytes."""
        return len(self.content)

    @classmethod
    def from_path(cls, path: Path) -> Self:
        return cls(name=path.name, content=path.read_bytes())

    def __repr__(self) -> str:
        return f"SelectedFile(name={self.name!r}, size={self.size})"


@dataclass(frozen=True, kw_only=True)
class UploadRequest:
    """
    The single multipart submission built for one attempt.

    Attributes:
        encrypted_payload: Salt, IV and authenticated ciphertext.
        original_name: Filename of the selected file.
        receiver_email: Validated recipient address.
        password_digest: Lowercase hex SHA-256 of the passphrase.
    """

    encrypted_payload: EncryptedPayload
    original_name: str
    receiver_email: str
    password_digest: str

    def __post_init__(self) -> None:
        if _DIGEST_PATTERN.fullmatch(self.password_digest) is None:
            msg = "password_digest must be 64 lowercase hex characters"
            raise ValueError(msg)


@dataclass(frozen=True, kw_only=True)
class UploadResult:
    """Outcome of one submission attempt."""

    state: UploadState
    failure: FailureKind | None = None

    def __post_init__(self) -> None:
        if not self.state.is_terminal:
            msg = f"UploadResult requires a terminal state, got {self.state}"
            raise ValueError(msg)
        if (self.state == UploadState.FAILED) != (self.failure is not None):
            msg = "failure must be set exactly when state is FAILED"
            raise ValueError(msg)

    @classmethod
    def succeeded(cls) -> Self:
        return cls(state=UploadState.SUCCESS)

    @classmethod
    def failed(cls, failure: FailureKind) -> Self:
        return cls(state=UploadState.FAILED, failure=failure)

    @property
    def ok(self) -> bool:
        return self.state == UploadState.SUCCESS

    @property
    def message(self) -> str:
        if self.failure is None:
            return "File successfully uploaded"
        return self.failure.message
