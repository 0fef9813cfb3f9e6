"""
Upload orchestration.

Runs validate -> digest -> encrypt -> submit for one selected file and
reports the outcome as an UploadResult.
"""

from collections.abc import Callable

import structlog

from secure_send.api.http_client import AsyncHttpClient
from secure_send.api.upload import submit_upload
from secure_send.config import SecureSendConfig
from secure_send.crypto.encryption import EncryptionEngine
from secure_send.crypto.hashing import IntegrityHasher
from secure_send.crypto.secure_bytes import SecureBytes
from secure_send.exceptions import CryptoError, KeyDerivationError, TransportError
from secure_send.models.upload import (
    FailureKind,
    SelectedFile,
    UploadRequest,
    UploadResult,
    UploadState,
)
from secure_send.validators import validate_file, validate_password, validate_receiver

logger = structlog.get_logger(__name__)

StateListener = Callable[[UploadState], None]


class UploadService:
    """
    Sequences validation, encryption and submission of one file.

    State machine per attempt::

        IDLE -> VALIDATING -> ENCRYPTING -> SUBMITTING -> SUCCESS
                    |             |             |
                    +-------------+-------------+--> FAILED

    SUCCESS and FAILED are terminal. Nothing is retried. Only one attempt
    may be in flight; a concurrent submit is answered with FAILED(BUSY).
    """

    def __init__(
        self,
        config: SecureSendConfig,
        http: AsyncHttpClient,
        engine: EncryptionEngine,
        hasher: IntegrityHasher,
        *,
        on_state_change: StateListener | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration (limits and endpoint).
            http: Async HTTP client used for the upload.
            engine: Encryption engine.
            hasher: Password digest calculator.
            on_state_change: Called with every state transition.
        """
        self._config = config
        self._http = http
        self._engine = engine
        self._hasher = hasher
        self._on_state_change = on_state_change
        self._state = UploadState.IDLE
        self._busy = False

    @property
    def state(self) -> UploadState:
        """State of the latest attempt."""
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._busy

    async def submit(self, file: SelectedFile, receiver_email: str, password: str) -> UploadResult:
        """
        Validate, encrypt and upload a file.

        Args:
            file: The selected file.
            receiver_email: Recipient address.
            password: Raw passphrase. Only its digest leaves the process.

        Returns:
            SUCCESS on a 2xx response, otherwise FAILED with the first failure kind.
        """
        if self._busy:
            logger.warning("Upload already in progress, rejecting submit")
            return UploadResult.failed(FailureKind.BUSY)

        self._busy = True
        try:
            self._transition(UploadState.IDLE)
            return await self._run(file, receiver_email, password)
        finally:
            self._busy = False

    async def _run(self, file: SelectedFile, receiver_email: str, password: str) -> UploadResult:
        self._transition(UploadState.VALIDATING)
        if (failure := self._validate(file, receiver_email, password)) is not None:
            return self._fail(failure)

        self._transition(UploadState.ENCRYPTING)
        try:
            secret = SecureBytes.from_string(password)
        except UnicodeEncodeError:
            logger.warning("Passphrase is not encodable as UTF-8")
            return self._fail(FailureKind.ENCRYPTION_FAILED)

        with secret:
            password_digest = self._hasher.hash_password(secret)
            try:
                payload = await self._engine.encrypt(file.content, secret)
            except KeyDerivationError:
                return self._fail(FailureKind.KEY_DERIVATION_FAILED)
            except CryptoError:
                return self._fail(FailureKind.ENCRYPTION_FAILED)

        request = UploadRequest(
            encrypted_payload=payload,
            original_name=file.name,
            receiver_email=receiver_email,
            password_digest=password_digest,
        )

        self._transition(UploadState.SUBMITTING)
        try:
            await submit_upload(self._http, self._config.upload_url, request)
        except TransportError:
            return self._fail(FailureKind.UPLOAD_FAILED)

        self._transition(UploadState.SUCCESS)
        logger.info("File uploaded", name=file.name, size=file.size, payload_size=len(payload))
        return UploadResult.succeeded()

    def _validate(self, file: SelectedFile, receiver_email: str, password: str) -> FailureKind | None:
        return (
            validate_file(
                file,
                max_size=self._config.max_file_size,
                allowed_extensions=self._config.allowed_extensions,
            )
            or validate_receiver(receiver_email)
            or validate_password(password, min_length=self._config.min_password_length)
        )

    def _fail(self, failure: FailureKind) -> UploadResult:
        logger.info("Upload failed", failure=failure.value, category=failure.category.value)
        self._transition(UploadState.FAILED)
        return UploadResult.failed(failure)

    def _transition(self, state: UploadState) -> None:
        self._state = state
        logger.debug("Upload state changed", state=state.value)
        if self._on_state_change is None:
            return
        try:
            self._on_state_change(state)
        except Exception:
            logger.exception("State listener failed", state=state.value)
