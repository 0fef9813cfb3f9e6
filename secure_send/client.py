"""
Secure Send client facade.

This is the main entry point for users of the library. It wires the HTTP
client, crypto provider and upload service together.
"""

import asyncio
from pathlib import Path
from typing import Self

import httpx
import structlog

from secure_send.api.http_client import AsyncHttpClient
from secure_send.config import SecureSendConfig
from secure_send.crypto.cryptography_backend import CryptographyProvider
from secure_send.crypto.encryption import EncryptionEngine
from secure_send.crypto.hashing import IntegrityHasher
from secure_send.crypto.key_derivation import KeyDerivationService
from secure_send.crypto.protocol import CryptoProvider
from secure_send.exceptions import ValidationError
from secure_send.models.upload import SelectedFile, UploadResult
from secure_send.services.upload_service import StateListener, UploadService
from secure_send.validators import validate_file_metadata

logger = structlog.get_logger(__name__)


class SecureSendClient:
    """
    Async client for encrypted file uploads.

    Example:
        ```python
        async with SecureSendClient() as client:
            file = await client.select_file("report.pdf")
            result = await client.send(file, "bob@mail.org", "ValidPassphrase12345")
            print(result.message)
        ```

    The passphrase itself is never uploaded. Share it with the receiver out
    of band.

    Args:
        config: Client configuration. Uses defaults if not provided.
        transport: Optional httpx transport for testing (mock transport).
        crypto: Crypto provider. Uses CryptographyProvider if not provided.
        on_state_change: Called with every upload state transition.
    """

    def __init__(
        self,
        config: SecureSendConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        crypto: CryptoProvider | None = None,
        on_state_change: StateListener | None = None,
    ) -> None:
        self._config = config or SecureSendConfig()
        self._transport = transport
        self._crypto = crypto or CryptographyProvider()
        self._on_state_change = on_state_change

        self._http: AsyncHttpClient | None = None
        self._upload_service: UploadService | None = None

        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self._ensure_initialized()
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    async def _ensure_initialized(self) -> None:
        async with self._init_lock:
            if self._initialized:
                return

            self._http = AsyncHttpClient(self._config, transport=self._transport)
            await self._http.__aenter__()

            key_derivation = KeyDerivationService(
                self._crypto,
                iterations=self._config.pbkdf2_iterations,
                salt_mode=self._config.kdf_salt_mode,
                timeout=self._config.crypto_timeout,
            )
            engine = EncryptionEngine(
                self._crypto, key_derivation, timeout=self._config.crypto_timeout
            )
            self._upload_service = UploadService(
                self._config,
                self._http,
                engine,
                IntegrityHasher(self._crypto),
                on_state_change=self._on_state_change,
            )

            self._initialized = True
            logger.debug("Client initialized", upload_url=self._config.upload_url)

    async def close(self) -> None:
        """Close the client and release resources."""
        async with self._init_lock:
            if self._http:
                await self._http.__aexit__(None, None, None)
                self._http = None

            self._upload_service = None
            self._initialized = False
            logger.debug("Client closed")

    @property
    def config(self) -> SecureSendConfig:
        return self._config

    async def select_file(self, path: Path | str) -> SelectedFile:
        """
        Load a file for upload after checking its size and extension.

        The checks run on file metadata, so oversized files are never read.

        Args:
            path: Local file path.

        Returns:
            The selected file with its content.

        Raises:
            ValidationError: If the file is too large or its type is not allowed.
            FileNotFoundError: If the path does not exist.
        """
        path = Path(path)
        size = (await asyncio.to_thread(path.stat)).st_size
        failure = validate_file_metadata(
            path.name,
            size,
            max_size=self._config.max_file_size,
            allowed_extensions=self._config.allowed_extensions,
        )
        if failure is not None:
            logger.info("File rejected", name=path.name, size=size, failure=failure.value)
            raise ValidationError(failure.message, kind=failure)
        return await asyncio.to_thread(SelectedFile.from_path, path)

    async def send(
        self, file: SelectedFile | Path | str, receiver_email: str, password: str
    ) -> UploadResult:
        """
        Encrypt a file with ``password`` and upload it for ``receiver_email``.

        Args:
            file: A selected file, or a path to select first.
            receiver_email: Recipient address.
            password: Passphrase (at least 20 characters, one uppercase).

        Returns:
            UploadResult describing success or the first failure.

        Raises:
            ValidationError: If ``file`` is a path that fails the file checks.
        """
        await self._ensure_initialized()
        if self._upload_service is None:
            raise RuntimeError("Client not initialized")
        if not isinstance(file, SelectedFile):
            file = await self.select_file(file)
        return await self._upload_service.submit(file, receiver_email, password)
