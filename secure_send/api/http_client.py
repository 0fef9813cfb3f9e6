"""
Async HTTP client for the upload endpoint.

Wraps a single httpx.AsyncClient and turns transport failures and non-2xx
responses into UploadFailedError.
"""

import asyncio
from typing import Any

import httpx
import structlog

from secure_send.config import SecureSendConfig
from secure_send.exceptions import UploadFailedError

logger = structlog.get_logger(__name__)

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "receiverEmail",
        "encryptedFile",
    }
)

FileField = tuple[str, bytes, str]


def sanitize_for_log(data: dict[str, str]) -> dict[str, str]:
    """Copy of the form fields with sensitive values replaced by "***"."""
    return {key: "***" if key in SENSITIVE_KEYS else value for key, value in data.items()}


class AsyncHttpClient:
    """Async HTTP client for multipart uploads."""

    def __init__(
        self,
        config: SecureSendConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    async def __aenter__(self) -> "AsyncHttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers={"User-Agent": self._config.user_agent},
                )
        return self._client

    async def _close(self) -> None:
        async with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            await self._client.aclose()
            self._client = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def post_multipart(
        self,
        url: str,
        *,
        data: dict[str, str],
        files: dict[str, FileField],
    ) -> httpx.Response:
        """
        POST a multipart/form-data body.

        Args:
            url: Absolute endpoint URL.
            data: Text form fields.
            files: Binary parts as (filename, content, content type).

        Returns:
            The 2xx response.

        Raises:
            UploadFailedError: On network failure or a non-2xx status.
            RuntimeError: If the client is not open.
        """
        if self._client is None:
            msg = "HTTP client not initialized. Use 'async with' first."
            raise RuntimeError(msg)

        logger.debug(
            "Posting multipart form",
            url=url,
            fields=sanitize_for_log(data),
            files=sorted(files),
        )
        try:
            response = await self._client.post(url, data=data, files=files)
        except httpx.HTTPError as e:
            logger.warning("Upload request failed", url=url, error_type=type(e).__name__)
            raise UploadFailedError("Upload request failed", url=url) from e
        except UnicodeEncodeError as e:
            logger.warning("Form field is not encodable as UTF-8", url=url)
            raise UploadFailedError("Form field could not be encoded", url=url) from e

        if not response.is_success:
            logger.warning("Upload rejected", url=url, status_code=response.status_code)
            msg = f"Upload rejected with status {response.status_code}"
            raise UploadFailedError(msg, status_code=response.status_code, url=url)

        return response
