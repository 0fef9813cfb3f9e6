from unittest.mock import AsyncMock, Mock

import pytest

from secure_send.api.http_client import AsyncHttpClient
from secure_send.config import SecureSendConfig
from secure_send.crypto.cryptography_backend import CryptographyProvider
from secure_send.crypto.encryption import EncryptionEngine
from secure_send.crypto.hashing import IntegrityHasher
from secure_send.models.crypto import EncryptedPayload
from secure_send.models.upload import UploadState
from secure_send.services.upload_service import UploadService


@pytest.fixture
def mock_http() -> Mock:
    http = Mock(spec=AsyncHttpClient)
    http.post_multipart = AsyncMock()
    return http


@pytest.fixture
def mock_engine() -> Mock:
    engine = Mock(spec=EncryptionEngine)
    engine.encrypt = AsyncMock(
        return_value=EncryptedPayload(salt=bytes(16), iv=bytes(12), ciphertext=bytes(32))
    )
    return engine


@pytest.fixture
def hasher(provider: CryptographyProvider) -> IntegrityHasher:
    return IntegrityHasher(provider)


@pytest.fixture
def states() -> list[UploadState]:
    return []


@pytest.fixture
def upload_service(
    config: SecureSendConfig,
    mock_http: Mock,
    mock_engine: Mock,
    hasher: IntegrityHasher,
    states: list[UploadState],
) -> UploadService:
    return UploadService(config, mock_http, mock_engine, hasher, on_state_change=states.append)
