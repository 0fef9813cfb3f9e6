from collections.abc import Callable, Iterator

import pytest

from secure_send.config import SecureSendConfig
from secure_send.crypto.cryptography_backend import CryptographyProvider
from secure_send.crypto.encryption import EncryptionEngine
from secure_send.crypto.key_derivation import KeyDerivationService
from secure_send.crypto.secure_bytes import SecureBytes
from secure_send.models.upload import SelectedFile
from secure_send.tests.constants import UPLOAD_URL, VALID_PASSWORD
from secure_send.tests.utils.mock_transport import MockTransport


@pytest.fixture
def config() -> SecureSendConfig:
    return SecureSendConfig(upload_url=UPLOAD_URL, crypto_timeout=10.0)


@pytest.fixture
def provider() -> CryptographyProvider:
    return CryptographyProvider()


@pytest.fixture
def key_derivation(provider: CryptographyProvider) -> KeyDerivationService:
    return KeyDerivationService(provider)


@pytest.fixture
def engine(provider: CryptographyProvider, key_derivation: KeyDerivationService) -> EncryptionEngine:
    return EncryptionEngine(provider, key_derivation)


@pytest.fixture
def password() -> Iterator[SecureBytes]:
    secret = SecureBytes.from_string(VALID_PASSWORD)
    yield secret
    secret.clear()


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def make_file() -> Callable[..., SelectedFile]:
    def _make(name: str = "report.pdf", content: bytes = b"quarterly numbers") -> SelectedFile:
        return SelectedFile(name=name, content=content)

    return _make
