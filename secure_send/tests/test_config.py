import pytest

from secure_send.config import SecureSendConfig
from secure_send.models.crypto import KdfSaltMode
from secure_send.validators import ALLOWED_EXTENSIONS


def test_defaults_match_upload_policy() -> None:
    config = SecureSendConfig()

    assert config.upload_url == "http://localhost:4000"
    assert config.max_file_size == 10_000_000
    assert config.min_password_length == 20
    assert config.pbkdf2_iterations == 1000
    assert config.allowed_extensions == ALLOWED_EXTENSIONS
    assert config.kdf_salt_mode == KdfSaltMode.RAW


def test_config_is_frozen() -> None:
    config = SecureSendConfig()

    with pytest.raises(AttributeError):
        config.timeout = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"upload_url": ""}, "upload_url must not be empty"),
        ({"timeout": 0}, "timeout must be positive"),
        ({"crypto_timeout": -1}, "crypto_timeout must be positive"),
        ({"max_file_size": 0}, "max_file_size must be positive"),
        ({"allowed_extensions": frozenset()}, "allowed_extensions must not be empty"),
        ({"allowed_extensions": frozenset({"PDF"})}, "allowed_extensions must be lower-case"),
        ({"min_password_length": 0}, "min_password_length must be positive"),
        ({"pbkdf2_iterations": 0}, "pbkdf2_iterations must be positive"),
    ],
)
def test_invalid_values_raise(kwargs: dict, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        SecureSendConfig(**kwargs)
