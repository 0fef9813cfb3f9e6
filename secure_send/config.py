"""
Secure Send client configuration.
"""

from dataclasses import dataclass

from secure_send.models.crypto import PBKDF2_ITERATIONS, KdfSaltMode
from secure_send.validators import ALLOWED_EXTENSIONS, MAX_FILE_SIZE, MIN_PASSWORD_LENGTH


@dataclass(frozen=True, kw_only=True)
class SecureSendConfig:
    """
    Attributes:
        upload_url: Endpoint receiving the multipart upload.
        timeout: Upload request timeout in seconds.
        crypto_timeout: Bound on each key derivation and encryption call in seconds.
        user_agent: User-Agent header value.
        max_file_size: Largest accepted file in decimal bytes.
        allowed_extensions: Lower-case file extensions accepted for upload.
        min_password_length: Minimum passphrase length in code points.
        pbkdf2_iterations: PBKDF2 iteration count.
        kdf_salt_mode: How salt bytes are fed to PBKDF2.
    """

    upload_url: str = "http://localhost:4000"
    timeout: float = 30.0
    crypto_timeout: float = 60.0
    user_agent: str = "SecureSend-Python/0.1"
    max_file_size: int = MAX_FILE_SIZE
    allowed_extensions: frozenset[str] = ALLOWED_EXTENSIONS
    min_password_length: int = MIN_PASSWORD_LENGTH
    pbkdf2_iterations: int = PBKDF2_ITERATIONS
    kdf_salt_mode: KdfSaltMode = KdfSaltMode.RAW

    def __post_init__(self) -> None:
        if not self.upload_url:
            msg = "upload_url must not be empty"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if self.crypto_timeout <= 0:
            msg = "crypto_timeout must be positive"
            raise ValueError(msg)
        if self.max_file_size <= 0:
            msg = "max_file_size must be positive"
            raise ValueError(msg)
        if not self.allowed_extensions:
            msg = "allowed_extensions must not be empty"
            raise ValueError(msg)
        if any(ext != ext.lower() for ext in self.allowed_extensions):
            msg = "allowed_extensions must be lower-case"
            raise ValueError(msg)
        if self.min_password_length <= 0:
            msg = "min_password_length must be positive"
            raise ValueError(msg)
        if self.pbkdf2_iterations <= 0:
            msg = "pbkdf2_iterations must be positive"
            raise ValueError(msg)
