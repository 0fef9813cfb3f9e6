"""
Client-side input validation.

Each validator returns None when the input is acceptable, or the
FailureKind of the first rule it breaks.
"""

from collections.abc import Collection

from email_validator import EmailNotValidError, validate_email

from secure_send.models.upload import FailureKind, SelectedFile

MAX_FILE_SIZE = 10_000_000
MIN_PASSWORD_LENGTH = 20
ALLOWED_EXTENSIONS = frozenset(
    {
        "pdf",
        "docx",
        "doc",
        "xls",
        "xlsx",
        "csv",
        "txt",
        "rtf",
        "html",
        "zip",
        "mp3",
        "m4a",
        "wma",
        "mpg",
        "flv",
        "avi",
        "jpg",
        "jpeg",
        "png",
        "gif",
        "ppt",
        "pptx",
        "wav",
        "mp4",
        "m4v",
        "wmv",
        "epub",
    }
)


def file_extension(name: str) -> str:
    """Lower-cased text after the last dot, or the whole name without one."""
    return name.rsplit(".", 1)[-1].lower()


def validate_file_metadata(
    name: str,
    size: int,
    *,
    max_size: int = MAX_FILE_SIZE,
    allowed_extensions: Collection[str] = ALLOWED_EXTENSIONS,
) -> FailureKind | None:
    """
    Check size and extension from metadata alone.

    Size is checked first, in decimal bytes.
    """
    if size > max_size:
        return FailureKind.TOO_LARGE
    if file_extension(name) not in allowed_extensions:
        return FailureKind.DISALLOWED_EXTENSION
    return None


def validate_file(
    file: SelectedFile,
    *,
    max_size: int = MAX_FILE_SIZE,
    allowed_extensions: Collection[str] = ALLOWED_EXTENSIONS,
) -> FailureKind | None:
    return validate_file_metadata(
        file.name, file.size, max_size=max_size, allowed_extensions=allowed_extensions
    )


def validate_password(
    password: str, *, min_length: int = MIN_PASSWORD_LENGTH
) -> FailureKind | None:
    """
    Check passphrase strength.

    Length counts code points. The uppercase rule holds when the string
    differs from its lower-cased form.
    """
    if len(password) < min_length:
        return FailureKind.TOO_SHORT
    if password == password.lower():
        return FailureKind.NO_UPPERCASE
    return None


def validate_receiver(email: str) -> FailureKind | None:
    """Check recipient address syntax. Deliverability is not checked."""
    if len(email) == 0:
        return FailureKind.EMPTY_EMAIL
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return FailureKind.INVALID_EMAIL
    return None
