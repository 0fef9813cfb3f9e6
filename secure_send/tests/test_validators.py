import pytest

from secure_send.models.upload import FailureKind, SelectedFile
from secure_send.validators import (
    ALLOWED_EXTENSIONS,
    MAX_FILE_SIZE,
    file_extension,
    validate_file,
    validate_file_metadata,
    validate_password,
    validate_receiver,
)

# File validation


def test_allow_list_has_expected_extensions() -> None:
    assert len(ALLOWED_EXTENSIONS) == 27
    assert {"pdf", "docx", "zip", "jpg", "mp4", "epub"} <= ALLOWED_EXTENSIONS


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("report.pdf", "pdf"),
        ("Archive.ZIP", "zip"),
        ("backup.tar.gz", "gz"),
        ("README", "readme"),
        ("trailing.", ""),
    ],
)
def test_file_extension_uses_text_after_last_dot(name: str, expected: str) -> None:
    assert file_extension(name) == expected


def test_validate_file_accepts_allowed_file_at_size_limit() -> None:
    assert validate_file_metadata("report.pdf", MAX_FILE_SIZE) is None


@pytest.mark.parametrize("name", ["report.pdf", "malware.exe", "noextension"])
def test_validate_file_rejects_oversized_file_regardless_of_extension(name: str) -> None:
    assert validate_file_metadata(name, MAX_FILE_SIZE + 1) == FailureKind.TOO_LARGE


def test_validate_file_size_limit_is_decimal_not_binary() -> None:
    assert validate_file_metadata("movie.mp4", 10 * 1024 * 1024) == FailureKind.TOO_LARGE


@pytest.mark.parametrize("name", ["malware.exe", "script.sh", "exe", "report.pdf.bat"])
def test_validate_file_rejects_disallowed_extension(name: str) -> None:
    assert validate_file_metadata(name, 100) == FailureKind.DISALLOWED_EXTENSION


@pytest.mark.parametrize("name", ["REPORT.PDF", "Photo.JpEg", "book.EPUB"])
def test_validate_file_extension_check_is_case_insensitive(name: str) -> None:
    assert validate_file_metadata(name, 100) is None


def test_validate_file_uses_selected_file_size() -> None:
    file = SelectedFile(name="big.zip", content=b"\x00" * 11)

    assert validate_file(file, max_size=10) == FailureKind.TOO_LARGE
    assert validate_file(file, max_size=11) is None


def test_validate_file_honours_custom_allow_list() -> None:
    file = SelectedFile(name="notes.md", content=b"# notes")

    assert validate_file(file) == FailureKind.DISALLOWED_EXTENSION
    assert validate_file(file, allowed_extensions={"md"}) is None


def test_validate_file_without_dot_uses_whole_name_as_extension() -> None:
    assert validate_file_metadata("pdf", 100) is None
    assert validate_file_metadata("Makefile", 100) == FailureKind.DISALLOWED_EXTENSION


# Password validation


@pytest.mark.parametrize("password", ["", "Short", "shortupper", "A" * 19])
def test_validate_password_rejects_short_passwords(password: str) -> None:
    assert validate_password(password) == FailureKind.TOO_SHORT


def test_validate_password_rejects_all_lowercase() -> None:
    assert validate_password("alllowercasepassword") == FailureKind.NO_UPPERCASE


def test_validate_password_rejects_digits_and_symbols_only() -> None:
    assert validate_password("1234567890!@#$%^&*()") == FailureKind.NO_UPPERCASE


def test_validate_password_reports_length_before_case() -> None:
    assert validate_password("lower") == FailureKind.TOO_SHORT


def test_validate_password_accepts_valid_password() -> None:
    assert validate_password("ValidPassphrase12345") is None


def test_validate_password_counts_code_points() -> None:
    password = "Ü" + "é" * 19

    assert len(password) == 20
    assert validate_password(password) is None


def test_validate_password_honours_custom_min_length() -> None:
    assert validate_password("Short1", min_length=6) is None
    assert validate_password("Short", min_length=6) == FailureKind.TOO_SHORT


# Receiver validation


def test_validate_receiver_rejects_empty_string() -> None:
    assert validate_receiver("") == FailureKind.EMPTY_EMAIL


@pytest.mark.parametrize(
    "email",
    ["not-an-email", "a@", "@b.com", "a b@c.com", "a@@b.com", " "],
)
def test_validate_receiver_rejects_invalid_syntax(email: str) -> None:
    assert validate_receiver(email) == FailureKind.INVALID_EMAIL


@pytest.mark.parametrize("email", ["a@b.com", "first.last@mail.org", "user+tag@sub.domain.io"])
def test_validate_receiver_accepts_valid_addresses(email: str) -> None:
    assert validate_receiver(email) is None
