import pytest

from secure_send.models.crypto import HEADER_SIZE, TAG_SIZE, EncryptedPayload, KdfSaltMode


def _make_payload(ciphertext: bytes = b"c" * 20) -> EncryptedPayload:
    return EncryptedPayload(salt=b"s" * 16, iv=b"i" * 12, ciphertext=ciphertext)


def test_to_bytes_concatenates_salt_iv_ciphertext() -> None:
    payload = _make_payload()

    assert payload.to_bytes() == b"s" * 16 + b"i" * 12 + b"c" * 20
    assert len(payload) == HEADER_SIZE + 20


def test_from_bytes_splits_fixed_layout() -> None:
    payload = EncryptedPayload.from_bytes(b"s" * 16 + b"i" * 12 + b"c" * 20)

    assert payload == _make_payload()


def test_from_bytes_rejects_short_blob() -> None:
    with pytest.raises(ValueError, match="Payload too short"):
        EncryptedPayload.from_bytes(b"\x00" * (HEADER_SIZE + TAG_SIZE - 1))


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"salt": b"s" * 8}, "salt must be 16 bytes"),
        ({"iv": b"i" * 16}, "iv must be 12 bytes"),
        ({"ciphertext": b"c" * 15}, "ciphertext must include a 16-byte tag"),
    ],
)
def test_invalid_field_sizes_raise(kwargs: dict, match: str) -> None:
    fields = {"salt": b"s" * 16, "iv": b"i" * 12, "ciphertext": b"c" * 16} | kwargs

    with pytest.raises(ValueError, match=match):
        EncryptedPayload(**fields)


def test_raw_salt_mode_passes_bytes_through() -> None:
    assert KdfSaltMode.RAW.salt_material(b"\x01\xff") == b"\x01\xff"


def test_text_salt_mode_joins_decimal_values() -> None:
    assert KdfSaltMode.TEXT.salt_material(b"\x01\xff\x00") == b"1,255,0"
