import pytest
from chainium.utils.encoding import (
    encode_base58, decode_base58, try_decode_base58,
    encode_base64, decode_base64,
    sha160, sha512, hash_data, derive_hash,
)
from chainium.exceptions import DecodeError, ValidationError


def test_base58_vector():
    assert encode_base58(b"Chainium") == "CGwVR5Wyya4"
    assert decode_base58("CGwVR5Wyya4") == b"Chainium"


def test_base58_roundtrip():
    for payload in [b"", b"\x00", b"\x00\x00\x01", b"hello world", bytes(range(256)) * 2]:
        assert decode_base58(encode_base58(payload)) == payload


def test_base58_leading_zeros():
    assert encode_base58(b"\x00\x00\x01") == "112"
    assert decode_base58("11") == b"\x00\x00"


def test_base58_invalid_characters():
    for bad in ["0", "O", "I", "l", "CH+"]:
        with pytest.raises(DecodeError):
            decode_base58(bad)
        assert try_decode_base58(bad) is None


def test_base64_vector():
    assert encode_base64(b"Chainium") == "Q2hhaW5pdW0="
    assert decode_base64("Q2hhaW5pdW0=") == b"Chainium"
    with pytest.raises(DecodeError):
        decode_base64("not base64!")


def test_hash_vector():
    assert hash_data(b"Chainium") == "Dp6vNLdUbRTc1Y3i9uSBritNqvqe4es9MjjGrVi1nQMu"
    assert hash_data("Chainium") == hash_data(b"Chainium")


def test_sha160_is_truncated_sha512():
    assert sha160(b"Chainium") == sha512(b"Chainium")[:20]
    assert len(sha160(b"")) == 20


def test_derive_hash_vector():
    actual = derive_hash("CHPJ6aVwpGBRf1dv6Ey1TuhJzt1VtCP5LYB", 32, 2)
    assert actual == "5kHcMrwXUptjmbdR8XBW2yY3FkSFwnMdrVr22Yg39pTR"


def test_derive_hash_depends_on_every_input():
    address = "CHPJ6aVwpGBRf1dv6Ey1TuhJzt1VtCP5LYB"
    base = derive_hash(address, 32, 2)
    assert derive_hash(address, 33, 2) != base
    assert derive_hash(address, 32, 1) != base


def test_derive_hash_action_number_is_unsigned_16_bit():
    address = "CHPJ6aVwpGBRf1dv6Ey1TuhJzt1VtCP5LYB"
    for action_number in [40000, 65535]:
        expected = hash_data(
            decode_base58(address)
            + (1).to_bytes(8, "big")
            + action_number.to_bytes(2, "big")
        )
        assert derive_hash(address, 1, action_number) == expected


def test_derive_hash_out_of_range():
    address = "CHPJ6aVwpGBRf1dv6Ey1TuhJzt1VtCP5LYB"
    with pytest.raises(ValidationError):
        derive_hash(address, 1, 2 ** 16)
    with pytest.raises(ValidationError):
        derive_hash(address, 1, -1)
    with pytest.raises(ValidationError):
        derive_hash(address, 2 ** 63, 1)
    with pytest.raises(DecodeError):
        derive_hash("not-an-address", 1, 1)
