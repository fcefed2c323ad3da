from decimal import Decimal

import pytest
from chainium.constants import CURVE_ORDER
from chainium.crypto.keys import generate_wallet
from chainium.exceptions import (
    DerivationError,
    InvalidAddressError,
    InvalidKeyError,
    ValidationError,
)
from chainium.utils.encoding import decode_base58, encode_base58
from chainium.utils.validation import (
    is_valid_address, validate_address,
    is_valid_private_key, validate_private_key,
    validate_password_hash, validate_index, to_decimal,
)


def test_generated_address_is_valid():
    wallet = generate_wallet()
    assert wallet.address.startswith("CH")
    assert len(decode_base58(wallet.address)) == 26
    assert is_valid_address(wallet.address)
    assert validate_address(wallet.address) == wallet.address


def test_address_single_byte_mutation_invalidates():
    raw = decode_base58(generate_wallet().address)
    for i in range(len(raw)):
        mutated = bytearray(raw)
        mutated[i] ^= 0x01
        assert not is_valid_address(encode_base58(bytes(mutated)))


def test_invalid_addresses():
    for bad in ["", "CH", "CH0OIl", "XYPJ6aVwpGBRf1dv6Ey1TuhJzt1VtCP5LYB", None, 123]:
        assert not is_valid_address(bad)
    with pytest.raises(InvalidAddressError):
        validate_address("CH123")
    with pytest.raises(ValidationError):
        validate_address("")


def test_private_key_validation():
    assert validate_private_key(b"\x01" * 32) == b"\x01" * 32
    assert is_valid_private_key(encode_base58(b"\x01" * 32))
    assert not is_valid_private_key(b"\x00" * 32)
    assert not is_valid_private_key(CURVE_ORDER.to_bytes(32, "big"))
    assert not is_valid_private_key(b"\x01" * 31)
    assert not is_valid_private_key("0OIl")
    with pytest.raises(InvalidKeyError):
        validate_private_key(12345)


def test_password_hash_validation():
    assert validate_password_hash(bytearray(32)) == bytes(32)
    with pytest.raises(InvalidKeyError):
        validate_password_hash(b"short")
    with pytest.raises(InvalidKeyError):
        validate_password_hash("a" * 32)


def test_index_validation():
    assert validate_index(0) == 0
    assert validate_index(2 ** 31 - 1) == 2 ** 31 - 1
    for bad in [-1, 2 ** 31, True, 1.0]:
        with pytest.raises(DerivationError):
            validate_index(bad)


def test_to_decimal():
    assert to_decimal(0.01) == Decimal("0.01")
    assert to_decimal("1000") == Decimal(1000)
    assert to_decimal(7) == Decimal(7)
    assert to_decimal(Decimal("1.50")) == Decimal("1.50")
    for bad in [True, "abc", "NaN", float("inf"), None, [1]]:
        with pytest.raises(ValidationError):
            to_decimal(bad)
