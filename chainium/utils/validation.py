"""Validation utilities for Chainium."""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..constants import (
    ADDRESS_CHECKSUM_LENGTH,
    ADDRESS_LENGTH,
    ADDRESS_PREFIX,
    ADDRESS_TEXT_PREFIX,
    CURVE_ORDER,
    HARDENED_OFFSET,
    PASSWORD_HASH_LENGTH,
    PRIVATE_KEY_LENGTH,
)
from ..exceptions import (
    DecodeError,
    DerivationError,
    InvalidAddressError,
    InvalidKeyError,
    ValidationError,
)
from ..types.common import Address, Amount, PrivateKeyBytes
from ..utils.encoding import decode_base58, double_sha256

__all__ = [
    "address_checksum",
    "is_valid_address",
    "validate_address",
    "is_valid_private_key",
    "validate_private_key",
    "validate_password_hash",
    "validate_index",
    "to_decimal",
]


def address_checksum(body: bytes) -> bytes:
    """First four bytes of SHA256(SHA256(prefix || public key hash))."""
    return double_sha256(body)[:ADDRESS_CHECKSUM_LENGTH]


def _address_error(address: str) -> Optional[str]:
    """Return why an address is invalid, or None when it is valid."""
    if not isinstance(address, str) or not address:
        return "Address cannot be empty"

    if not address.startswith(ADDRESS_TEXT_PREFIX):
        return f"Address must start with {ADDRESS_TEXT_PREFIX}"

    try:
        raw = decode_base58(address)
    except DecodeError as e:
        return e.message

    if len(raw) != ADDRESS_LENGTH:
        return f"Address must decode to {ADDRESS_LENGTH} bytes, got {len(raw)}"

    if raw[:len(ADDRESS_PREFIX)] != ADDRESS_PREFIX:
        return "Address prefix mismatch"

    body, checksum = raw[:-ADDRESS_CHECKSUM_LENGTH], raw[-ADDRESS_CHECKSUM_LENGTH:]
    if checksum != address_checksum(body):
        return "Address checksum mismatch"

    return None


def is_valid_address(address: str) -> bool:
    """
    Check if Chainium address is well formed.

    Args:
        address: Address to validate

    Returns:
        True if valid, False otherwise
    """
    return _address_error(address) is None


def validate_address(address: str) -> Address:
    """
    Validate Chainium address.

    Args:
        address: Address to validate

    Returns:
        The address

    Raises:
        InvalidAddressError: If address is invalid
    """
    error = _address_error(address)
    if error is not None:
        raise InvalidAddressError(f"Invalid Chainium address {address!r}: {error}")
    return Address(address)


def is_valid_private_key(key: Union[str, bytes]) -> bool:
    """
    Check if private key is usable.

    Args:
        key: Private key as Base58 string or bytes

    Returns:
        True if valid, False otherwise
    """
    try:
        validate_private_key(key)
        return True
    except InvalidKeyError:
        return False


def validate_private_key(key: Union[str, bytes]) -> PrivateKeyBytes:
    """
    Validate private key and return as bytes.

    Args:
        key: Private key as Base58 string or bytes

    Returns:
        Private key as 32 bytes

    Raises:
        InvalidKeyError: If private key is invalid
    """
    if isinstance(key, str):
        try:
            key = decode_base58(key)
        except DecodeError as e:
            raise InvalidKeyError(f"Invalid Base58 private key: {e.message}") from e

    if not isinstance(key, (bytes, bytearray)):
        raise InvalidKeyError(f"Unsupported private key type: {type(key).__name__}")

    if len(key) != PRIVATE_KEY_LENGTH:
        raise InvalidKeyError(
            f"Private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(key)}"
        )

    # Check range
    key_int = int.from_bytes(key, "big")

    if key_int == 0:
        raise InvalidKeyError("Private key cannot be zero")
    if key_int >= CURVE_ORDER:
        raise InvalidKeyError("Private key exceeds curve order")

    return PrivateKeyBytes(bytes(key))


def validate_password_hash(password_hash: bytes) -> bytes:
    """
    Validate keystore password hash.

    Raises:
        InvalidKeyError: If it is not exactly 32 bytes
    """
    if not isinstance(password_hash, (bytes, bytearray)):
        raise InvalidKeyError(
            f"Password hash must be bytes, got {type(password_hash).__name__}"
        )
    if len(password_hash) != PASSWORD_HASH_LENGTH:
        raise InvalidKeyError(
            f"Password hash must be {PASSWORD_HASH_LENGTH} bytes, got {len(password_hash)}"
        )
    return bytes(password_hash)


def validate_index(index: int) -> int:
    """
    Validate a non-hardened BIP32 child index.

    Raises:
        DerivationError: If index is not in [0, 2**31)
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise DerivationError(f"Key index must be int, got {type(index).__name__}")
    if not 0 <= index < HARDENED_OFFSET:
        raise DerivationError(f"Key index out of range: {index}")
    return index


def to_decimal(amount: Amount) -> Decimal:
    """
    Convert amount to an exact Decimal.

    Floats go through str() so 0.01 becomes Decimal("0.01") rather than its
    binary expansion.

    Args:
        amount: Amount in various formats

    Returns:
        Finite Decimal

    Raises:
        ValidationError: If conversion fails
    """
    if isinstance(amount, bool):
        raise ValidationError(f"Unsupported amount type: {type(amount)}")

    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, (float, str)):
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation as e:
            raise ValidationError(f"Cannot convert to amount: {amount!r}") from e
    else:
        raise ValidationError(f"Unsupported amount type: {type(amount)}")

    if not value.is_finite():
        raise ValidationError(f"Amount must be finite: {amount!r}")

    return value
