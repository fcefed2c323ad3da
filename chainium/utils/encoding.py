"""Encoding and hashing utilities for Chainium."""

import base64
import binascii
import hashlib
import struct
from typing import Optional, Union

from ..constants import ADDRESS_HASH_LENGTH
from ..exceptions import DecodeError, ValidationError
from ..types.common import Address, Hash, Bytesish

__all__ = [
    "to_bytes",
    "bytes_to_int",
    "encode_base58",
    "decode_base58",
    "try_decode_base58",
    "encode_base64",
    "decode_base64",
    "sha256",
    "sha512",
    "sha160",
    "double_sha256",
    "hash_data",
    "derive_hash",
]

# Constants
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}

# nonce (int64) || action number (uint16), big-endian
_DERIVE_HASH_SUFFIX = struct.Struct(">qH")


def to_bytes(data: Bytesish) -> bytes:
    """Return bytes as-is, encode text as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def bytes_to_int(
    data: bytes,
    byteorder: str = "big",
    signed: bool = False
) -> int:
    """
    Convert bytes to integer.

    Args:
        data: Bytes to decode
        byteorder: 'big' or 'little' endian
        signed: Whether integer is signed

    Returns:
        Decoded integer
    """
    return int.from_bytes(data, byteorder=byteorder, signed=signed)


def encode_base58(data: bytes) -> str:
    """
    Encode bytes as Base58 string.

    Args:
        data: Bytes to encode

    Returns:
        Base58 encoded string
    """
    # Convert to integer
    n = bytes_to_int(data, byteorder="big")

    # Encode
    encoded = ""
    while n:
        n, remainder = divmod(n, 58)
        encoded = BASE58_ALPHABET[remainder] + encoded

    # Add leading zeros
    for byte in data:
        if byte == 0:
            encoded = "1" + encoded
        else:
            break

    return encoded


def decode_base58(string: str) -> bytes:
    """
    Decode Base58 string to bytes.

    Args:
        string: Base58 string

    Returns:
        Decoded bytes (empty for an empty string)

    Raises:
        DecodeError: If string contains invalid characters
    """
    if not isinstance(string, str):
        raise DecodeError(f"Base58 input must be str, got {type(string).__name__}")

    # Decode to integer
    n = 0
    for char in string:
        try:
            n = n * 58 + _BASE58_INDEX[char]
        except KeyError:
            raise DecodeError(f"Invalid Base58 character: {char!r}") from None

    # Convert to bytes
    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n else b""

    # Add leading zeros
    leading_zeros = len(string) - len(string.lstrip("1"))
    return b"\x00" * leading_zeros + body


def try_decode_base58(string: str) -> Optional[bytes]:
    """Decode Base58 string, returning None instead of raising."""
    try:
        return decode_base58(string)
    except DecodeError:
        return None


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard padded Base64."""
    return base64.b64encode(data).decode("ascii")


def decode_base64(string: str) -> bytes:
    """
    Decode standard padded Base64.

    Raises:
        DecodeError: If string is not valid Base64
    """
    try:
        return base64.b64decode(string, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise DecodeError(f"Invalid Base64 string: {e}") from e


def sha256(data: bytes) -> bytes:
    """Perform SHA256 hash."""
    return hashlib.sha256(data).digest()


def sha512(data: bytes) -> bytes:
    """Perform SHA512 hash."""
    return hashlib.sha512(data).digest()


def sha160(data: bytes) -> bytes:
    """First 20 bytes of SHA512(data). Not RIPEMD-160."""
    return sha512(data)[:ADDRESS_HASH_LENGTH]


def double_sha256(data: bytes) -> bytes:
    """Perform double SHA256 hash."""
    return sha256(sha256(data))


def hash_data(data: Bytesish) -> Hash:
    """
    Compute the ledger's content hash: Base58(SHA256(data)).

    Args:
        data: Bytes, or text encoded as UTF-8

    Returns:
        Base58 encoded hash
    """
    return Hash(encode_base58(sha256(to_bytes(data))))


def derive_hash(address: Union[Address, str], nonce: int, action_number: int) -> Hash:
    """
    Predict the hash of an entity created by a transaction action.

    The hash input is the decoded sender address followed by the nonce as a
    big-endian int64 and the 1-based action number as a big-endian uint16.

    Args:
        address: Sender address
        nonce: Transaction nonce
        action_number: 1-based position of the action in the transaction

    Returns:
        Base58 encoded hash of the future asset or account

    Raises:
        DecodeError: If address is not valid Base58
        ValidationError: If nonce or action number overflow their widths
    """
    address_bytes = decode_base58(address)
    try:
        suffix = _DERIVE_HASH_SUFFIX.pack(nonce, action_number)
    except struct.error as e:
        raise ValidationError(
            f"Nonce {nonce} or action number {action_number} out of range"
        ) from e
    return hash_data(address_bytes + suffix)
