"""Common type definitions for Chainium."""

from typing import NewType, Union
from decimal import Decimal

__all__ = [
    "Address",
    "Hash",
    "PrivateKeyStr",
    "SignatureStr",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Signature",
    "Digest",
    "Seed",
    "Amount",
    "Bytesish",
]

# Identifiers
Address = NewType("Address", str)
"""Chainium address string (Base58, starts with CH)."""

Hash = NewType("Hash", str)
"""Base58 SHA-256 hash, e.g. an asset or account hash."""

PrivateKeyStr = NewType("PrivateKeyStr", str)
"""Base58 encoded 32-byte private key."""

SignatureStr = NewType("SignatureStr", str)
"""Base58 encoded recoverable signature."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""65-byte uncompressed public key."""

Signature = NewType("Signature", bytes)
"""65-byte recoverable signature (r || s || recovery id)."""

Digest = NewType("Digest", bytes)
"""32-byte message digest."""

Seed = NewType("Seed", bytes)
"""64-byte BIP39 seed."""

# Type aliases
Amount = Union[Decimal, int, str, float]
"""Flexible amount type, always converted to Decimal."""

Bytesish = Union[str, bytes]
"""Text (UTF-8 encoded before use) or raw bytes."""
