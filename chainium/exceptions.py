"""Chainium exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "ChainiumError",
    "ValidationError",
    "DecodeError",
    "InvalidAddressError",
    "CryptoError",
    "InvalidKeyError",
    "SignatureRecoveryError",
    "DecryptionError",
    "DerivationError",
    "InvalidMnemonicError",
    "SerializationError",
]


class ChainiumError(Exception):
    """Base exception for all Chainium errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(ChainiumError):
    """Raised when validation of caller input fails."""
    pass


class DecodeError(ValidationError):
    """Raised when Base58 or Base64 text is malformed."""
    pass


class InvalidAddressError(ValidationError):
    """Raised when an address fails its prefix, length or checksum check."""
    pass


class CryptoError(ChainiumError):
    """Raised when cryptographic operation fails."""
    pass


class InvalidKeyError(CryptoError):
    """Raised when a private key or password hash cannot be used."""
    pass


class SignatureRecoveryError(CryptoError):
    """Raised when the signer's public key cannot be recovered."""
    pass


class DecryptionError(CryptoError):
    """Raised when a keystore fails authentication or is truncated."""
    pass


class DerivationError(CryptoError):
    """Raised when HD key derivation fails."""
    pass


class InvalidMnemonicError(ChainiumError):
    """Raised when a mnemonic fails its word count, word list or checksum check."""
    pass


class SerializationError(ChainiumError):
    """Raised when serialization/deserialization fails."""
    pass
