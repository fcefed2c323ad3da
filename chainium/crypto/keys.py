"""Key management for Chainium."""

import logging
import secrets
from typing import Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey

from ..constants import ADDRESS_PREFIX, DIGEST_LENGTH, PRIVATE_KEY_LENGTH
from ..exceptions import CryptoError, InvalidKeyError, SignatureRecoveryError
from ..types.common import (
    Address,
    PrivateKeyBytes,
    PrivateKeyStr,
    PublicKeyBytes,
    Signature,
)
from ..types.wallet import Wallet
from ..utils.encoding import encode_base58, sha160, sha256
from ..utils.validation import address_checksum, validate_private_key

__all__ = [
    "PrivateKey",
    "PublicKey",
    "derive_address",
    "generate_wallet",
    "address_from_private_key",
    "wallet_from_private_key",
]

logger = logging.getLogger(__name__)


def derive_address(public_key: Union[bytes, "PublicKey"]) -> Address:
    """
    Derive Chainium address from a public key.

    address = Base58(prefix || pk_hash || checksum) where
    pk_hash = sha160(sha256(public_key)) and
    checksum = sha256(sha256(prefix || pk_hash))[:4].

    Args:
        public_key: Uncompressed public key bytes or PublicKey

    Returns:
        Address string
    """
    if isinstance(public_key, PublicKey):
        public_key = public_key.point

    body = ADDRESS_PREFIX + sha160(sha256(public_key))
    return Address(encode_base58(body + address_checksum(body)))


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Handles private key operations including signing, public key
    derivation and Base58 export.
    """

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, Base58 string, or another PrivateKey

        Raises:
            InvalidKeyError: If key format is invalid
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        # Validate and normalize key
        self._secret = validate_private_key(key)

        # Initialize crypto library
        try:
            self._key = SecpPrivateKey(self._secret)
        except ValueError as e:
            raise InvalidKeyError(f"Cannot reconstruct key pair: {e}") from e

    @classmethod
    def create(cls) -> "PrivateKey":
        """
        Create new random private key.

        Returns:
            New PrivateKey instance
        """
        while True:
            key_bytes = secrets.token_bytes(PRIVATE_KEY_LENGTH)
            try:
                return cls(key_bytes)
            except InvalidKeyError:
                # Zero or above the curve order, draw again
                continue

    @classmethod
    def from_int(cls, value: int) -> "PrivateKey":
        """Create private key from a scalar, left-padded to 32 bytes."""
        if value <= 0:
            raise InvalidKeyError("Private key scalar must be positive")
        try:
            return cls(value.to_bytes(PRIVATE_KEY_LENGTH, "big"))
        except OverflowError as e:
            raise InvalidKeyError("Private key scalar too large") from e

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    def to_base58(self) -> PrivateKeyStr:
        """Get private key as the ledger's Base58 text form."""
        return PrivateKeyStr(encode_base58(self._secret))

    def public_key(self) -> "PublicKey":
        """
        Get corresponding public key.

        Returns:
            PublicKey instance (uncompressed)
        """
        return PublicKey(self._key.public_key.format(compressed=False))

    def address(self) -> Address:
        """Get address derived from this key."""
        return self.public_key().address()

    def to_wallet(self) -> Wallet:
        """Get this key and its address as a Wallet."""
        return Wallet(private_key=self.to_base58(), address=self.address())

    def sign_recoverable(self, message_hash: bytes) -> Signature:
        """
        Create recoverable signature (RFC 6979 deterministic nonce).

        Args:
            message_hash: 32-byte hash to sign

        Returns:
            65-byte signature: r || s || recovery id

        Raises:
            CryptoError: If signing fails
        """
        if len(message_hash) != DIGEST_LENGTH:
            raise CryptoError(f"Message hash must be {DIGEST_LENGTH} bytes")

        try:
            return Signature(self._key.sign_recoverable(message_hash, hasher=None))
        except ValueError as e:
            raise CryptoError(f"Recoverable signing failed: {e}") from e

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)

    def __repr__(self) -> str:
        """String representation."""
        # Show first and last 4 chars only
        encoded = self.to_base58()
        masked = f"{encoded[:4]}...{encoded[-4:]}"
        return f"PrivateKey({masked})"


class PublicKey:
    """secp256k1 public key wrapper."""

    def __init__(self, key: Union[bytes, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: Public key as 33 or 65 bytes, or another PublicKey

        Raises:
            InvalidKeyError: If key is not a point on the curve
        """
        if isinstance(key, PublicKey):
            self._key = key._key
            return

        try:
            self._key = SecpPublicKey(bytes(key))
        except (ValueError, TypeError) as e:
            raise InvalidKeyError(f"Invalid public key: {e}") from e

    @classmethod
    def recover(cls, signature: bytes, message_hash: bytes) -> "PublicKey":
        """
        Recover the signer's public key from a recoverable signature.

        Args:
            signature: 65-byte signature (r || s || recovery id)
            message_hash: 32-byte hash that was signed

        Returns:
            PublicKey of the signer

        Raises:
            SignatureRecoveryError: If signature is malformed or unrecoverable
        """
        if len(message_hash) != DIGEST_LENGTH:
            raise SignatureRecoveryError(f"Message hash must be {DIGEST_LENGTH} bytes")

        try:
            key = SecpPublicKey.from_signature_and_message(
                bytes(signature), message_hash, hasher=None
            )
        except (ValueError, TypeError) as e:
            raise SignatureRecoveryError(f"Public key recovery failed: {e}") from e

        return cls(key.format(compressed=False))

    @property
    def point(self) -> PublicKeyBytes:
        """Get public key as 65-byte uncompressed point."""
        return PublicKeyBytes(self._key.format(compressed=False))

    @property
    def compressed(self) -> bytes:
        """Get public key as 33-byte compressed point."""
        return self._key.format(compressed=True)

    def address(self) -> Address:
        """Get Chainium address."""
        return derive_address(self.point)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self.point == other.point

    def __hash__(self) -> int:
        return hash(self.point)

    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.address()})"


def generate_wallet() -> Wallet:
    """Generate a wallet from a fresh random key."""
    wallet = PrivateKey.create().to_wallet()
    logger.debug("Generated wallet %s", wallet.address)
    return wallet


def address_from_private_key(private_key: Union[str, bytes]) -> Address:
    """
    Derive the address of a Base58 private key.

    Raises:
        InvalidKeyError: If the key cannot be decoded or reconstructed
    """
    return PrivateKey(private_key).address()


def wallet_from_private_key(private_key: Union[str, bytes]) -> Wallet:
    """
    Build a Wallet from an existing private key.

    Raises:
        InvalidKeyError: If the key cannot be decoded or reconstructed
    """
    return PrivateKey(private_key).to_wallet()
