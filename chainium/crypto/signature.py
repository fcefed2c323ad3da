"""Signature utilities for Chainium."""

import logging
from typing import Optional, Union

from ..constants import DIGEST_LENGTH, Network, SIGNATURE_LENGTH
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import CryptoError, DecodeError, SignatureRecoveryError
from ..types.common import Address, Bytesish, Digest, SignatureStr
from ..utils.encoding import decode_base58, encode_base58, sha256, to_bytes

__all__ = [
    "message_digest",
    "plain_text_digest",
    "sign",
    "sign_message",
    "sign_plain_text",
    "recover_address",
    "verify_message",
    "verify_plain_text_signature",
    "try_verify_plain_text_signature",
]

logger = logging.getLogger(__name__)

NetworkCode = Union[Network, str, bytes]


def _network_bytes(network_code: NetworkCode) -> bytes:
    if isinstance(network_code, Network):
        return network_code.value.encode("utf-8")
    return to_bytes(network_code)


def message_digest(network_code: NetworkCode, message: Bytesish) -> Digest:
    """
    Hash a message bound to a network.

    digest = SHA256(SHA256(message) || SHA256(network_code))

    Args:
        network_code: Network the signature is valid on
        message: Message bytes, or text encoded as UTF-8

    Returns:
        32-byte digest
    """
    message_hash = sha256(to_bytes(message))
    network_hash = sha256(_network_bytes(network_code))
    return Digest(sha256(message_hash + network_hash))


def plain_text_digest(text: Bytesish) -> Digest:
    """Hash text without any network binding: SHA256(text)."""
    return Digest(sha256(to_bytes(text)))


def sign(private_key: Union[str, bytes, PrivateKey], data_hash: bytes) -> SignatureStr:
    """
    Sign a 32-byte digest.

    Args:
        private_key: Base58 private key, raw key bytes or PrivateKey
        data_hash: 32-byte digest

    Returns:
        Base58 encoded 65-byte recoverable signature

    Raises:
        InvalidKeyError: If private key is invalid
        CryptoError: If signing fails
    """
    if len(data_hash) != DIGEST_LENGTH:
        raise CryptoError(f"Data hash must be {DIGEST_LENGTH} bytes, got {len(data_hash)}")

    key = PrivateKey(private_key)
    return SignatureStr(encode_base58(key.sign_recoverable(data_hash)))


def sign_message(
    network_code: NetworkCode,
    private_key: Union[str, bytes, PrivateKey],
    message: Bytesish
) -> SignatureStr:
    """
    Sign a message for a specific network.

    A signature made for one network code does not verify under another,
    so test network signatures cannot be replayed on the main network.

    Args:
        network_code: Network code, e.g. Network.MAINNET
        private_key: Base58 private key
        message: Message to sign

    Returns:
        Base58 encoded signature
    """
    return sign(private_key, message_digest(network_code, message))


def sign_plain_text(private_key: Union[str, bytes, PrivateKey], text: Bytesish) -> SignatureStr:
    """Sign text outside the transaction protocol (no network binding)."""
    return sign(private_key, plain_text_digest(text))


def recover_address(signature: str, data_hash: bytes) -> Address:
    """
    Recover the signer's address from a signature and the signed digest.

    Args:
        signature: Base58 encoded recoverable signature
        data_hash: 32-byte digest that was signed

    Returns:
        Address of the signer

    Raises:
        SignatureRecoveryError: If signature is malformed or unrecoverable
    """
    try:
        signature_bytes = decode_base58(signature)
    except DecodeError as e:
        raise SignatureRecoveryError(f"Invalid Base58 signature: {e.message}") from e

    if len(signature_bytes) != SIGNATURE_LENGTH:
        raise SignatureRecoveryError(
            f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(signature_bytes)}"
        )

    return PublicKey.recover(signature_bytes, data_hash).address()


def verify_message(network_code: NetworkCode, signature: str, message: Bytesish) -> Address:
    """
    Recover the address that signed a network-bound message.

    Verification is address recovery: compare the result with the address
    you expect.

    Raises:
        SignatureRecoveryError: If signature is malformed or unrecoverable
    """
    return recover_address(signature, message_digest(network_code, message))


def verify_plain_text_signature(signature: str, text: Bytesish) -> Address:
    """
    Recover the address that signed plain text.

    Raises:
        SignatureRecoveryError: If signature is malformed or unrecoverable
    """
    return recover_address(signature, plain_text_digest(text))


def try_verify_plain_text_signature(signature: str, text: Bytesish) -> Optional[Address]:
    """Recover the signer of plain text, returning None on failure."""
    try:
        return verify_plain_text_signature(signature, text)
    except SignatureRecoveryError as e:
        logger.debug("Signature recovery failed: %s", e)
        return None
