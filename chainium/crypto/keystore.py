"""Encrypted seed storage for Chainium wallets."""

import logging
import secrets
from typing import List

from Crypto.Cipher import AES

from ..constants import KEYSTORE_NONCE_LENGTH, KEYSTORE_TAG_LENGTH
from ..crypto.bip39 import seed_from_mnemonic
from ..crypto.hd import restore_wallets_from_seed, wallet_from_seed
from ..exceptions import DecryptionError
from ..types.common import Bytesish, Seed
from ..types.wallet import Wallet
from ..utils.encoding import sha256, to_bytes
from ..utils.validation import validate_password_hash

__all__ = [
    "encrypt",
    "decrypt",
    "password_hash_from_password",
    "generate_keystore",
    "seed_from_keystore",
    "wallet_from_keystore",
    "restore_wallets_from_keystore",
]

logger = logging.getLogger(__name__)


def password_hash_from_password(password: Bytesish) -> bytes:
    """Derive a 32-byte keystore key as SHA256(password)."""
    return sha256(to_bytes(password))


def encrypt(data: bytes, password_hash: bytes) -> bytes:
    """
    Encrypt data with AES-256-GCM.

    Args:
        data: Plaintext, usually a seed
        password_hash: 32-byte key

    Returns:
        nonce (12 bytes) || ciphertext || tag (16 bytes)

    Raises:
        InvalidKeyError: If password_hash is not 32 bytes
    """
    key = validate_password_hash(password_hash)
    nonce = secrets.token_bytes(KEYSTORE_NONCE_LENGTH)
    cipher = AES.new(key, AES.MODE_GCM, nonce=nonce, mac_len=KEYSTORE_TAG_LENGTH)
    ciphertext, tag = cipher.encrypt_and_digest(bytes(data))
    return nonce + ciphertext + tag


def decrypt(encrypted: bytes, password_hash: bytes) -> bytes:
    """
    Decrypt and authenticate an AES-256-GCM blob produced by encrypt().

    Args:
        encrypted: nonce || ciphertext || tag
        password_hash: 32-byte key

    Returns:
        Plaintext

    Raises:
        InvalidKeyError: If password_hash is not 32 bytes
        DecryptionError: If the blob is truncated, tampered with, or the key
            is wrong
    """
    key = validate_password_hash(password_hash)
    encrypted = bytes(encrypted)

    if len(encrypted) < KEYSTORE_NONCE_LENGTH + KEYSTORE_TAG_LENGTH:
        raise DecryptionError(
            f"Keystore too short: {len(encrypted)} bytes"
        )

    nonce = encrypted[:KEYSTORE_NONCE_LENGTH]
    ciphertext = encrypted[KEYSTORE_NONCE_LENGTH:-KEYSTORE_TAG_LENGTH]
    tag = encrypted[-KEYSTORE_TAG_LENGTH:]

    cipher = AES.new(key, AES.MODE_GCM, nonce=nonce, mac_len=KEYSTORE_TAG_LENGTH)
    try:
        return cipher.decrypt_and_verify(ciphertext, tag)
    except ValueError as e:
        raise DecryptionError("Keystore authentication failed") from e


def generate_keystore(mnemonic: str, password_hash: bytes) -> bytes:
    """
    Encrypt the seed of a mnemonic (empty passphrase).

    Raises:
        InvalidMnemonicError: If the mnemonic is invalid
        InvalidKeyError: If password_hash is not 32 bytes
    """
    seed = seed_from_mnemonic(mnemonic, "")
    keystore = encrypt(seed, password_hash)
    logger.debug("Generated keystore (%d bytes)", len(keystore))
    return keystore


def seed_from_keystore(keystore: bytes, password_hash: bytes) -> Seed:
    """Decrypt the seed stored in a keystore."""
    return Seed(decrypt(keystore, password_hash))


def wallet_from_keystore(keystore: bytes, password_hash: bytes, index: int) -> Wallet:
    """Derive one wallet from an encrypted keystore."""
    return wallet_from_seed(seed_from_keystore(keystore, password_hash), index)


def restore_wallets_from_keystore(keystore: bytes, password_hash: bytes, count: int) -> List[Wallet]:
    """Derive wallets 0..count-1 from an encrypted keystore."""
    return restore_wallets_from_seed(seed_from_keystore(keystore, password_hash), count)
