"""
Chainium Python SDK

Client-side primitives for the Chainium public blockchain: wallets and
addresses, HD derivation from mnemonics, encrypted keystores, message
signing and the transaction builder.
"""

from .constants import Network
from .exceptions import (
    ChainiumError,
    ValidationError,
    DecodeError,
    InvalidAddressError,
    CryptoError,
    InvalidKeyError,
    SignatureRecoveryError,
    DecryptionError,
    DerivationError,
    InvalidMnemonicError,
    SerializationError,
)
from .crypto import (
    PrivateKey,
    PublicKey,
    generate_wallet,
    address_from_private_key,
    sign_message,
    sign_plain_text,
    verify_message,
    verify_plain_text_signature,
    generate_mnemonic,
    generate_keystore,
    wallet_from_keystore,
    restore_wallets_from_keystore,
    sign_transaction,
    verify_signed_transaction,
)
from .types import Address, Hash, Wallet
from .types.transaction import Tx, TxAction, SignedTx, create_tx
from .utils.encoding import (
    encode_base58,
    decode_base58,
    encode_base64,
    decode_base64,
    hash_data,
    derive_hash,
)
from .utils.validation import is_valid_address

__version__ = "1.0.0"
__author__ = "Chainium Python SDK"

__all__ = [
    # Network
    "Network",

    # Exceptions
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

    # Crypto
    "PrivateKey",
    "PublicKey",
    "generate_wallet",
    "address_from_private_key",
    "sign_message",
    "sign_plain_text",
    "verify_message",
    "verify_plain_text_signature",
    "generate_mnemonic",
    "generate_keystore",
    "wallet_from_keystore",
    "restore_wallets_from_keystore",
    "sign_transaction",
    "verify_signed_transaction",

    # Types
    "Address",
    "Hash",
    "Wallet",
    "Tx",
    "TxAction",
    "SignedTx",
    "create_tx",

    # Encoding
    "encode_base58",
    "decode_base58",
    "encode_base64",
    "decode_base64",
    "hash_data",
    "derive_hash",
    "is_valid_address",
]
