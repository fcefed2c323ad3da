"""Cryptographic utilities for Chainium."""

from ..crypto.keys import (
    PrivateKey,
    PublicKey,
    derive_address,
    generate_wallet,
    address_from_private_key,
    wallet_from_private_key,
)
from ..crypto.signature import (
    sign,
    sign_message,
    sign_plain_text,
    recover_address,
    verify_message,
    verify_plain_text_signature,
    try_verify_plain_text_signature,
)
from ..crypto.bip39 import (
    generate_mnemonic,
    is_valid_mnemonic,
    validate_mnemonic,
    seed_from_mnemonic,
)
from ..crypto.hd import (
    HDNode,
    wallet_from_seed,
    wallet_from_seed_with_coin,
    restore_wallets_from_seed,
)
from ..crypto.keystore import (
    encrypt,
    decrypt,
    password_hash_from_password,
    generate_keystore,
    wallet_from_keystore,
    restore_wallets_from_keystore,
)
from ..crypto.transaction_signing import sign_transaction, verify_signed_transaction

__all__ = [
    # Keys
    "PrivateKey",
    "PublicKey",
    "derive_address",
    "generate_wallet",
    "address_from_private_key",
    "wallet_from_private_key",

    # Signatures
    "sign",
    "sign_message",
    "sign_plain_text",
    "recover_address",
    "verify_message",
    "verify_plain_text_signature",
    "try_verify_plain_text_signature",

    # Mnemonics and HD wallets
    "generate_mnemonic",
    "is_valid_mnemonic",
    "validate_mnemonic",
    "seed_from_mnemonic",
    "HDNode",
    "wallet_from_seed",
    "wallet_from_seed_with_coin",
    "restore_wallets_from_seed",

    # Keystore
    "encrypt",
    "decrypt",
    "password_hash_from_password",
    "generate_keystore",
    "wallet_from_keystore",
    "restore_wallets_from_keystore",

    # Transactions
    "sign_transaction",
    "verify_signed_transaction",
]
