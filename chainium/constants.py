"""Protocol constants for the Chainium ledger."""

from enum import Enum

__all__ = [
    "Network",
    "ADDRESS_PREFIX",
    "ADDRESS_TEXT_PREFIX",
    "ADDRESS_LENGTH",
    "ADDRESS_HASH_LENGTH",
    "ADDRESS_CHECKSUM_LENGTH",
    "PRIVATE_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "DIGEST_LENGTH",
    "PASSWORD_HASH_LENGTH",
    "KEYSTORE_NONCE_LENGTH",
    "KEYSTORE_TAG_LENGTH",
    "MNEMONIC_STRENGTH",
    "MNEMONIC_LANGUAGE",
    "BIP32_SEED_KEY",
    "BIP44_PURPOSE",
    "HARDENED_OFFSET",
    "COIN_TYPE",
    "DEFAULT_ACCOUNT",
    "DEFAULT_CHAIN",
    "CURVE_ORDER",
]


class Network(str, Enum):
    """Network codes bound into every message signature."""
    MAINNET = "OWN_PUBLIC_BLOCKCHAIN_MAINNET"
    TESTNET = "OWN_PUBLIC_BLOCKCHAIN_TESTNET"
    UNIT_TESTS = "UNIT_TESTS"


# Addresses
ADDRESS_PREFIX = bytes([6, 90])
"""Raw prefix bytes; Base58 renders them as the text prefix below."""

ADDRESS_TEXT_PREFIX = "CH"
ADDRESS_HASH_LENGTH = 20
ADDRESS_CHECKSUM_LENGTH = 4
ADDRESS_LENGTH = len(ADDRESS_PREFIX) + ADDRESS_HASH_LENGTH + ADDRESS_CHECKSUM_LENGTH

# Keys and signatures (secp256k1)
PRIVATE_KEY_LENGTH = 32
SIGNATURE_LENGTH = 65  # r || s || recovery id
DIGEST_LENGTH = 32
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# Keystore (AES-256-GCM)
PASSWORD_HASH_LENGTH = 32
KEYSTORE_NONCE_LENGTH = 12
KEYSTORE_TAG_LENGTH = 16

# Mnemonic (BIP39)
MNEMONIC_STRENGTH = 256
MNEMONIC_LANGUAGE = "english"

# HD derivation: m/44'/25718'/0'/0/{index}
BIP32_SEED_KEY = b"Bitcoin seed"
BIP44_PURPOSE = 44
HARDENED_OFFSET = 0x80000000
COIN_TYPE = 25718
DEFAULT_ACCOUNT = 0
DEFAULT_CHAIN = 0
