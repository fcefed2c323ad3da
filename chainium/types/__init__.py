"""Type definitions for Chainium."""

# Common types
from ..types.common import (
    Address,
    Hash,
    PrivateKeyStr,
    SignatureStr,
    PrivateKeyBytes,
    PublicKeyBytes,
    Signature,
    Digest,
    Seed,
    Amount,
    Bytesish,
)

# Wallet
from ..types.wallet import Wallet

__all__ = [
    # Common
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

    # Wallet
    "Wallet",
]
