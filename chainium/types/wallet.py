"""Wallet type definitions for Chainium."""

from dataclasses import dataclass
from typing import Dict

from ..types.common import Address, PrivateKeyStr

__all__ = ["Wallet"]


@dataclass(frozen=True)
class Wallet:
    """Private key and the address derived from it."""

    private_key: PrivateKeyStr
    address: Address

    def to_dict(self) -> Dict[str, str]:
        """Get wallet in the ledger's JSON field names."""
        return {
            "privateKey": self.private_key,
            "address": self.address,
        }

    def __repr__(self) -> str:
        """String representation without the private key."""
        return f"Wallet(address={self.address!r})"
