"""Hierarchical Deterministic key derivation for Chainium."""

import hmac
import hashlib
import logging
from typing import List, Optional

from ..constants import (
    BIP32_SEED_KEY,
    BIP44_PURPOSE,
    COIN_TYPE,
    CURVE_ORDER as N,
    DEFAULT_ACCOUNT,
    DEFAULT_CHAIN,
    HARDENED_OFFSET,
)
from ..crypto.keys import PrivateKey
from ..exceptions import DerivationError
from ..types.wallet import Wallet
from ..utils.validation import validate_index

__all__ = [
    "HDNode",
    "bip44_path",
    "derive_wallet",
    "wallet_from_seed",
    "wallet_from_seed_with_coin",
    "restore_wallets_from_seed",
]

logger = logging.getLogger(__name__)


class HDNode:
    """HD wallet node (BIP32, private derivation only)."""

    def __init__(
        self,
        private_key: bytes,
        chain_code: bytes,
        depth: int = 0,
        index: int = 0,
    ):
        self.private_key = private_key
        self.chain_code = chain_code
        self.depth = depth
        self.index = index
        self._key = PrivateKey(private_key)

    @classmethod
    def from_seed(cls, seed: bytes) -> "HDNode":
        """Create master node from seed."""
        if len(seed) < 16 or len(seed) > 64:
            raise DerivationError("Seed must be between 16 and 64 bytes")

        h = hmac.new(BIP32_SEED_KEY, seed, hashlib.sha512).digest()

        private_key_bytes = h[:32]
        chain_code = h[32:]

        key_int = int.from_bytes(private_key_bytes, 'big')
        if key_int == 0 or key_int >= N:
            raise DerivationError("Invalid master key")

        return cls(private_key=private_key_bytes, chain_code=chain_code)

    @property
    def public_key(self) -> bytes:
        """Compressed public key, as BIP32 hashes it."""
        return self._key.public_key().compressed

    def derive(self, index: int) -> "HDNode":
        """
        Derive child node.

        Indices at or above 2**31 are hardened.

        Raises:
            DerivationError: If the index is out of range or the child key
                is invalid (probability below 2**-127)
        """
        if not 0 <= index <= 0xFFFFFFFF:
            raise DerivationError(f"Child index out of range: {index}")

        if index >= HARDENED_OFFSET:
            data = b'\x00' + self.private_key + index.to_bytes(4, 'big')
        else:
            data = self.public_key + index.to_bytes(4, 'big')

        h = hmac.new(self.chain_code, data, hashlib.sha512).digest()

        child_key_int = int.from_bytes(h[:32], 'big')
        if child_key_int >= N:
            raise DerivationError(f"Invalid child key at index {index}")

        parent_key_int = int.from_bytes(self.private_key, 'big')
        child_private_int = (parent_key_int + child_key_int) % N
        if child_private_int == 0:
            raise DerivationError(f"Invalid child key at index {index}")

        return HDNode(
            private_key=child_private_int.to_bytes(32, 'big'),
            chain_code=h[32:],
            depth=self.depth + 1,
            index=index,
        )

    def derive_path(self, path: str) -> "HDNode":
        """Derive using BIP32 path like m/44'/25718'/0'/0/0."""
        if not path or path in ('m', 'M'):
            return self

        if path.startswith('m/') or path.startswith('M/'):
            path = path[2:]

        node = self
        for component in path.split('/'):
            if not component:
                continue

            try:
                if component.endswith("'") or component.endswith("h"):
                    index = int(component[:-1]) + HARDENED_OFFSET
                else:
                    index = int(component)
            except ValueError as e:
                raise DerivationError(f"Invalid path component: {component!r}") from e

            node = node.derive(index)

        return node

    def get_private_key(self) -> PrivateKey:
        """Get private key object."""
        return self._key

    def to_wallet(self) -> Wallet:
        """Convert this node into a Wallet."""
        return self._key.to_wallet()


def bip44_path(coin: int, index: int, account: int = DEFAULT_ACCOUNT, chain: int = DEFAULT_CHAIN) -> str:
    """Format m/44'/{coin}'/{account}'/{chain}/{index}."""
    return f"m/{BIP44_PURPOSE}'/{coin}'/{account}'/{chain}/{index}"


def _chain_node(master: HDNode, coin: int) -> HDNode:
    # m/44'/{coin}'/0'/0
    return (
        master
        .derive(HARDENED_OFFSET + BIP44_PURPOSE)
        .derive(HARDENED_OFFSET + coin)
        .derive(HARDENED_OFFSET + DEFAULT_ACCOUNT)
        .derive(DEFAULT_CHAIN)
    )


def derive_wallet(master: HDNode, coin: int, index: int) -> Wallet:
    """
    Derive the wallet at m/44'/{coin}'/0'/0/{index}.

    Args:
        master: Master node from HDNode.from_seed
        coin: Hardened coin type
        index: Non-hardened address index

    Returns:
        Wallet for that index

    Raises:
        DerivationError: If derivation fails
    """
    validate_index(coin)
    validate_index(index)
    return _chain_node(master, coin).derive(index).to_wallet()


def wallet_from_seed_with_coin(seed: bytes, coin: int, index: int) -> Wallet:
    """Derive a wallet for an explicit coin type."""
    wallet = derive_wallet(HDNode.from_seed(seed), coin, index)
    logger.debug("Derived wallet %s at %s", wallet.address, bip44_path(coin, index))
    return wallet


def wallet_from_seed(seed: bytes, index: int) -> Wallet:
    """
    Derive the Chainium wallet at an address index.

    Args:
        seed: 64-byte BIP39 seed
        index: Address index

    Returns:
        Wallet at m/44'/25718'/0'/0/{index}
    """
    return wallet_from_seed_with_coin(seed, COIN_TYPE, index)


def restore_wallets_from_seed(seed: bytes, count: int, coin: Optional[int] = None) -> List[Wallet]:
    """
    Derive wallets for indices 0..count-1 in order.

    The result for a smaller count is always a prefix of the result for a
    larger one.

    Raises:
        DerivationError: If count is negative or derivation fails
    """
    if count < 0:
        raise DerivationError(f"Wallet count cannot be negative: {count}")
    if coin is None:
        coin = COIN_TYPE
    validate_index(coin)
    if count:
        validate_index(count - 1)

    chain = _chain_node(HDNode.from_seed(seed), coin)
    wallets = [chain.derive(index).to_wallet() for index in range(count)]
    logger.debug("Restored %d wallets for coin %d", len(wallets), coin)
    return wallets
