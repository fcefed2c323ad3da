"""BIP39 mnemonic implementation for Chainium."""

from functools import lru_cache
from typing import FrozenSet

from mnemonic import Mnemonic

from ..constants import MNEMONIC_LANGUAGE, MNEMONIC_STRENGTH
from ..exceptions import InvalidMnemonicError
from ..types.common import Seed

__all__ = [
    "generate_mnemonic",
    "entropy_to_mnemonic",
    "is_valid_mnemonic",
    "validate_mnemonic",
    "seed_from_mnemonic",
]

_VALID_WORD_COUNTS = (12, 15, 18, 21, 24)


@lru_cache(maxsize=None)
def _mnemo(language: str = MNEMONIC_LANGUAGE) -> Mnemonic:
    return Mnemonic(language)


@lru_cache(maxsize=None)
def _words(language: str = MNEMONIC_LANGUAGE) -> FrozenSet[str]:
    return frozenset(_mnemo(language).wordlist)


def entropy_to_mnemonic(entropy: bytes) -> str:
    """Encode entropy plus its SHA256 checksum bits as mnemonic words."""
    try:
        return _mnemo().to_mnemonic(entropy)
    except ValueError as e:
        raise ValueError("Entropy must be 16, 20, 24, 28 or 32 bytes") from e


def generate_mnemonic(strength: int = MNEMONIC_STRENGTH) -> str:
    """Generate BIP39 mnemonic phrase (24 words by default)."""
    try:
        return _mnemo().generate(strength)
    except ValueError as e:
        raise ValueError("Strength must be 128, 160, 192, 224, or 256") from e


def validate_mnemonic(mnemonic: str) -> str:
    """
    Check word count, word list membership and checksum.

    Returns:
        Whitespace-normalized mnemonic

    Raises:
        InvalidMnemonicError: If any check fails
    """
    if not isinstance(mnemonic, str):
        raise InvalidMnemonicError("Invalid mnemonic: expected a string")

    words = Mnemonic.normalize_string(mnemonic).split()
    if len(words) not in _VALID_WORD_COUNTS:
        raise InvalidMnemonicError(
            f"Invalid mnemonic: expected 12/15/18/21/24 words, got {len(words)}"
        )

    known = _words()
    for word in words:
        if word not in known:
            raise InvalidMnemonicError(f"Invalid mnemonic: unknown word {word!r}")

    normalized = " ".join(words)
    if not _mnemo().check(normalized):
        raise InvalidMnemonicError("Invalid mnemonic: checksum mismatch")

    return normalized


def is_valid_mnemonic(mnemonic: str) -> bool:
    """Check mnemonic without raising."""
    try:
        validate_mnemonic(mnemonic)
        return True
    except InvalidMnemonicError:
        return False


def seed_from_mnemonic(mnemonic: str, passphrase: str = "") -> Seed:
    """
    Convert mnemonic to seed using PBKDF2.

    Args:
        mnemonic: BIP39 sentence
        passphrase: Optional BIP39 passphrase

    Returns:
        64-byte seed

    Raises:
        InvalidMnemonicError: If the mnemonic fails validation
    """
    return Seed(Mnemonic.to_seed(validate_mnemonic(mnemonic), passphrase))
