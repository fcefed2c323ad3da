import pytest
from chainium.crypto.keys import (
    PrivateKey, PublicKey, derive_address,
    generate_wallet, address_from_private_key, wallet_from_private_key,
)
from chainium.exceptions import InvalidKeyError
from chainium.utils.validation import is_valid_address


def test_wallet_address_matches_private_key():
    wallet = generate_wallet()
    assert address_from_private_key(wallet.private_key) == wallet.address
    assert wallet_from_private_key(wallet.private_key) == wallet


def test_address_from_known_private_key():
    address = address_from_private_key("ECPVXjz78oMdmLKbHVAAo7X7evtTh4EfnaW5Yc1SHWaj")
    assert address == "CHb5Z6Za34nv28Z3rLZ2Yd8LFikHaTqLhxB"


def test_private_key_base58_roundtrip():
    key = PrivateKey.create()
    assert PrivateKey(key.to_base58()) == key
    assert PrivateKey(key.secret) == key
    assert PrivateKey(key) == key


def test_public_key_is_uncompressed():
    pub = PrivateKey.from_int(1).public_key()
    assert len(pub.point) == 65
    assert pub.point[0] == 0x04
    assert len(pub.compressed) == 33
    assert PublicKey(pub.point) == pub


def test_derive_address_deterministic():
    pub = PrivateKey.from_int(12345).public_key()
    assert derive_address(pub) == derive_address(pub.point)
    assert derive_address(pub) == pub.address()
    assert is_valid_address(pub.address())


def test_invalid_private_keys():
    for bad in ["", "0OIl", "111", b"\x00" * 32, b"\x01" * 33]:
        with pytest.raises(InvalidKeyError):
            address_from_private_key(bad)
    with pytest.raises(InvalidKeyError):
        PrivateKey.from_int(0)
    with pytest.raises(InvalidKeyError):
        PrivateKey.from_int(2 ** 256)


def test_repr_hides_secret():
    wallet = generate_wallet()
    key = PrivateKey(wallet.private_key)
    assert wallet.private_key not in repr(key)
    assert wallet.private_key not in repr(wallet)
    assert wallet.to_dict() == {"privateKey": wallet.private_key, "address": wallet.address}
