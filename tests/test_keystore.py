import pytest
from chainium.crypto.keystore import (
    encrypt, decrypt, password_hash_from_password,
    generate_keystore, seed_from_keystore,
    wallet_from_keystore, restore_wallets_from_keystore,
)
from chainium.crypto.bip39 import seed_from_mnemonic
from chainium.exceptions import DecryptionError, InvalidKeyError
from chainium.utils.encoding import decode_base58, hash_data

MNEMONIC = (
    "receive raccoon rocket donkey cherry garbage medal skirt random smoke "
    "young before scale leave hold insect foster blouse mail donkey regular "
    "vital hurt april"
)


def test_encryption_roundtrip():
    password_hash = decode_base58(hash_data(b"pass"))
    assert password_hash == password_hash_from_password("pass")

    encrypted = encrypt(b"Chainium", password_hash)
    assert len(encrypted) == 12 + len(b"Chainium") + 16
    assert decrypt(encrypted, password_hash) == b"Chainium"


def test_encryption_uses_fresh_nonce():
    password_hash = password_hash_from_password("pass")
    assert encrypt(b"Chainium", password_hash) != encrypt(b"Chainium", password_hash)


def test_flipped_bit_is_rejected():
    password_hash = password_hash_from_password("pass")
    encrypted = encrypt(b"Chainium", password_hash)
    for i in range(len(encrypted)):
        tampered = bytearray(encrypted)
        tampered[i] ^= 0x80
        with pytest.raises(DecryptionError):
            decrypt(bytes(tampered), password_hash)


def test_wrong_key_is_rejected():
    encrypted = encrypt(b"Chainium", password_hash_from_password("pass"))
    with pytest.raises(DecryptionError):
        decrypt(encrypted, password_hash_from_password("other"))


def test_truncated_input_is_rejected():
    password_hash = password_hash_from_password("pass")
    with pytest.raises(DecryptionError):
        decrypt(b"\x00" * 27, password_hash)
    with pytest.raises(DecryptionError):
        decrypt(encrypt(b"Chainium", password_hash)[:-1], password_hash)


def test_password_hash_length():
    with pytest.raises(InvalidKeyError):
        encrypt(b"Chainium", b"\x00" * 16)
    with pytest.raises(InvalidKeyError):
        decrypt(b"\x00" * 40, b"\x00" * 33)


def test_keystore_wallets():
    password_hash = password_hash_from_password("pass")
    keystore = generate_keystore(MNEMONIC, password_hash)

    assert seed_from_keystore(keystore, password_hash) == seed_from_mnemonic(MNEMONIC)

    wallet = wallet_from_keystore(keystore, password_hash, 0)
    assert wallet.address == "CHb5Z6Za34nv28Z3rLZ2Yd8LFikHaTqLhxB"

    wallets = restore_wallets_from_keystore(keystore, password_hash, 3)
    assert wallets[0] == wallet
    assert len(wallets) == 3

    with pytest.raises(DecryptionError):
        wallet_from_keystore(keystore, password_hash_from_password("other"), 0)
