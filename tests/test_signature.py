import pytest
from chainium.constants import Network
from chainium.crypto.keys import address_from_private_key, generate_wallet
from chainium.crypto.signature import (
    sign, sign_message, sign_plain_text,
    recover_address, verify_message,
    verify_plain_text_signature, try_verify_plain_text_signature,
)
from chainium.exceptions import CryptoError, SignatureRecoveryError
from chainium.utils.encoding import encode_base58


def test_sign_message_vector():
    sig = sign_message("UNIT_TESTS", "B6WNNx9oK8qRUU52PpzjXHZuv4NUb3Z33hdju3hhrceS", b"Chainium")
    expected = "6Hhxz2eP3AagR56mP4AAaKViUxHi3gM9c5weLDR48x4X4ynRBDfxsHGjhX9cni1mtCkNxbnZ783YPgMwVYV52X1w5"
    assert sig == expected
    assert sign_message(Network.UNIT_TESTS, "B6WNNx9oK8qRUU52PpzjXHZuv4NUb3Z33hdju3hhrceS", "Chainium") == expected


def test_sign_plain_text_vector():
    sig = sign_plain_text("3rzY3EENhYrWXzUqNnMEbGUr3iEzzSZrjMwJ1CgQpJpq", b"Chainium")
    expected = "EzCsWgPozyVT9o6TycYV6q1n4YK4QWixa6Lk4GFvwrj6RU3K1wHcwNPZJUMBYcsGp5oFhytHiThon5zqE8uLk8naB"
    assert sig == expected


def test_verify_plain_text_signature():
    wallet = generate_wallet()
    sig = sign_plain_text(wallet.private_key, "Chainium")
    assert verify_plain_text_signature(sig, "Chainium") == address_from_private_key(wallet.private_key)
    assert verify_plain_text_signature(sig, "Chainium!") != wallet.address


def test_verify_message_is_network_bound():
    wallet = generate_wallet()
    sig = sign_message(Network.TESTNET, wallet.private_key, "Chainium")
    assert verify_message(Network.TESTNET, sig, "Chainium") == wallet.address
    assert verify_message(Network.MAINNET, sig, "Chainium") != wallet.address


def test_signature_is_deterministic():
    wallet = generate_wallet()
    assert sign_plain_text(wallet.private_key, "a") == sign_plain_text(wallet.private_key, "a")


def test_malformed_signatures():
    digest = b"\x11" * 32
    with pytest.raises(SignatureRecoveryError):
        recover_address("0OIl", digest)
    with pytest.raises(SignatureRecoveryError):
        recover_address(encode_base58(b"\x01" * 64), digest)
    assert try_verify_plain_text_signature("garbage", "Chainium") is None


def test_sign_requires_32_byte_digest():
    wallet = generate_wallet()
    with pytest.raises(CryptoError):
        sign(wallet.private_key, b"\x00" * 31)
