"""
Chainium SDK Usage Examples

This file demonstrates key features of the Chainium SDK. Everything runs
locally; nothing is sent to a node.
"""

import logging
from decimal import Decimal

from chainium import (
    Network,
    create_tx,
    generate_keystore,
    generate_mnemonic,
    generate_wallet,
    restore_wallets_from_keystore,
    sign_message,
    sign_plain_text,
    sign_transaction,
    verify_message,
    verify_plain_text_signature,
    verify_signed_transaction,
)
from chainium.crypto import password_hash_from_password

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def wallet_example():
    """Example 1: Random wallet."""
    print("\n=== Wallet Example ===")

    wallet = generate_wallet()
    print(f"Address: {wallet.address}")
    print(f"Private key: {wallet.private_key}")


def hd_wallet_example():
    """Example 2: Mnemonic, keystore and HD wallets."""
    print("\n=== HD Wallet Example ===")

    mnemonic = generate_mnemonic()
    print(f"Mnemonic: {mnemonic}")

    password_hash = password_hash_from_password("correct horse battery staple")
    keystore = generate_keystore(mnemonic, password_hash)
    print(f"Keystore: {len(keystore)} bytes")

    for index, wallet in enumerate(restore_wallets_from_keystore(keystore, password_hash, 3)):
        print(f"  m/44'/25718'/0'/0/{index}: {wallet.address}")


def signing_example():
    """Example 3: Message signing and address recovery."""
    print("\n=== Signing Example ===")

    wallet = generate_wallet()

    signature = sign_message(Network.TESTNET, wallet.private_key, "Chainium")
    signer = verify_message(Network.TESTNET, signature, "Chainium")
    print(f"Network signature: {signature}")
    print(f"Recovered signer matches: {signer == wallet.address}")

    signature = sign_plain_text(wallet.private_key, "Chainium")
    signer = verify_plain_text_signature(signature, "Chainium")
    print(f"Plain text signature: {signature}")
    print(f"Recovered signer matches: {signer == wallet.address}")


def transaction_example():
    """Example 4: Build and sign a transaction."""
    print("\n=== Transaction Example ===")

    sender = generate_wallet()
    recipient = generate_wallet()

    tx = create_tx(sender.address, nonce=1, action_fee=Decimal("0.01"))
    tx.add_transfer_chx_action(recipient.address, Decimal("100"))
    asset_hash = tx.add_create_asset_action()
    tx.add_set_asset_code_action(asset_hash, "AST1")
    account_hash = tx.add_create_account_action()
    tx.add_create_asset_emission_action(account_hash, asset_hash, Decimal("1000000"))

    print(tx.to_json(indent=True))

    signed_tx = sign_transaction(tx, Network.TESTNET, sender.private_key)
    print(f"\nSigned envelope: {signed_tx.to_json()}")

    signer = verify_signed_transaction(signed_tx, Network.TESTNET)
    print(f"Signed by sender: {signer == sender.address}")


def main():
    """Run all examples."""
    examples = [
        wallet_example,
        hd_wallet_example,
        signing_example,
        transaction_example,
    ]

    for example in examples:
        try:
            example()
        except Exception as e:
            print(f"Error in {example.__name__}: {e}")


if __name__ == "__main__":
    # Run examples
    main()
