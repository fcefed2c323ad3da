"""Transaction signing implementation for Chainium."""

import logging
from typing import Union

from ..crypto.keys import PrivateKey
from ..crypto.signature import NetworkCode, sign_message, verify_message
from ..exceptions import DecodeError, SignatureRecoveryError
from ..types.common import Address
from ..types.transaction import SignedTx, Tx
from ..utils.encoding import decode_base64, encode_base64

__all__ = [
    "sign_transaction",
    "verify_signed_transaction",
]

logger = logging.getLogger(__name__)


def sign_transaction(
    tx: Tx,
    network_code: NetworkCode,
    private_key: Union[str, bytes, PrivateKey]
) -> SignedTx:
    """
    Sign transaction and wrap it in a submission envelope.

    The compact canonical JSON of the transaction is signed with the
    network-bound message digest. The envelope carries that exact JSON
    Base64-encoded, so the ledger verifies the bytes that were signed.

    Args:
        tx: Transaction to sign
        network_code: Network the transaction is valid on
        private_key: Sender's Base58 private key

    Returns:
        SignedTx with Base64 tx and Base58 signature

    Raises:
        InvalidKeyError: If private key is invalid
        SerializationError: If an action holds an unserializable value
    """
    tx_json = tx.to_json(indent=False).encode("utf-8")
    signature = sign_message(network_code, private_key, tx_json)
    logger.debug(
        "Signed tx from %s (nonce %d, %d actions)",
        tx.sender_address, tx.nonce, len(tx.actions)
    )
    return SignedTx(tx=encode_base64(tx_json), signature=signature)


def verify_signed_transaction(signed_tx: SignedTx, network_code: NetworkCode) -> Address:
    """
    Recover the address that signed an envelope.

    Compare the result with the transaction's senderAddress to check the
    envelope was signed by its sender.

    Raises:
        SignatureRecoveryError: If the envelope is malformed or the
            signature is unrecoverable
    """
    try:
        tx_json = decode_base64(signed_tx.tx)
    except DecodeError as e:
        raise SignatureRecoveryError(f"Invalid Base64 tx payload: {e.message}") from e

    return verify_message(network_code, signed_tx.signature, tx_json)
