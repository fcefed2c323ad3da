"""Transaction type definitions for Chainium."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Tuple

from ..exceptions import ValidationError
from ..types.actions import (
    ACTION_DATA_TYPES,
    ActionData,
    AddKycProviderTxActionDto,
    ChangeKycControllerAddressTxActionDto,
    ConfigureValidatorTxActionDto,
    CreateAccountTxActionDto,
    CreateAssetEmissionTxActionDto,
    CreateAssetTxActionDto,
    DelegateStakeTxActionDto,
    RemoveKycProviderTxActionDto,
    RemoveValidatorTxActionDto,
    SetAccountControllerTxActionDto,
    SetAccountEligibilityTxActionDto,
    SetAssetCodeTxActionDto,
    SetAssetControllerTxActionDto,
    SetAssetEligibilityTxActionDto,
    SubmitVoteTxActionDto,
    SubmitVoteWeightTxActionDto,
    TransferAssetTxActionDto,
    TransferChxTxActionDto,
)
from ..types.common import Address, Amount, Hash, SignatureStr
from ..utils.encoding import decode_base64, derive_hash
from ..utils.serialization import to_canonical_json
from ..utils.validation import to_decimal

__all__ = [
    "TxAction",
    "Tx",
    "SignedTx",
    "create_tx",
]

logger = logging.getLogger(__name__)

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def _validate_int64(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValidationError(f"{name} out of int64 range: {value}")
    return value


@dataclass(frozen=True)
class TxAction:
    """One action of a transaction."""

    action_type: str
    action_data: ActionData

    def __post_init__(self) -> None:
        expected = ACTION_DATA_TYPES.get(self.action_type)
        if expected is None:
            raise ValidationError(f"Unknown action type: {self.action_type!r}")
        if not isinstance(self.action_data, expected):
            raise ValidationError(
                f"{self.action_type} action requires {expected.__name__}, "
                f"got {type(self.action_data).__name__}"
            )

    @classmethod
    def of(cls, action_data: ActionData) -> "TxAction":
        """Wrap a payload with its own action type."""
        return cls(action_type=action_data.ACTION_TYPE, action_data=action_data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "actionType": self.action_type,
            "actionData": self.action_data.to_dict(),
        }


@dataclass
class Tx:
    """
    Unsigned transaction.

    Actions are appended with the add_*_action methods and keep their
    insertion order. Building a transaction checks nothing about ledger
    state.
    """

    sender_address: Address
    nonce: int
    action_fee: Decimal
    expiration_time: int = 0
    _actions: List[TxAction] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        _validate_int64("nonce", self.nonce)
        _validate_int64("expiration_time", self.expiration_time)
        self.action_fee = to_decimal(self.action_fee)

    @property
    def actions(self) -> Tuple[TxAction, ...]:
        """Actions in insertion order."""
        return tuple(self._actions)

    def _add_action(self, action_data: ActionData) -> None:
        self._actions.append(TxAction.of(action_data))
        logger.debug(
            "Added %s action #%d to tx from %s",
            action_data.ACTION_TYPE, len(self._actions), self.sender_address
        )

    def _next_action_hash(self) -> Hash:
        # Action numbers are 1-based: the hash of the action about to be added
        return derive_hash(self.sender_address, self.nonce, len(self._actions) + 1)

    # Network management

    def add_transfer_chx_action(self, recipient_address: Address, amount: Amount) -> None:
        self._add_action(TransferChxTxActionDto(recipient_address, amount))

    def add_delegate_stake_action(self, validator_address: Address, amount: Amount) -> None:
        self._add_action(DelegateStakeTxActionDto(validator_address, amount))

    def add_configure_validator_action(
        self,
        network_address: str,
        shared_reward_percent: Amount,
        is_enabled: bool
    ) -> None:
        self._add_action(ConfigureValidatorTxActionDto(
            network_address, shared_reward_percent, is_enabled
        ))

    def add_remove_validator_action(self) -> None:
        self._add_action(RemoveValidatorTxActionDto())

    # Asset management

    def add_transfer_asset_action(
        self,
        from_account_hash: Hash,
        to_account_hash: Hash,
        asset_hash: Hash,
        amount: Amount
    ) -> None:
        self._add_action(TransferAssetTxActionDto(
            from_account_hash, to_account_hash, asset_hash, amount
        ))

    def add_create_asset_emission_action(
        self,
        emission_account_hash: Hash,
        asset_hash: Hash,
        amount: Amount
    ) -> None:
        self._add_action(CreateAssetEmissionTxActionDto(
            emission_account_hash, asset_hash, amount
        ))

    def add_create_asset_action(self) -> Hash:
        """
        Add a CreateAsset action.

        Returns:
            Hash of the asset the ledger will create for this action

        Raises:
            DecodeError: If the sender address is not Base58
            ValidationError: If the action number exceeds 65535
        """
        asset_hash = self._next_action_hash()
        self._add_action(CreateAssetTxActionDto())
        return asset_hash

    def add_set_asset_code_action(self, asset_hash: Hash, asset_code: str) -> None:
        self._add_action(SetAssetCodeTxActionDto(asset_hash, asset_code))

    def add_set_asset_controller_action(self, asset_hash: Hash, controller_address: Address) -> None:
        self._add_action(SetAssetControllerTxActionDto(asset_hash, controller_address))

    # Account management

    def add_create_account_action(self) -> Hash:
        """
        Add a CreateAccount action.

        Returns:
            Hash of the account the ledger will create for this action

        Raises:
            DecodeError: If the sender address is not Base58
            ValidationError: If the action number exceeds 65535
        """
        account_hash = self._next_action_hash()
        self._add_action(CreateAccountTxActionDto())
        return account_hash

    def add_set_account_controller_action(self, account_hash: Hash, controller_address: Address) -> None:
        self._add_action(SetAccountControllerTxActionDto(account_hash, controller_address))

    # Voting

    def add_submit_vote_action(
        self,
        account_hash: Hash,
        asset_hash: Hash,
        resolution_hash: Hash,
        vote_hash: Hash
    ) -> None:
        self._add_action(SubmitVoteTxActionDto(
            account_hash, asset_hash, resolution_hash, vote_hash
        ))

    def add_submit_vote_weight_action(
        self,
        account_hash: Hash,
        asset_hash: Hash,
        resolution_hash: Hash,
        vote_weight: Amount
    ) -> None:
        self._add_action(SubmitVoteWeightTxActionDto(
            account_hash, asset_hash, resolution_hash, vote_weight
        ))

    # Eligibility and KYC

    def add_set_account_eligibility_action(
        self,
        account_hash: Hash,
        asset_hash: Hash,
        is_primary_eligible: bool,
        is_secondary_eligible: bool
    ) -> None:
        self._add_action(SetAccountEligibilityTxActionDto(
            account_hash, asset_hash, is_primary_eligible, is_secondary_eligible
        ))

    def add_set_asset_eligibility_action(self, asset_hash: Hash, is_eligibility_required: bool) -> None:
        self._add_action(SetAssetEligibilityTxActionDto(asset_hash, is_eligibility_required))

    def add_change_kyc_controller_address_action(
        self,
        account_hash: Hash,
        asset_hash: Hash,
        kyc_controller_address: Address
    ) -> None:
        self._add_action(ChangeKycControllerAddressTxActionDto(
            account_hash, asset_hash, kyc_controller_address
        ))

    def add_add_kyc_provider_action(self, asset_hash: Hash, provider_address: Address) -> None:
        self._add_action(AddKycProviderTxActionDto(asset_hash, provider_address))

    def add_remove_kyc_provider_action(self, asset_hash: Hash, provider_address: Address) -> None:
        self._add_action(RemoveKycProviderTxActionDto(asset_hash, provider_address))

    # Serialization

    def to_dict(self) -> Dict[str, Any]:
        """Get transaction in JSON field names and order."""
        return {
            "senderAddress": self.sender_address,
            "nonce": self.nonce,
            "expirationTime": self.expiration_time,
            "actionFee": self.action_fee,
            "actions": [action.to_dict() for action in self._actions],
        }

    def to_json(self, indent: bool = False) -> str:
        """
        Serialize to canonical JSON.

        The compact form is what gets signed; the indented form uses four
        spaces per level.
        """
        return to_canonical_json(self.to_dict(), indent=indent)


def create_tx(
    sender_address: Address,
    nonce: int,
    action_fee: Amount,
    expiration_time: int = 0
) -> Tx:
    """
    Create an empty transaction.

    Args:
        sender_address: Address that signs and pays for the transaction
        nonce: Sender's next nonce
        action_fee: Fee per action
        expiration_time: Unix time after which the ledger drops it, 0 for none

    Returns:
        Tx without actions
    """
    return Tx(
        sender_address=sender_address,
        nonce=nonce,
        action_fee=action_fee,
        expiration_time=expiration_time,
    )


@dataclass(frozen=True)
class SignedTx:
    """Signed transaction envelope ready for submission."""

    tx: str
    signature: SignatureStr

    @property
    def tx_json(self) -> str:
        """Transaction JSON carried in the envelope."""
        return decode_base64(self.tx).decode("utf-8")

    def to_dict(self) -> Dict[str, str]:
        return {
            "tx": self.tx,
            "signature": self.signature,
        }

    def to_json(self, indent: bool = False) -> str:
        return to_canonical_json(self.to_dict(), indent=indent)
