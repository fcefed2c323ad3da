"""Transaction action payloads for Chainium.

Every action type the ledger accepts has one frozen dataclass here. The
field order of each class is the field order of its JSON form.
"""

from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import Any, ClassVar, Dict, Type, Union

from ..exceptions import ValidationError
from ..types.common import Address, Hash
from ..utils.validation import to_decimal

__all__ = [
    "ActionData",
    "TransferChxTxActionDto",
    "DelegateStakeTxActionDto",
    "ConfigureValidatorTxActionDto",
    "RemoveValidatorTxActionDto",
    "TransferAssetTxActionDto",
    "CreateAssetEmissionTxActionDto",
    "CreateAssetTxActionDto",
    "SetAssetCodeTxActionDto",
    "SetAssetControllerTxActionDto",
    "CreateAccountTxActionDto",
    "SetAccountControllerTxActionDto",
    "SubmitVoteTxActionDto",
    "SubmitVoteWeightTxActionDto",
    "SetAccountEligibilityTxActionDto",
    "SetAssetEligibilityTxActionDto",
    "ChangeKycControllerAddressTxActionDto",
    "AddKycProviderTxActionDto",
    "RemoveKycProviderTxActionDto",
    "ACTION_DATA_TYPES",
    "AnyActionData",
]


def _json(name: str, kind: type) -> Any:
    return field(metadata={"json": name, "kind": kind})


class ActionData:
    """Base for action payloads; subclasses are frozen dataclasses."""

    ACTION_TYPE: ClassVar[str]

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            kind = f.metadata["kind"]
            if kind is Decimal:
                # Amounts are stored as exact Decimals
                object.__setattr__(self, f.name, to_decimal(value))
            elif not isinstance(value, kind):
                raise ValidationError(
                    f"{type(self).__name__}.{f.name} must be {kind.__name__}, "
                    f"got {type(value).__name__}"
                )

    def to_dict(self) -> Dict[str, Any]:
        """Get payload in JSON field names and order."""
        return {f.metadata["json"]: getattr(self, f.name) for f in fields(self)}


# Network management

@dataclass(frozen=True)
class TransferChxTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "TransferChx"

    recipient_address: Address = _json("recipientAddress", str)
    amount: Decimal = _json("amount", Decimal)


@dataclass(frozen=True)
class DelegateStakeTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "DelegateStake"

    validator_address: Address = _json("validatorAddress", str)
    amount: Decimal = _json("amount", Decimal)


@dataclass(frozen=True)
class ConfigureValidatorTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "ConfigureValidator"

    network_address: str = _json("networkAddress", str)
    shared_reward_percent: Decimal = _json("sharedRewardPercent", Decimal)
    is_enabled: bool = _json("isEnabled", bool)


@dataclass(frozen=True)
class RemoveValidatorTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "RemoveValidator"


# Asset management

@dataclass(frozen=True)
class TransferAssetTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "TransferAsset"

    from_account_hash: Hash = _json("fromAccountHash", str)
    to_account_hash: Hash = _json("toAccountHash", str)
    asset_hash: Hash = _json("assetHash", str)
    amount: Decimal = _json("amount", Decimal)


@dataclass(frozen=True)
class CreateAssetEmissionTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "CreateAssetEmission"

    emission_account_hash: Hash = _json("emissionAccountHash", str)
    asset_hash: Hash = _json("assetHash", str)
    amount: Decimal = _json("amount", Decimal)


@dataclass(frozen=True)
class CreateAssetTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "CreateAsset"


@dataclass(frozen=True)
class SetAssetCodeTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "SetAssetCode"

    asset_hash: Hash = _json("assetHash", str)
    asset_code: str = _json("assetCode", str)


@dataclass(frozen=True)
class SetAssetControllerTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "SetAssetController"

    asset_hash: Hash = _json("assetHash", str)
    controller_address: Address = _json("controllerAddress", str)


# Account management

@dataclass(frozen=True)
class CreateAccountTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "CreateAccount"


@dataclass(frozen=True)
class SetAccountControllerTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "SetAccountController"

    account_hash: Hash = _json("accountHash", str)
    controller_address: Address = _json("controllerAddress", str)


# Voting

@dataclass(frozen=True)
class SubmitVoteTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "SubmitVote"

    account_hash: Hash = _json("accountHash", str)
    asset_hash: Hash = _json("assetHash", str)
    resolution_hash: Hash = _json("resolutionHash", str)
    vote_hash: Hash = _json("voteHash", str)


@dataclass(frozen=True)
class SubmitVoteWeightTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "SubmitVoteWeight"

    account_hash: Hash = _json("accountHash", str)
    asset_hash: Hash = _json("assetHash", str)
    resolution_hash: Hash = _json("resolutionHash", str)
    vote_weight: Decimal = _json("voteWeight", Decimal)


# Eligibility and KYC

@dataclass(frozen=True)
class SetAccountEligibilityTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "SetAccountEligibility"

    account_hash: Hash = _json("accountHash", str)
    asset_hash: Hash = _json("assetHash", str)
    is_primary_eligible: bool = _json("isPrimaryEligible", bool)
    is_secondary_eligible: bool = _json("isSecondaryEligible", bool)


@dataclass(frozen=True)
class SetAssetEligibilityTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "SetAssetEligibility"

    asset_hash: Hash = _json("assetHash", str)
    is_eligibility_required: bool = _json("isEligibilityRequired", bool)


@dataclass(frozen=True)
class ChangeKycControllerAddressTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "ChangeKycControllerAddress"

    account_hash: Hash = _json("accountHash", str)
    asset_hash: Hash = _json("assetHash", str)
    kyc_controller_address: Address = _json("kycControllerAddress", str)


@dataclass(frozen=True)
class AddKycProviderTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "AddKycProvider"

    asset_hash: Hash = _json("assetHash", str)
    provider_address: Address = _json("providerAddress", str)


@dataclass(frozen=True)
class RemoveKycProviderTxActionDto(ActionData):
    ACTION_TYPE: ClassVar[str] = "RemoveKycProvider"

    asset_hash: Hash = _json("assetHash", str)
    provider_address: Address = _json("providerAddress", str)


AnyActionData = Union[
    TransferChxTxActionDto,
    DelegateStakeTxActionDto,
    ConfigureValidatorTxActionDto,
    RemoveValidatorTxActionDto,
    TransferAssetTxActionDto,
    CreateAssetEmissionTxActionDto,
    CreateAssetTxActionDto,
    SetAssetCodeTxActionDto,
    SetAssetControllerTxActionDto,
    CreateAccountTxActionDto,
    SetAccountControllerTxActionDto,
    SubmitVoteTxActionDto,
    SubmitVoteWeightTxActionDto,
    SetAccountEligibilityTxActionDto,
    SetAssetEligibilityTxActionDto,
    ChangeKycControllerAddressTxActionDto,
    AddKycProviderTxActionDto,
    RemoveKycProviderTxActionDto,
]

ACTION_DATA_TYPES: Dict[str, Type[ActionData]] = {
    cls.ACTION_TYPE: cls for cls in AnyActionData.__args__
}
"""Action type tag to payload class."""
