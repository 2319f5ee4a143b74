"""
Boundary data models using Pydantic for validation and serialization.

These mirror the JSON shapes exchanged with wallets and indexers:

    {"id": {"hash": "...", "index": 0},
     "lovelace": 1000000,
     "assets": [{"policyId": "...", "assetName": "...", "quantity": 5}]}

Everything that reaches the selection engine passes through here first, so
the engine itself can assume well-formed values.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter, field_validator

from cardano_utxo.aggregation import sum_utxos
from cardano_utxo.constants import MAX_TX_INDEX
from cardano_utxo.selection import InsufficientFunds, SelectionResult, select
from cardano_utxo.utxo import UTXO, TransactionID
from cardano_utxo.value import Value


class InputValidationError(ValueError):
    """Raised when a candidate input is structurally unusable."""

    pass


class TransactionIDModel(BaseModel):
    hash: str = Field(..., min_length=1)
    index: StrictInt = Field(..., ge=0, le=MAX_TX_INDEX)

    model_config = ConfigDict(frozen=True)

    def to_transaction_id(self) -> TransactionID:
        return TransactionID(hash=self.hash, index=self.index)


class AssetModel(BaseModel):
    policy_id: str = Field(..., alias="policyId")
    asset_name: str = Field(..., alias="assetName")
    quantity: StrictInt = Field(..., ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class OutputModel(BaseModel):
    id: TransactionIDModel | None = None
    lovelace: StrictInt = Field(..., ge=0)
    assets: list[AssetModel] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("assets")
    @classmethod
    def validate_unique_assets(cls, v: list[AssetModel]) -> list[AssetModel]:
        seen: set[tuple[str, str]] = set()
        for asset in v:
            key = (asset.policy_id, asset.asset_name)
            if key in seen:
                raise ValueError(f"Duplicate asset {asset.policy_id}.{asset.asset_name}")
            seen.add(key)
        return v

    def to_utxo(self) -> UTXO:
        value = Value.from_assets(
            self.lovelace,
            ((asset.policy_id, asset.asset_name, asset.quantity) for asset in self.assets),
        )
        return UTXO(
            value=value,
            id=self.id.to_transaction_id() if self.id is not None else None,
        )

    @classmethod
    def from_value(cls, value: Value, tx_id: TransactionID | None = None) -> OutputModel:
        return cls(
            id=TransactionIDModel(hash=tx_id.hash, index=tx_id.index)
            if tx_id is not None
            else None,
            lovelace=value.lovelace,
            assets=[
                AssetModel(policy_id=key.policy_id, asset_name=key.asset_name, quantity=quantity)
                for key, quantity in value.assets.items()
            ],
        )

    @classmethod
    def from_utxo(cls, utxo: UTXO) -> OutputModel:
        return cls.from_value(utxo.value, utxo.id)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SelectResultModel(BaseModel):
    selected: list[OutputModel]
    unselected: list[OutputModel]
    excess: OutputModel

    @classmethod
    def from_result(cls, result: SelectionResult) -> SelectResultModel:
        return cls(
            selected=[OutputModel.from_utxo(utxo) for utxo in result.selected],
            unselected=[OutputModel.from_utxo(utxo) for utxo in result.unselected],
            excess=OutputModel.from_value(result.excess),
        )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


_output_list = TypeAdapter(list[OutputModel])


def parse_outputs(data: Any) -> list[UTXO]:
    """
    Validate a JSON-shaped list of outputs and convert it to UTXOs.

    Raises:
        pydantic.ValidationError: On negative amounts, wrong types or duplicate assets
    """
    return [output.to_utxo() for output in _output_list.validate_python(data)]


def parse_inputs(data: Any) -> list[UTXO]:
    """
    Validate candidate inputs. Unlike targets, every input must carry an id,
    and no output may be offered twice.

    Raises:
        pydantic.ValidationError: On malformed records
        InputValidationError: If an input has no id or repeats an earlier one
    """
    utxos = parse_outputs(data)
    seen: set[TransactionID] = set()
    for position, utxo in enumerate(utxos):
        if utxo.id is None:
            raise InputValidationError(f"Input at position {position} has no transaction id")
        if utxo.id in seen:
            raise InputValidationError(f"Duplicate input {utxo.id} at position {position}")
        seen.add(utxo.id)
    return utxos


def parse_value(data: Any) -> Value:
    """Validate a single output record and return just its value."""
    return OutputModel.model_validate(data).to_utxo().value


def sum_json(outputs: Any) -> dict[str, Any]:
    """Total of a JSON list of outputs, as an output record without id."""
    return OutputModel.from_value(sum_utxos(parse_outputs(outputs))).to_wire()


def select_json(
    inputs: Any,
    outputs: Any,
    threshold: Any | None = None,
    initial_surplus: Any | None = None,
) -> dict[str, Any] | None:
    """
    Run selection on JSON-shaped records.

    Returns the {selected, unselected, excess} record, or None if the inputs
    are not enough for the outputs plus threshold.
    """
    result = select(
        parse_inputs(inputs),
        parse_outputs(outputs),
        initial_surplus=parse_value(initial_surplus) if initial_surplus is not None else None,
        threshold=parse_value(threshold) if threshold is not None else None,
    )
    if isinstance(result, InsufficientFunds):
        return None
    return SelectResultModel.from_result(result).to_wire()
