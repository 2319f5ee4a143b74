"""
cardano_utxo - Multi-asset UTXO coin selection for Cardano

Provides value arithmetic, UTXO totals, and input selection.
"""

__version__ = "0.1.0"

from cardano_utxo.aggregation import sum_utxos, sum_values
from cardano_utxo.models import (
    AssetModel,
    InputValidationError,
    OutputModel,
    SelectResultModel,
    TransactionIDModel,
    parse_inputs,
    parse_outputs,
    select_json,
    sum_json,
)
from cardano_utxo.selection import InsufficientFunds, Selection, SelectionResult, select
from cardano_utxo.utxo import UTXO, TransactionID
from cardano_utxo.value import (
    AssetId,
    Value,
    add,
    dominates,
    is_zero,
    need_remaining,
    subtract,
)

__all__ = [
    "AssetId",
    "AssetModel",
    "InputValidationError",
    "InsufficientFunds",
    "OutputModel",
    "Selection",
    "SelectionResult",
    "SelectResultModel",
    "TransactionID",
    "TransactionIDModel",
    "UTXO",
    "Value",
    "add",
    "dominates",
    "is_zero",
    "need_remaining",
    "parse_inputs",
    "parse_outputs",
    "select",
    "select_json",
    "subtract",
    "sum_json",
    "sum_utxos",
    "sum_values",
]
