"""
UTXO records.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cardano_utxo.value import Value


@dataclass(frozen=True, order=True)
class TransactionID:
    """Reference to a transaction output: hash plus output index"""

    hash: str
    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Output index must be non-negative, got {self.index}")

    def __str__(self) -> str:
        return f"{self.hash}#{self.index}"


@dataclass(frozen=True)
class UTXO:
    """
    A bundle of value, optionally tied to the output that holds it.

    Spendable inputs carry an id; payment targets usually do not.
    """

    value: Value = field(default_factory=Value.zero)
    id: TransactionID | None = None

    def __str__(self) -> str:
        label = str(self.id) if self.id is not None else "<target>"
        return f"{label} ({self.value.lovelace} lovelace, {len(self.value.assets)} assets)"
