"""
Totals over collections of UTXOs.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from cardano_utxo.utxo import UTXO
from cardano_utxo.value import Value, add


def sum_values(values: Iterable[Value]) -> Value:
    return reduce(add, values, Value.zero())


def sum_utxos(utxos: Iterable[UTXO]) -> Value:
    """Total value held by utxos. An empty collection sums to zero."""
    return sum_values(utxo.value for utxo in utxos)
