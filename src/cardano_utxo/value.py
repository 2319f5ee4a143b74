"""
Multi-asset value vectors and their arithmetic.

A Value has one native dimension (lovelace) and an open-ended set of asset
dimensions keyed by (policy_id, asset_name). A missing asset key means a
quantity of zero.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NamedTuple


class AssetId(NamedTuple):
    policy_id: str
    asset_name: str

    def __str__(self) -> str:
        return f"{self.policy_id}.{self.asset_name}"


@dataclass(frozen=True)
class Value:
    """
    Immutable lovelace amount plus native asset quantities.

    Zero-quantity assets are dropped on construction, so two values that only
    differ by zero entries compare equal.
    """

    lovelace: int = 0
    assets: Mapping[AssetId, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.lovelace < 0:
            raise ValueError(f"Lovelace must be non-negative, got {self.lovelace}")

        assets: dict[AssetId, int] = {}
        for key, quantity in self.assets.items():
            if quantity < 0:
                raise ValueError(f"Quantity of {key} must be non-negative, got {quantity}")
            if quantity:
                assets[AssetId(*key)] = quantity

        object.__setattr__(self, "assets", MappingProxyType(dict(sorted(assets.items()))))

    @classmethod
    def zero(cls) -> Value:
        return cls()

    @classmethod
    def from_assets(cls, lovelace: int, assets: Iterable[tuple[str, str, int]] = ()) -> Value:
        """Build a Value from (policy_id, asset_name, quantity) triples, summing repeats."""
        totals: dict[AssetId, int] = {}
        for policy_id, asset_name, quantity in assets:
            key = AssetId(policy_id, asset_name)
            totals[key] = totals.get(key, 0) + quantity
        return cls(lovelace=lovelace, assets=totals)

    def quantity(self, asset_id: tuple[str, str]) -> int:
        return self.assets.get(AssetId(*asset_id), 0)

    def asset_ids(self) -> list[AssetId]:
        return list(self.assets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.lovelace == other.lovelace and dict(self.assets) == dict(other.assets)

    def __hash__(self) -> int:
        return hash((self.lovelace, tuple(self.assets.items())))

    def __add__(self, other: Value) -> Value:
        return add(self, other)

    def __sub__(self, other: Value) -> Value:
        return subtract(self, other)

    def __ge__(self, other: Value) -> bool:
        return dominates(self, other)

    def __le__(self, other: Value) -> bool:
        return dominates(other, self)

    def __bool__(self) -> bool:
        return not is_zero(self)

    def __repr__(self) -> str:
        assets = ", ".join(f"{key}={quantity}" for key, quantity in self.assets.items())
        return f"Value(lovelace={self.lovelace}, assets={{{assets}}})"


def add(a: Value, b: Value) -> Value:
    assets = dict(a.assets)
    for key, quantity in b.assets.items():
        assets[key] = assets.get(key, 0) + quantity
    return Value(lovelace=a.lovelace + b.lovelace, assets=assets)


def subtract(a: Value, b: Value) -> Value:
    """
    Componentwise difference a - b.

    Raises:
        ValueError: If a does not dominate b
    """
    if not dominates(a, b):
        raise ValueError(f"Cannot subtract {b!r} from {a!r}: result would be negative")

    assets = dict(a.assets)
    for key, quantity in b.assets.items():
        assets[key] -= quantity
    return Value(lovelace=a.lovelace - b.lovelace, assets=assets)


def dominates(a: Value, b: Value) -> bool:
    """True iff a covers b in lovelace and in every asset b holds."""
    if a.lovelace < b.lovelace:
        return False
    return all(a.quantity(key) >= quantity for key, quantity in b.assets.items())


def is_zero(a: Value) -> bool:
    return a.lovelace == 0 and not any(a.assets.values())


def need_remaining(target: Value, have: Value) -> Value:
    """Per-dimension amount of target that have does not cover yet, floored at 0."""
    assets = {
        key: quantity - have.quantity(key)
        for key, quantity in target.assets.items()
        if quantity > have.quantity(key)
    }
    return Value(lovelace=max(0, target.lovelace - have.lovelace), assets=assets)
