"""
Pytest configuration and fixtures for cardano_utxo tests.
"""

import pytest

from cardano_utxo.utxo import UTXO, TransactionID
from cardano_utxo.value import Value


def make_utxo(
    lovelace: int,
    assets: list[tuple[str, str, int]] | None = None,
    tx_hash: str | None = None,
    index: int = 0,
) -> UTXO:
    """Build a UTXO; an id is attached only when tx_hash is given."""
    return UTXO(
        value=Value.from_assets(lovelace, assets or []),
        id=TransactionID(tx_hash, index) if tx_hash is not None else None,
    )


@pytest.fixture
def multi_asset_inputs() -> list[UTXO]:
    """Four inputs with overlapping asset holdings."""
    return [
        make_utxo(
            100_000,
            [
                ("policy1", "asset1", 2000),
                ("policy2", "asset2", 2000),
                ("policy3", "asset3", 1000),
                ("policy4", "asset4", 1000),
            ],
            tx_hash="input0",
        ),
        make_utxo(
            1000,
            [("policy1", "asset1", 2000), ("policy2", "asset2", 1000)],
            tx_hash="input1",
        ),
        make_utxo(10_000, tx_hash="input2"),
        make_utxo(10_000, [("policy2", "asset2", 1000)], tx_hash="input3"),
    ]


@pytest.fixture
def multi_asset_output() -> UTXO:
    return make_utxo(10_000, [("policy1", "asset1", 1000), ("policy2", "asset2", 1000)])


@pytest.fixture
def wire_inputs() -> list[dict]:
    """JSON-shaped inputs as a wallet would send them."""
    return [
        {
            "id": {"hash": "hash1", "index": 1},
            "lovelace": 10_000,
            "assets": [
                {"policyId": "policy3", "assetName": "aname1", "quantity": 10_000},
                {"policyId": "policy4", "assetName": "aname2", "quantity": 100_000},
            ],
        },
        {
            "id": {"hash": "hash2", "index": 2},
            "lovelace": 200,
            "assets": [
                {"policyId": "policy1", "assetName": "aname1", "quantity": 20_000},
                {"policyId": "policy2", "assetName": "aname2", "quantity": 200_000},
            ],
        },
        {"id": {"hash": "hash3", "index": 3}, "lovelace": 7000, "assets": []},
    ]


@pytest.fixture
def wire_outputs() -> list[dict]:
    return [
        {
            "lovelace": 1000,
            "assets": [
                {"policyId": "policy1", "assetName": "aname1", "quantity": 10_000},
                {"policyId": "policy2", "assetName": "aname2", "quantity": 100_000},
            ],
        },
        {"lovelace": 5000, "assets": []},
    ]
