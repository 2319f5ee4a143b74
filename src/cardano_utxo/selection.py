"""
Multi-asset coin selection.

Inputs are picked greedily until their value, plus any surplus the caller
already holds, covers the combined value of the payment targets in every
dimension. While a required asset is still outstanding, inputs holding it
are preferred over pure-lovelace inputs, so a large ADA-only UTXO never
crowds out the few UTXOs that carry a scarce token.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from cardano_utxo.aggregation import sum_utxos
from cardano_utxo.utxo import UTXO
from cardano_utxo.value import Value, add, dominates, need_remaining, subtract

RankKey = tuple[bool, int, int, int]


@dataclass(frozen=True)
class SelectionResult:
    """Successful selection: the chosen inputs, the rest, and the change value"""

    selected: tuple[UTXO, ...]
    unselected: tuple[UTXO, ...]
    excess: Value


@dataclass(frozen=True)
class InsufficientFunds:
    """Selection failed: even all inputs together cannot cover the targets"""

    shortfall: Value


Selection = SelectionResult | InsufficientFunds


def rank_candidate(utxo: UTXO, position: int, remaining: Value) -> RankKey | None:
    """
    Sort key for a candidate input, smallest first.

    Returns None when the candidate adds nothing to any outstanding dimension.
    Ordering: inputs holding an outstanding asset first, then by how many
    outstanding assets they hold (most first), then by how many unrelated
    assets they would drag into the change (fewest first), then by position.
    """
    held = utxo.value.assets
    covered = sum(1 for key in held if key in remaining.assets)

    if covered == 0 and not (remaining.lovelace and utxo.value.lovelace):
        return None

    return (covered == 0, -covered, len(held) - covered, position)


def select(
    inputs: Sequence[UTXO],
    targets: Sequence[UTXO],
    initial_surplus: Value | None = None,
    threshold: Value | None = None,
) -> Selection:
    """
    Select inputs covering the targets.

    Args:
        inputs: Candidate UTXOs, in caller preference order
        targets: Required outputs; only their combined value matters
        initial_surplus: Value already available before any input is spent
        threshold: Minimum value the excess must reach (e.g. room for a fee)

    Returns:
        SelectionResult on success, InsufficientFunds when the inputs cannot
        cover targets plus threshold
    """
    need = sum_utxos(targets)
    have = initial_surplus if initial_surplus is not None else Value.zero()
    requirement = add(need, threshold) if threshold is not None else need

    pool: list[tuple[int, UTXO]] = list(enumerate(inputs))
    selected: list[tuple[int, UTXO]] = []

    while not dominates(have, requirement):
        remaining = need_remaining(requirement, have)

        best: tuple[RankKey, int] | None = None
        for slot, (position, utxo) in enumerate(pool):
            key = rank_candidate(utxo, position, remaining)
            if key is not None and (best is None or key < best[0]):
                best = (key, slot)

        if best is None:
            logger.warning(
                f"Insufficient funds: {len(inputs)} inputs cannot cover the targets, "
                f"short by {remaining!r}"
            )
            return InsufficientFunds(shortfall=remaining)

        key, slot = best
        position, utxo = pool.pop(slot)
        selected.append((position, utxo))
        have = add(have, utxo.value)

        logger.debug(
            f"Selected {utxo}: covers {-key[1]} outstanding assets, "
            f"{key[2]} unrelated assets"
        )

    excess = subtract(have, need)
    logger.info(
        f"Selected {len(selected)} of {len(inputs)} inputs, "
        f"excess {excess.lovelace} lovelace and {len(excess.assets)} assets"
    )

    # Both halves keep the caller's input order
    selected.sort(key=lambda entry: entry[0])

    return SelectionResult(
        selected=tuple(utxo for _, utxo in selected),
        unselected=tuple(utxo for _, utxo in pool),
        excess=excess,
    )
