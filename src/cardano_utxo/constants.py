"""
Cardano ledger constants used at the boundary.
"""

from __future__ import annotations

# 1 ADA = 1,000,000 lovelace
LOVELACE_PER_ADA = 1_000_000

# Output indices are 32-bit unsigned on the wire
MAX_TX_INDEX = 2**32 - 1
