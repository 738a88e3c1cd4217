"""Web boundary layer.

All operations in this layer are read-only: network metadata lookups,
on-chain balance queries and nonce generation. Nothing here signs or
broadcasts transactions.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
