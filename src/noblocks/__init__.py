"""noblocks - network metadata, wallet balances and payload sealing."""

__version__ = "0.1.0"
