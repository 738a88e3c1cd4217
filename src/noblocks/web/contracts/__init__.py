"""Response contracts for the web layer.

These Pydantic models define the API interface for web clients.
"""

from noblocks.web.contracts.balances import BalanceResult
from noblocks.web.contracts.networks import (
    ExplorerLinkResponse,
    NetworkInfo,
    NetworkListResponse,
    NonceResponse,
    TokenInfo,
)

__all__ = [
    "BalanceResult",
    "ExplorerLinkResponse",
    "NetworkInfo",
    "NetworkListResponse",
    "NonceResponse",
    "TokenInfo",
]
