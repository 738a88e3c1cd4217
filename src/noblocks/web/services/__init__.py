"""Web services for read-only blockchain operations.

SECURITY: These services MUST NOT:
- Access private keys or wallet sessions
- Sign or broadcast transactions
"""

from noblocks.web.services.balance_service import (
    AggregateQueryFailure,
    BalanceAggregator,
    fetch_wallet_balance,
)

__all__ = [
    "AggregateQueryFailure",
    "BalanceAggregator",
    "fetch_wallet_balance",
]
