"""Balance contracts.

Amounts are human-scaled floats: the raw on-chain integer divided by
10**decimals. Very large raw values lose precision in this conversion.
"""

from pydantic import BaseModel, Field


class BalanceResult(BaseModel):
    """Aggregated wallet balance on a single network."""

    total: float = Field(default=0.0, description="Sum of all token balances")
    balances: dict[str, float] = Field(
        default_factory=dict, description="Human-scaled balance per token symbol"
    )

    @classmethod
    def empty(cls) -> "BalanceResult":
        return cls(total=0.0, balances={})
