"""Network and token information contracts."""

from pydantic import BaseModel, Field

from noblocks.networks import Network


class TokenInfo(BaseModel):
    """Information about a supported token."""

    name: str = Field(..., description="Token name")
    symbol: str = Field(..., description="Token symbol (USDC, etc.)")
    decimals: int = Field(..., ge=0, description="Token decimals")
    address: str = Field(..., description="Token contract address")
    image_url: str = Field(..., description="Token icon reference")


class NetworkInfo(BaseModel):
    """Information about a supported network."""

    name: str = Field(..., description="Network display name")
    chain_id: int = Field(..., description="EVM chain ID")
    gateway_contract_address: str = Field(..., description="Gateway contract address")
    explorer_tx_template: str = Field(..., description="Explorer transaction URL template")
    tokens: list[TokenInfo] = Field(default_factory=list)

    @classmethod
    def from_network(cls, network: Network) -> "NetworkInfo":
        return cls(
            name=network.name,
            chain_id=network.chain_id,
            gateway_contract_address=network.gateway_contract_address,
            explorer_tx_template=network.explorer_tx_template,
            tokens=[
                TokenInfo(
                    name=t.name,
                    symbol=t.symbol,
                    decimals=t.decimals,
                    address=t.address,
                    image_url=t.image_url,
                )
                for t in network.tokens
            ],
        )


class NetworkListResponse(BaseModel):
    """Response containing list of supported networks."""

    success: bool = True
    networks: list[NetworkInfo] = Field(default_factory=list)
    total: int = Field(default=0, description="Total number of networks")


class ExplorerLinkResponse(BaseModel):
    """Explorer URL for a transaction."""

    network: str
    tx_hash: str
    url: str


class NonceResponse(BaseModel):
    """Freshly generated correlation nonce."""

    nonce: str
