"""Static metadata for every supported network.

Supports 6 EVM networks, each settling USDC transfers through the gateway
contract:
- Base, Arbitrum One, Optimism, Scroll
- BNB Smart Chain, Polygon

Lookups are exact matches on the network display name. Unknown names
resolve to None rather than raising.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Token:
    """A token supported on a network."""

    name: str
    symbol: str
    decimals: int
    address: str
    image_url: str


@dataclass(frozen=True)
class Network:
    """Configuration for a supported network."""

    name: str
    chain_id: int
    tokens: tuple[Token, ...]
    gateway_contract_address: str
    explorer_tx_template: str  # formatted with tx_hash

    def explorer_link(self, tx_hash: str) -> str:
        return self.explorer_tx_template.format(tx_hash=tx_hash)


USDC_IMAGE_URL = "/logos/usdc-logo.svg"

# Shared across all networks in the upstream configuration; unverified.
GATEWAY_CONTRACT_ADDRESS = "0x30f6a8457f8e42371e204a9c103f2bd42341dd0f"


def _usdc(address: str, decimals: int = 6) -> Token:
    return Token(
        name="USD Coin",
        symbol="USDC",
        decimals=decimals,
        address=address,
        image_url=USDC_IMAGE_URL,
    )


# ======================
# Network Configurations
# ======================

NETWORKS: Mapping[str, Network] = MappingProxyType({
    "Base": Network(
        name="Base",
        chain_id=8453,
        tokens=(_usdc("0x833589fcd6edb6e08f4c7c32d4f71b54bda02913"),),
        gateway_contract_address=GATEWAY_CONTRACT_ADDRESS,
        explorer_tx_template="https://basescan.org/tx/{tx_hash}",
    ),
    "Arbitrum One": Network(
        name="Arbitrum One",
        chain_id=42161,
        tokens=(_usdc("0xaf88d065e77c8cc2239327c5edb3a432268e5831"),),
        gateway_contract_address=GATEWAY_CONTRACT_ADDRESS,
        explorer_tx_template="https://arbiscan.io/tx/{tx_hash}",
    ),
    # Binance-Peg USDC uses 18 decimals
    "BNB Smart Chain": Network(
        name="BNB Smart Chain",
        chain_id=56,
        tokens=(_usdc("0x8ac76a51cc950d9822d68b83fe1ad97b32cd580d", decimals=18),),
        gateway_contract_address=GATEWAY_CONTRACT_ADDRESS,
        explorer_tx_template="https://bscscan.com/tx/{tx_hash}",
    ),
    "Polygon": Network(
        name="Polygon",
        chain_id=137,
        tokens=(_usdc("0x3c499c542cef5e3811e1192ce70d8cc03d5c3359"),),
        gateway_contract_address=GATEWAY_CONTRACT_ADDRESS,
        explorer_tx_template="https://polygonscan.com/tx/{tx_hash}",
    ),
    "Scroll": Network(
        name="Scroll",
        chain_id=534352,
        tokens=(_usdc("0x06eFdBFf2a14a7c8E15944D1F4A48F9F95F663A4"),),
        gateway_contract_address=GATEWAY_CONTRACT_ADDRESS,
        explorer_tx_template="https://scrollscan.com/tx/{tx_hash}",
    ),
    "Optimism": Network(
        name="Optimism",
        chain_id=10,
        tokens=(_usdc("0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85"),),
        gateway_contract_address=GATEWAY_CONTRACT_ADDRESS,
        explorer_tx_template="https://optimistic.etherscan.io/tx/{tx_hash}",
    ),
})


# ======================
# Helper Functions
# ======================

def get_network(network: str) -> Optional[Network]:
    """Get network configuration by exact display name."""
    return NETWORKS.get(network)


def get_all_networks() -> list[Network]:
    """Get all network configurations."""
    return list(NETWORKS.values())


def get_network_by_chain_id(chain_id: int) -> Optional[Network]:
    """Get network configuration by EVM chain id."""
    for network in NETWORKS.values():
        if network.chain_id == chain_id:
            return network
    return None


def supported_tokens(network: str) -> Optional[list[Token]]:
    """Get the ordered token list for a network.

    Args:
        network: Network display name ("Base", "Polygon", ...)

    Returns:
        A fresh list of tokens, or None for an unknown network
    """
    config = get_network(network)
    if not config:
        return None
    return list(config.tokens)


def gateway_contract_address(network: str) -> Optional[str]:
    """Get the gateway contract address for a network."""
    config = get_network(network)
    return config.gateway_contract_address if config else None


def explorer_link(network: str, tx_hash: str) -> Optional[str]:
    """Build the block-explorer URL of a transaction.

    Args:
        network: Network display name
        tx_hash: Transaction hash

    Returns:
        Full transaction URL, or None for an unknown network
    """
    config = get_network(network)
    return config.explorer_link(tx_hash) if config else None


def parse_caip2_chain_id(chain_id: str) -> int:
    """Extract the numeric chain id from a CAIP-2 identifier.

    Args:
        chain_id: Identifier such as "eip155:8453"

    Raises:
        ValueError: If the identifier has no numeric reference part
    """
    namespace, sep, reference = chain_id.partition(":")
    if not sep or not namespace or not reference.isdigit():
        raise ValueError(f"Invalid CAIP-2 chain id: {chain_id!r}")
    return int(reference)
