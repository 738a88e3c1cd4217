"""Read-only EVM chain client.

Exposes a single capability, calling a view method on a contract and
returning its integer result. Timeouts are enforced here; callers above
this layer do not add their own.
"""

import logging
from typing import Any, Optional, Protocol, Sequence

import httpx

from noblocks.config import Settings, get_settings

logger = logging.getLogger(__name__)

# ERC-20 balanceOf(address) function selector
BALANCE_OF_SELECTOR = "0x70a08231"


class ChainReadError(Exception):
    """Raised when a contract read cannot produce a result."""


class ChainReader(Protocol):
    """Anything that can read an integer result from a contract method."""

    async def call_contract_method(
        self,
        contract_address: str,
        abi_method: str,
        args: Sequence[Any],
    ) -> int:
        ...


def encode_balance_of(owner: str) -> str:
    """Encode calldata for balanceOf(owner)."""
    address_padded = owner.lower().removeprefix("0x").zfill(64)
    return f"{BALANCE_OF_SELECTOR}{address_padded}"


class JsonRpcChainReader:
    """Chain reader backed by an EVM JSON-RPC endpoint (eth_call)."""

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the reader.

        Args:
            rpc_url: JSON-RPC endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used for testing)
        """
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._transport = transport

    async def call_contract_method(
        self,
        contract_address: str,
        abi_method: str,
        args: Sequence[Any],
    ) -> int:
        if abi_method != "balanceOf":
            raise ChainReadError(f"Unsupported contract method: {abi_method}")
        if len(args) != 1:
            raise ChainReadError("balanceOf expects exactly one argument")

        payload = {
            "jsonrpc": "2.0",
            "method": "eth_call",
            "params": [
                {"to": contract_address, "data": encode_balance_of(str(args[0]))},
                "latest",
            ],
            "id": 1,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.rpc_url, json=payload)
        except httpx.HTTPError as e:
            raise ChainReadError(f"RPC request to {self.rpc_url} failed: {e}") from e

        if response.status_code != 200:
            raise ChainReadError(
                f"RPC request to {self.rpc_url} returned HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ChainReadError(f"Non-JSON response from {self.rpc_url}") from e
        if not isinstance(data, dict):
            raise ChainReadError(f"Unexpected JSON-RPC response: {data!r}")

        if "error" in data:
            error = data["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise ChainReadError(f"RPC error: {message}")

        result = data.get("result")
        if not result or result == "0x":
            raise ChainReadError(f"Empty eth_call result from {contract_address}")

        try:
            return int(result, 16)
        except ValueError as e:
            raise ChainReadError(f"Malformed eth_call result: {result!r}") from e


def get_chain_reader(
    network: str,
    settings: Optional[Settings] = None,
) -> Optional[JsonRpcChainReader]:
    """Build a reader for a network from configuration.

    Returns:
        JsonRpcChainReader, or None if no RPC URL is configured for the network
    """
    settings = settings or get_settings()
    rpc_url = settings.get_rpc_url(network)
    if not rpc_url:
        logger.debug("No RPC URL configured for %s", network)
        return None
    return JsonRpcChainReader(rpc_url, timeout=settings.rpc_timeout)
