"""Balance aggregation from blockchain state.

Fetches the balance of every supported token on a network concurrently and
sums them. The aggregation is all-or-nothing: if any single token query
fails, no partial total is returned.

SECURITY: This service:
- Only queries public blockchain data
- Never accesses private keys
- Never signs transactions
"""

import asyncio
import logging
from typing import Optional

from noblocks.networks import Token, supported_tokens
from noblocks.rpc import ChainReader, ChainReadError, get_chain_reader
from noblocks.utils.formatting import shorten_address
from noblocks.web.contracts.balances import BalanceResult

logger = logging.getLogger(__name__)


class AggregateQueryFailure(Exception):
    """Raised when any per-token balance query fails."""

    def __init__(self, network: str, symbol: str, cause: BaseException):
        self.network = network
        self.symbol = symbol
        self.cause = cause
        super().__init__(f"Failed to fetch {symbol} balance on {network}: {cause}")


def scale_amount(raw: int, decimals: int) -> float:
    """Convert a raw on-chain integer into a human-scaled float."""
    return raw / 10**decimals


class BalanceAggregator:
    """Aggregates a wallet's token balances on one network.

    Retries and timeouts are the reader's responsibility.
    """

    def __init__(self, reader: ChainReader):
        self.reader = reader

    async def fetch_wallet_balance(self, network: str, address: str) -> BalanceResult:
        """Get the total and per-token balances of a wallet.

        Args:
            network: Network display name
            address: Wallet address

        Returns:
            BalanceResult; zero-valued for an unsupported network

        Raises:
            AggregateQueryFailure: If any token balance query fails
        """
        tokens = supported_tokens(network)
        if not tokens:
            logger.debug("No supported tokens for network %r", network)
            return BalanceResult.empty()

        logger.info(
            "Fetching %d token balance(s) for %s on %s",
            len(tokens),
            shorten_address(address),
            network,
        )

        tasks = [
            asyncio.create_task(self._fetch_token_balance(network, token, address))
            for token in tokens
        ]
        try:
            amounts = await asyncio.gather(*tasks)
        except AggregateQueryFailure as e:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.error(str(e))
            raise

        balances = {token.symbol: amount for token, amount in zip(tokens, amounts)}
        return BalanceResult(total=sum(amounts), balances=balances)

    async def _fetch_token_balance(self, network: str, token: Token, address: str) -> float:
        try:
            raw = await self.reader.call_contract_method(
                token.address, "balanceOf", [address]
            )
            return scale_amount(int(raw), token.decimals)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise AggregateQueryFailure(network, token.symbol, e) from e


async def fetch_wallet_balance(
    network: str,
    address: str,
    reader: Optional[ChainReader] = None,
) -> BalanceResult:
    """Convenience wrapper using the configured JSON-RPC reader by default."""
    if reader is None:
        if supported_tokens(network) is None:
            return BalanceResult.empty()
        reader = get_chain_reader(network)
        if reader is None:
            raise AggregateQueryFailure(
                network, "*", ChainReadError(f"No RPC URL configured for {network}")
            )
    return await BalanceAggregator(reader).fetch_wallet_balance(network, address)
