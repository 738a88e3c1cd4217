"""Balance API endpoints.

Balances are read from blockchain state through the configured RPC
endpoint of each network.
"""

import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException

from noblocks.networks import supported_tokens
from noblocks.rpc import ChainReader, get_chain_reader
from noblocks.utils.formatting import shorten_address
from noblocks.web.contracts.balances import BalanceResult
from noblocks.web.services.balance_service import AggregateQueryFailure, BalanceAggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/balances", tags=["balances"])

ReaderFactory = Callable[[str], Optional[ChainReader]]


def get_reader_factory() -> ReaderFactory:
    """Dependency returning the chain reader factory."""
    return get_chain_reader


@router.get("/{network}/{address}", response_model=BalanceResult)
async def get_wallet_balance(
    network: str,
    address: str,
    reader_factory: ReaderFactory = Depends(get_reader_factory),
) -> BalanceResult:
    """Get the total and per-token balances of a wallet on a network.

    Unsupported networks yield a zero balance rather than an error.
    """
    if supported_tokens(network) is None:
        return BalanceResult.empty()

    reader = reader_factory(network)
    if reader is None:
        raise HTTPException(status_code=503, detail=f"No RPC configured for {network}")

    logger.info("Balance request for %s on %s", shorten_address(address), network)

    try:
        return await BalanceAggregator(reader).fetch_wallet_balance(network, address)
    except AggregateQueryFailure as e:
        raise HTTPException(status_code=502, detail=str(e))
