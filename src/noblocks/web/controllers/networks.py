"""Network metadata and nonce API endpoints."""

from fastapi import APIRouter, HTTPException, Query

from noblocks.networks import explorer_link, get_all_networks, get_network
from noblocks.utils.nonce import generate_time_based_nonce
from noblocks.web.contracts.networks import (
    ExplorerLinkResponse,
    NetworkInfo,
    NetworkListResponse,
    NonceResponse,
)

router = APIRouter(tags=["networks"])


@router.get("/networks", response_model=NetworkListResponse)
async def get_networks() -> NetworkListResponse:
    """Get list of supported networks with their tokens."""
    networks = [NetworkInfo.from_network(n) for n in get_all_networks()]
    return NetworkListResponse(networks=networks, total=len(networks))


@router.get("/networks/{network}", response_model=NetworkInfo)
async def get_network_info(network: str) -> NetworkInfo:
    """Get metadata for a single network by display name."""
    config = get_network(network)
    if not config:
        raise HTTPException(status_code=404, detail=f"Network not found: {network}")
    return NetworkInfo.from_network(config)


@router.get("/networks/{network}/explorer/{tx_hash}", response_model=ExplorerLinkResponse)
async def get_explorer_link(network: str, tx_hash: str) -> ExplorerLinkResponse:
    """Get the block-explorer URL of a transaction."""
    url = explorer_link(network, tx_hash)
    if url is None:
        raise HTTPException(status_code=404, detail=f"Network not found: {network}")
    return ExplorerLinkResponse(network=network, tx_hash=tx_hash, url=url)


@router.get("/nonce", response_model=NonceResponse)
async def get_nonce(length: int = Query(default=16, ge=0, le=64)) -> NonceResponse:
    """Generate a request correlation nonce."""
    return NonceResponse(nonce=generate_time_based_nonce(length))
