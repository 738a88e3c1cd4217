"""Liveness and configuration endpoints."""

from fastapi import APIRouter

from noblocks import __version__
from noblocks.config import get_settings
from noblocks.networks import get_all_networks

router = APIRouter()


@router.get("/health")
async def health_check():
    """Report liveness and how many networks are served."""
    return {
        "status": "healthy",
        "service": "noblocks",
        "networks": len(get_all_networks()),
    }


@router.get("/health/detailed")
async def detailed_health():
    """Report served networks, sealing readiness and redacted settings."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "noblocks",
        "version": __version__,
        "networks": [network.name for network in get_all_networks()],
        "payload_sealing": bool(settings.aggregator_public_key_pem),
        "config": settings.get_safe_dict(),
    }
