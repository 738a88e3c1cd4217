"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from noblocks import __version__
from noblocks.config import get_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Noblocks API",
        description="Network metadata and wallet balance API",
        version=__version__,
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from noblocks.api.routes import health
    from noblocks.web.controllers import balances_router, networks_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(networks_router, prefix="/api/v1")
    app.include_router(balances_router, prefix="/api/v1")

    return app
