"""Main entry point - runs the API server."""

import logging

import uvicorn

from noblocks.api.app import create_app
from noblocks.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve the API."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Starting noblocks API...")
    logger.info(f"Environment: {settings.environment}")

    uvicorn.run(
        create_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_level=logging.getLevelName(settings.logging_level).lower(),
    )


if __name__ == "__main__":
    main()
