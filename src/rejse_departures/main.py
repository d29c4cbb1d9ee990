"""Main entry point serving the journey planner API for the departure board."""

import asyncio
import logging
import sys

import aiohttp
import uvicorn

from rejse_departures.adapters.config import AppConfig
from rejse_departures.adapters.rejseplanen_api import (
    RejseplanenAddressLookup,
    RejseplanenDepartureBoard,
    RejseplanenHttpClient,
    RejseplanenLocationSearch,
)
from rejse_departures.adapters.web import create_app

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    if config.access_token is None:
        logger.error("ACCESS_TOKEN is not set.")
        logger.error("Set it in the environment or in a .env file before starting the server.")
        sys.exit(1)

    async with aiohttp.ClientSession() as session:
        http_client = RejseplanenHttpClient(
            session,
            config.access_token,
            base_url=config.api_base_url,
            timeout_seconds=config.api_timeout,
        )
        app = create_app(
            RejseplanenLocationSearch(http_client),
            RejseplanenAddressLookup(http_client),
            RejseplanenDepartureBoard(http_client),
            rate_limit_per_minute=config.rate_limit_per_minute,
        )

        server = uvicorn.Server(
            uvicorn.Config(app, host=config.host, port=config.port, log_level="info")
        )
        logger.info(f"Serving departure board API on {config.host}:{config.port}")
        try:
            await server.serve()
        except KeyboardInterrupt:
            logger.info("Shutting down...")


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
