#!/usr/bin/env python3
"""
Site Builder Database Bootstrap

Creates the application database, the application user (readWrite and
dbAdmin on that database), the seed collection and one seed document.
Run once during environment provisioning.

Usage:
    python -m site_bootstrap

Environment Variables:
    MONGODB_URI: Admin connection string (or MONGODB_HOST / MONGODB_PORT /
        MONGODB_USERNAME / MONGODB_PASSWORD)
    APP_DB_NAME: Database to bootstrap (default: new_site_builder)
    APP_USERNAME: Application user (default: amirex128)
    APP_PASSWORD: Application user password (required)
    LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging
from typing import Optional

from site_bootstrap.config import Settings, get_settings
from site_bootstrap.database.connections import close_client, create_mongo_client, ping
from site_bootstrap.models.seed import BootstrapResult
from site_bootstrap.services.bootstrap_service import BootstrapService

logger = logging.getLogger("site_bootstrap")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def main(settings: Optional[Settings] = None) -> BootstrapResult:
    """
    Connect, run the bootstrap sequence and disconnect.

    Errors from any step propagate to the caller; the client is closed
    either way.
    """
    settings = settings or get_settings()
    client = create_mongo_client(
        settings.mongo_uri,
        server_selection_timeout_ms=settings.server_selection_timeout_ms,
    )
    try:
        await ping(client)
        logger.info("Connected to MongoDB")
        service = BootstrapService(client, settings)
        return await service.run()
    finally:
        close_client(client)
        logger.info("Disconnected")


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("=" * 60)
    logger.info("Site Builder Database Bootstrap")
    logger.info(f"Database: {settings.app_db_name}")
    logger.info(f"User: {settings.app_username}")
    logger.info("=" * 60)

    asyncio.run(main(settings))


if __name__ == "__main__":
    run()
