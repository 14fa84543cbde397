"""
MongoDB connection management for the bootstrap run.

The client is created by the entry point and handed to the bootstrap
service explicitly; nothing here is cached at module level.
"""
from motor.motor_asyncio import AsyncIOMotorClient


def create_mongo_client(
    mongo_uri: str,
    server_selection_timeout_ms: int = 10000,
) -> AsyncIOMotorClient:
    """Create the administrative MongoDB client."""
    return AsyncIOMotorClient(
        mongo_uri,
        serverSelectionTimeoutMS=server_selection_timeout_ms,
    )


async def ping(client: AsyncIOMotorClient) -> None:
    """
    Verify the server is reachable.

    Raises whatever the driver raises (typically ServerSelectionTimeoutError).
    """
    await client.admin.command("ping")


def close_client(client: AsyncIOMotorClient) -> None:
    """Close the MongoDB client."""
    client.close()
