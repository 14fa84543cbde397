"""
Database module - MongoDB connection and database definitions.
"""
from site_bootstrap.database.connections import (
    create_mongo_client,
    ping,
    close_client,
)
from site_bootstrap.database.databases import site_builder_db

__all__ = [
    "create_mongo_client",
    "ping",
    "close_client",
    "site_builder_db",
]
