"""
Global test fixtures for the site builder bootstrap.

This module provides shared fixtures for all tests including:
- Bootstrap settings isolated from the environment
- Mock MongoDB (mongomock-motor) with server commands stubbed
- A fully mocked Motor client for call-order tests
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from site_bootstrap.config import Settings, get_settings


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """
    Keep the caller's environment out of every test.

    Provisioning shells export the same variables Settings reads, and
    get_settings() also picks up a .env file from the working directory.
    """
    for field_name in Settings.model_fields:
        monkeypatch.delenv(field_name.upper(), raising=False)
        monkeypatch.delenv(field_name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with the production defaults and a test password."""
    return Settings(_env_file=None, app_password="app-secret")


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

class CommandStubDatabase:
    """
    mongomock-motor database whose `command` is an AsyncMock.

    mongomock does not implement user management or ping, so those
    commands are recorded instead of executed.
    """

    def __init__(self, database):
        self._database = database
        self.command = AsyncMock(return_value={"ok": 1.0})

    def __getattr__(self, name):
        return getattr(self._database, name)

    def __getitem__(self, name):
        return self._database[name]


class CommandStubClient:
    """mongomock-motor client handing out CommandStubDatabase instances."""

    def __init__(self, client):
        self._client = client
        self._databases: dict[str, CommandStubDatabase] = {}
        self.close = MagicMock()

    def __getitem__(self, name):
        if name not in self._databases:
            self._databases[name] = CommandStubDatabase(self._client[name])
        return self._databases[name]

    @property
    def admin(self):
        return self["admin"]


@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mongo_server(mock_async_mongo_client) -> CommandStubClient:
    """In-memory server with createUser/ping stubbed."""
    return CommandStubClient(mock_async_mongo_client)


# =============================================================================
# Fully Mocked Client
# =============================================================================

@pytest.fixture
def call_log() -> list[str]:
    """Order in which mocked server operations ran."""
    return []


@pytest.fixture
def mock_motor_client(call_log):
    """
    Motor client built from mocks that records each server call.

    Configure failures through `client.db.command`, `client.db.create_collection`
    or `client.collection.insert_one` side effects.
    """
    collection = MagicMock()

    async def insert_one(document):
        call_log.append("insert_one")
        return MagicMock(inserted_id="665f1f77bcf86cd799439011")

    collection.insert_one = AsyncMock(side_effect=insert_one)

    db = MagicMock()

    async def command(*args, **kwargs):
        call_log.append(args[0])
        return {"ok": 1.0}

    async def create_collection(name):
        call_log.append("create_collection")
        db.collection_created_at = datetime.now(timezone.utc)
        return collection

    db.command = AsyncMock(side_effect=command)
    db.create_collection = AsyncMock(side_effect=create_collection)
    db.__getitem__.return_value = collection

    client = MagicMock()
    client.__getitem__.return_value = db
    client.db = db
    client.collection = collection
    return client


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def as_utc():
    """
    Normalize a datetime read back from mongomock to aware UTC.

    Stored datetimes come back naive and truncated to milliseconds.
    """
    def _as_utc(value: datetime) -> datetime:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
    return _as_utc
