"""
Bootstrap service: one-time setup of the site builder database.
"""
import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from site_bootstrap.config import Settings
from site_bootstrap.database.databases import site_builder_db
from site_bootstrap.models.seed import BootstrapResult, SeedDocument
from site_bootstrap.models.user import AppUser

logger = logging.getLogger("site_bootstrap")


class BootstrapService:
    """
    Runs the bootstrap sequence against one MongoDB server.

    Steps run strictly in order and the first failure aborts the rest.
    Nothing is rolled back and driver errors are re-raised unchanged.
    """

    def __init__(self, client: AsyncIOMotorClient, settings: Settings):
        """Initialize with an open client and bootstrap settings."""
        self.client = client
        self.settings = settings
        self.db: Optional[AsyncIOMotorDatabase] = None
        self.db_name: Optional[str] = None

    def select_database(self, name: str) -> AsyncIOMotorDatabase:
        """Select the database; the server creates it on the first write."""
        self.db = self.client[name]
        self.db_name = name
        logger.info(f"Using database '{name}'")
        return self.db

    def _require_db(self) -> AsyncIOMotorDatabase:
        if self.db is None:
            raise RuntimeError("No database selected, call select_database() first")
        return self.db

    async def create_user(self, user: AppUser) -> None:
        """
        Create the application user in the selected database.

        Raises:
            OperationFailure: If the user already exists (code 51003) or
                the admin connection lacks privileges.
        """
        db = self._require_db()
        await db.command("createUser", user.username, **user.create_user_command())
        roles = ", ".join(f"{grant.role}@{grant.db}" for grant in user.roles)
        logger.info(f"Created user '{user.username}' with roles: {roles}")

    async def create_collection(self, name: str) -> AsyncIOMotorCollection:
        """
        Create a collection in the selected database.

        Raises:
            CollectionInvalid: If the collection already exists.
        """
        db = self._require_db()
        await db.create_collection(name)
        logger.info(f"Created collection '{name}'")
        return db[name]

    async def insert_seed_document(
        self,
        collection: AsyncIOMotorCollection,
        name: str,
    ) -> tuple[str, SeedDocument]:
        """Insert the seed document, timestamped right before the insert."""
        seed = SeedDocument(name=name)
        result = await collection.insert_one(seed.to_document())
        logger.info(f"Inserted seed document {result.inserted_id}")
        return str(result.inserted_id), seed

    async def run(self) -> BootstrapResult:
        """
        Execute the full bootstrap sequence.

        Returns:
            BootstrapResult describing what was created
        """
        settings = self.settings
        step = "select database"
        try:
            self.select_database(settings.app_db_name)

            step = "create user"
            user = AppUser.for_database(
                username=settings.app_username,
                password=settings.app_password,
                database=self.db_name,
            )
            await self.create_user(user)

            step = "create collection"
            collection = await self.create_collection(settings.seed_collection)

            step = "insert seed document"
            inserted_id, seed = await self.insert_seed_document(
                collection, settings.seed_document_name
            )
        except Exception as e:
            logger.error(f"Bootstrap failed at step '{step}': {e}")
            raise

        print(site_builder_db.COMPLETION_MESSAGE)

        return BootstrapResult(
            database=self.db_name,
            username=user.username,
            roles=[grant.role for grant in user.roles],
            collection=settings.seed_collection,
            inserted_id=inserted_id,
            created_at=seed.created_at,
        )
