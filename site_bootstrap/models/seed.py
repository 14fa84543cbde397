"""
Seed document and bootstrap result models.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, Field


class SeedDocument(BaseModel):
    """
    Initial document inserted into the seed collection.

    created_at defaults to the time the model is built, so build it
    right before the insert.
    """
    name: str = Field(..., min_length=1)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Insertion timestamp",
    )

    def to_document(self) -> dict:
        return {"name": self.name, "created_at": self.created_at}


class BootstrapResult(BaseModel):
    """Summary of a completed bootstrap run."""
    database: str
    username: str
    roles: list[str]
    collection: str
    inserted_id: str
    created_at: datetime
