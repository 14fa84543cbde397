"""
Bootstrap configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from site_bootstrap.database.databases import site_builder_db


class Settings(BaseSettings):
    """Bootstrap settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB server (administrative connection)
    mongodb_uri: Optional[str] = None
    mongodb_host: str = "mongodb"
    mongodb_port: int = 27017
    mongodb_username: Optional[str] = None
    mongodb_password: Optional[SecretStr] = None
    mongodb_auth_source: str = "admin"
    server_selection_timeout_ms: int = 10000

    # Application database and user
    app_db_name: str = site_builder_db.DB_NAME
    app_username: str = site_builder_db.DEFAULT_USERNAME
    app_password: SecretStr

    # Seed data
    seed_collection: str = site_builder_db.Collections.TEST
    seed_document_name: str = site_builder_db.SEED_DOCUMENT_NAME

    # Logging
    log_level: str = "INFO"

    @field_validator("app_db_name", "app_username", "seed_collection", "seed_document_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("app_password")
    @classmethod
    def password_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("APP_PASSWORD must not be empty")
        return value

    @property
    def mongo_uri(self) -> str:
        """
        Connection string for the administrative client.

        MONGODB_URI wins when set; otherwise the URI is assembled from the
        host, port and admin credentials.
        """
        if self.mongodb_uri:
            return self.mongodb_uri

        address = f"{self.mongodb_host}:{self.mongodb_port}"
        if not self.mongodb_username:
            return f"mongodb://{address}"

        password = ""
        if self.mongodb_password is not None:
            password = self.mongodb_password.get_secret_value()
        credentials = f"{quote_plus(self.mongodb_username)}:{quote_plus(password)}"
        return f"mongodb://{credentials}@{address}/?authSource={quote_plus(self.mongodb_auth_source)}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
