"""
Application user model for the createUser command.
"""
from typing import Optional

from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator

from site_bootstrap.database.databases import site_builder_db


class RoleGrant(BaseModel):
    """A built-in role scoped to one database."""
    role: str = Field(..., min_length=1, description="Role name, e.g. readWrite")
    db: str = Field(..., min_length=1, description="Database the role applies to")

    def to_command(self) -> dict[str, str]:
        return {"role": self.role, "db": self.db}


class AppUser(BaseModel):
    """
    Application user created inside the site builder database.

    Every role grant must target the same database the user is created in.
    """
    username: str = Field(..., min_length=1, description="Login name")
    password: SecretStr = Field(..., description="Plaintext password, sent only to the server")
    database: str = Field(..., min_length=1, description="Database the user is created in")
    roles: list[RoleGrant] = Field(..., min_length=1, description="Role grants")

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("Password must not be empty")
        return value

    @model_validator(mode="after")
    def roles_scoped_to_database(self) -> "AppUser":
        for grant in self.roles:
            if grant.db != self.database:
                raise ValueError(
                    f"Role '{grant.role}' is scoped to '{grant.db}', "
                    f"expected '{self.database}'"
                )
        return self

    @classmethod
    def for_database(
        cls,
        username: str,
        password: SecretStr | str,
        database: str,
        roles: Optional[list[str]] = None,
    ) -> "AppUser":
        """Build a user whose role grants all target `database`."""
        if roles is None:
            roles = site_builder_db.DEFAULT_ROLES
        return cls(
            username=username,
            password=password,
            database=database,
            roles=[RoleGrant(role=role, db=database) for role in roles],
        )

    def create_user_command(self) -> dict:
        """Options for `db.command("createUser", username, **options)`."""
        return {
            "pwd": self.password.get_secret_value(),
            "roles": [grant.to_command() for grant in self.roles],
        }
