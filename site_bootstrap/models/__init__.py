"""
Pydantic models for the bootstrap user and seed data.
"""
from site_bootstrap.models.user import AppUser, RoleGrant
from site_bootstrap.models.seed import SeedDocument, BootstrapResult

__all__ = [
    "AppUser",
    "RoleGrant",
    "SeedDocument",
    "BootstrapResult",
]
