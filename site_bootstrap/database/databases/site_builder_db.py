"""
Site builder database configuration.
Application data for the site builder platform.
"""

DB_NAME = "new_site_builder"


class Collections:
    """Collection names in new_site_builder."""
    TEST = "test"


class Roles:
    """Built-in MongoDB roles granted to the application user."""
    READ_WRITE = "readWrite"
    DB_ADMIN = "dbAdmin"


DEFAULT_USERNAME = "amirex128"
DEFAULT_ROLES = [Roles.READ_WRITE, Roles.DB_ADMIN]

SEED_DOCUMENT_NAME = "Initial document"
COMPLETION_MESSAGE = "Database and user created successfully!"
