"""
Database definitions and collection constants.
"""
from site_bootstrap.database.databases import site_builder_db

__all__ = ["site_builder_db"]
