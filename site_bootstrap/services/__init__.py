"""
Service layer for the bootstrap sequence.
"""
from site_bootstrap.services.bootstrap_service import BootstrapService

__all__ = ["BootstrapService"]
