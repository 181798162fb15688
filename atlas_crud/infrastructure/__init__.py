"""
Infrastructure package for the Atlas CRUD demo.

Centralizes MongoDB client construction and its open/close lifecycle.
Keep this layer focused on I/O and resource management, decoupled from the
runner and the individual operations.
"""

from atlas_crud.infrastructure.client_factory import (
    COLLECTION_NAME,
    DATABASE_NAME,
    ClientFactory,
    build_client,
    open_client,
    redact_uri,
)

__all__ = [
    "COLLECTION_NAME",
    "DATABASE_NAME",
    "ClientFactory",
    "build_client",
    "open_client",
    "redact_uri",
]
