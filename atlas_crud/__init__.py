"""
Atlas CRUD - a small MongoDB Atlas create/read/update/delete demonstration.

Opens one client for the configured connection string, pings the deployment,
then inserts, reads, updates and deletes a single example user document in
`sample_mflix.users` before closing the client. Each step reports its outcome
as an `OperationResult`; a whole run returns a `RunReport`.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from atlas_crud.config import Settings, get_settings
from atlas_crud.domain.models import OperationResult, RunReport, UserRecord
from atlas_crud.infrastructure.client_factory import build_client, open_client
from atlas_crud.operations import create_item, delete_item, ping, read_item, update_item
from atlas_crud.runner import run
from atlas_crud.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "OperationResult",
    "RunReport",
    "UserRecord",
    # Connection lifecycle
    "build_client",
    "open_client",
    # Steps
    "ping",
    "create_item",
    "read_item",
    "update_item",
    "delete_item",
    # Runner
    "run",
    # Logging
    "configure_logging",
    "get_logger",
]
