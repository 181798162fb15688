"""
Utilities package for the Atlas CRUD demo.

Exports shared helpers for logging and step timing. Keep this package
lightweight and free of database logic.
"""

from atlas_crud.utils.logging import configure_logging, get_logger
from atlas_crud.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
