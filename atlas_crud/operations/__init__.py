"""
Operations package for the Atlas CRUD demo.

Re-exports the liveness check and the four CRUD helpers so callers can import
from `atlas_crud.operations` directly.
"""

from atlas_crud.operations.base import run_step
from atlas_crud.operations.crud import create_item, delete_item, read_item, update_item
from atlas_crud.operations.liveness import ping

__all__ = [
    "run_step",
    "ping",
    "create_item",
    "read_item",
    "update_item",
    "delete_item",
]
