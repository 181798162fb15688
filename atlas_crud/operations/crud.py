"""
Create/read/update/delete helpers for a single collection.

Each helper takes an already-open collection handle plus literal arguments
and returns an OperationResult. Filters and updates are passed to the driver
as-is.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from bson import json_util
from motor.motor_asyncio import AsyncIOMotorCollection

from atlas_crud.domain.models import OperationResult
from atlas_crud.operations.base import run_step


async def create_item(
    collection: AsyncIOMotorCollection, item: Mapping[str, Any]
) -> OperationResult:
    """
    Insert one document. The result value is the generated `_id` as text.
    """

    async def _insert() -> str:
        # insert_one adds `_id` to the dict it is given; keep the caller's copy clean.
        result = await collection.insert_one(dict(item))
        return str(result.inserted_id)

    return await run_step(
        "create", _insert, lambda inserted_id: f"Created item with _id: {inserted_id}"
    )


async def read_item(
    collection: AsyncIOMotorCollection, filter: Mapping[str, Any]
) -> OperationResult:
    """
    Find at most one document. The result value is the document or None.
    """

    async def _find() -> Optional[Dict[str, Any]]:
        return await collection.find_one(dict(filter))

    return await run_step("read", _find, lambda doc: f"Found item: {json_util.dumps(doc)}")


async def update_item(
    collection: AsyncIOMotorCollection,
    filter: Mapping[str, Any],
    update: Mapping[str, Any],
) -> OperationResult:
    """
    Apply `update` to at most one matching document.

    The result value is the number of documents actually changed, so an
    update that sets a field to its current value reports 0.
    """

    async def _update() -> int:
        result = await collection.update_one(dict(filter), dict(update))
        return result.modified_count

    return await run_step("update", _update, lambda count: f"Updated {count} item(s)")


async def delete_item(
    collection: AsyncIOMotorCollection, filter: Mapping[str, Any]
) -> OperationResult:
    """
    Remove at most one matching document. The result value is 0 or 1.
    """

    async def _delete() -> int:
        result = await collection.delete_one(dict(filter))
        return result.deleted_count

    return await run_step("delete", _delete, lambda count: f"Deleted {count} item(s)")


__all__ = ["create_item", "read_item", "update_item", "delete_item"]
