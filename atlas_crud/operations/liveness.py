"""Liveness check against the deployment's admin database."""

from __future__ import annotations

from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorClient

from atlas_crud.domain.models import OperationResult
from atlas_crud.operations.base import run_step


async def ping(client: AsyncIOMotorClient) -> OperationResult:
    """
    Send `{"ping": 1}` to `admin`. A failure is reported, not raised.
    """

    async def _ping() -> Dict[str, Any]:
        return await client.admin.command("ping")

    return await run_step(
        "ping",
        _ping,
        lambda reply: "Pinged your deployment. You successfully connected to MongoDB!",
    )


__all__ = ["ping"]
