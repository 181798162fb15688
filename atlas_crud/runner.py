"""
Demo runner: one connection, one ping, one create/read/update/delete pass.

Usage (example from CLI):
    import asyncio
    from atlas_crud.runner import run

    report = asyncio.run(run())
    print(report.to_json())

The client is opened once at the start of the run, handed to every step, and
closed exactly once when the run ends. Step failures are recorded on the
report and never stop the steps after them. Anything else that escapes
(for example a missing or malformed connection string) is logged once and
stored on the report; `run` itself does not raise.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from atlas_crud.config import Settings, get_settings
from atlas_crud.domain.models import RunReport, UserRecord
from atlas_crud.infrastructure.client_factory import (
    COLLECTION_NAME,
    DATABASE_NAME,
    ClientFactory,
    open_client,
)
from atlas_crud.operations import create_item, delete_item, ping, read_item, update_item
from atlas_crud.utils.logging import get_logger

log = get_logger(__name__)

DEMO_USER = UserRecord(name="Anu", email="anu@gmail.com", password="anu")
DEMO_FILTER: Dict[str, Any] = {"email": DEMO_USER.email}
DEMO_UPDATE: Dict[str, Any] = {"$set": {"name": "update anu"}}


async def _run_steps(client: AsyncIOMotorClient, report: RunReport) -> None:
    report.results.append(await ping(client))

    collection = client[DATABASE_NAME][COLLECTION_NAME]
    report.results.append(await create_item(collection, DEMO_USER.to_document()))
    report.results.append(await read_item(collection, DEMO_FILTER))
    report.results.append(await update_item(collection, DEMO_FILTER, DEMO_UPDATE))
    report.results.append(await delete_item(collection, DEMO_FILTER))


async def run(
    settings: Optional[Settings] = None,
    client_factory: Optional[ClientFactory] = None,
) -> RunReport:
    """
    Execute the demo sequence and return its report.

    Parameters
    ----------
    settings : Settings | None
        Effective configuration. Defaults to the cached process settings.
    client_factory : callable | None
        Builds the client from settings. Defaults to the Motor factory;
        tests inject fakes here.

    Returns
    -------
    RunReport
        Step results in execution order plus connection lifecycle flags.
    """
    settings = settings or get_settings()
    report = RunReport(database=DATABASE_NAME, collection=COLLECTION_NAME)

    log.info(f"[RUN START] {DATABASE_NAME}.{COLLECTION_NAME}")
    try:
        async with open_client(settings, factory=client_factory) as client:
            report.connected = True
            await _run_steps(client, report)
        report.closed = True
    except Exception as exc:  # noqa: BLE001 - top-level catch-all for the whole run
        log.exception(f"[RUN FAILED] {exc}", extra={"error_type": type(exc).__name__})
        report.error = str(exc)
        report.error_type = type(exc).__name__

    failed = [result.operation for result in report.results if not result.ok]
    log.info(
        f"[RUN COMPLETE] {len(report.results) - len(failed)}/{len(report.results)} steps succeeded",
        extra={"failed_steps": failed, "connected": report.connected, "closed": report.closed},
    )
    return report


__all__ = ["DEMO_FILTER", "DEMO_UPDATE", "DEMO_USER", "run"]
