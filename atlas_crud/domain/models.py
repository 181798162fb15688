"""
Domain models for the Atlas CRUD demo.

`UserRecord` is the example document written to the `users` collection.
`OperationResult` and `RunReport` carry step outcomes back to the caller so
the CLI and tests can assert on what happened instead of scraping logs.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from bson import json_util
from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """
    Example user document. The database assigns `_id` on insert.
    """

    name: str = Field(..., description="Display name.")
    email: str = Field(..., description="Email address, used as the match key.")
    password: str = Field(..., description="Placeholder secret; stored as given.")

    model_config = {
        "frozen": True,
    }

    def to_document(self) -> Dict[str, Any]:
        """Return a fresh dict suitable for `insert_one`."""
        return self.model_dump()


class OperationResult(BaseModel):
    """
    Outcome of a single step (ping, create, read, update or delete).

    `value` is step specific: the ping reply, the generated id, the found
    document (or None), or the modified/deleted count.
    """

    operation: str
    ok: bool
    value: Any = None
    message: str = ""
    error: Optional[str] = None
    error_type: Optional[str] = None
    duration_seconds: float = 0.0

    model_config = {
        "frozen": True,
    }


class RunReport(BaseModel):
    """
    Ordered step results of one demo run plus connection lifecycle flags.
    """

    database: str
    collection: str
    connected: bool = False
    closed: bool = False
    results: List[OperationResult] = Field(default_factory=list)
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and all(result.ok for result in self.results)

    def result_for(self, operation: str) -> Optional[OperationResult]:
        for result in self.results:
            if result.operation == operation:
                return result
        return None

    def to_json(self, indent: int = 2) -> str:
        # json_util handles ObjectId values inside found documents.
        payload = self.model_dump()
        payload["ok"] = self.ok
        return json_util.dumps(payload, indent=indent)


__all__ = ["OperationResult", "RunReport", "UserRecord"]
