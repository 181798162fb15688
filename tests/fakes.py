"""
In-memory fakes of the Motor client, database and collection.

The fakes return real `pymongo.results` objects so the operations read
`inserted_id`, `modified_count` and `deleted_count` exactly as they would
from the driver.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


class FakeCollection:
    """
    Async stand-in for a Motor collection holding documents in a list.

    Filters match on field equality; updates support `$set` only.
    """

    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.calls: List[str] = []

    def _match(self, filter: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if all(document.get(key) == value for key, value in filter.items()):
                return document
        return None

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        self.calls.append("insert_one")
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return InsertOneResult(document["_id"], True)

    async def find_one(self, filter: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        self.calls.append("find_one")
        document = self._match(filter)
        return dict(document) if document is not None else None

    async def update_one(self, filter: Mapping[str, Any], update: Mapping[str, Any]) -> UpdateResult:
        self.calls.append("update_one")
        document = self._match(filter)
        if document is None:
            return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)
        changes = update.get("$set", {})
        modified = any(document.get(key) != value for key, value in changes.items())
        document.update(changes)
        return UpdateResult({"n": 1, "nModified": int(modified), "ok": 1.0}, True)

    async def delete_one(self, filter: Mapping[str, Any]) -> DeleteResult:
        self.calls.append("delete_one")
        document = self._match(filter)
        if document is None:
            return DeleteResult({"n": 0, "ok": 1.0}, True)
        self.documents.remove(document)
        return DeleteResult({"n": 1, "ok": 1.0}, True)


class FailingCollection(FakeCollection):
    """Collection whose every call fails as if the server were unreachable."""

    def _fail(self, name: str) -> None:
        self.calls.append(name)
        raise ServerSelectionTimeoutError(f"{name}: no servers available")

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        self._fail("insert_one")

    async def find_one(self, filter: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        self._fail("find_one")

    async def update_one(self, filter: Mapping[str, Any], update: Mapping[str, Any]) -> UpdateResult:
        self._fail("update_one")

    async def delete_one(self, filter: Mapping[str, Any]) -> DeleteResult:
        self._fail("delete_one")


class FakeAdminDatabase:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.commands: List[Any] = []

    async def command(self, command: Any) -> Dict[str, Any]:
        self.commands.append(command)
        if self.fail:
            raise ServerSelectionTimeoutError("ping: no servers available")
        return {"ok": 1.0}


class FakeDatabase:
    def __init__(self, name: str, collection: FakeCollection) -> None:
        self.name = name
        self._collection = collection
        self.requested: List[str] = []

    def __getitem__(self, name: str) -> FakeCollection:
        self.requested.append(name)
        return self._collection


class FakeClient:
    """Async stand-in for AsyncIOMotorClient that counts close() calls."""

    def __init__(
        self,
        collection: Optional[FakeCollection] = None,
        ping_fails: bool = False,
    ) -> None:
        self.collection = collection if collection is not None else FakeCollection()
        self.admin = FakeAdminDatabase(fail=ping_fails)
        self.databases: List[FakeDatabase] = []
        self.close_calls = 0

    def __getitem__(self, name: str) -> FakeDatabase:
        database = FakeDatabase(name, self.collection)
        self.databases.append(database)
        return database

    def close(self) -> None:
        self.close_calls += 1

