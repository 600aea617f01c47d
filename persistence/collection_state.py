from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Generic, Mapping, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .defaults import ORDERS, POSTS
from .errors import IOFailure
from .interfaces import KeyValueDocumentStore
from .locks import GLOBAL_COLLECTION_LOCKS

logger = logging.getLogger(__name__)


class EntityRecord(BaseModel):
    """
    Only `id` is store-controlled and typed. Known caller fields are declared
    as `Any` so values are stored exactly as sent; unknown ones are kept as extra.
    """

    model_config = ConfigDict(extra="allow")

    id: int

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class PostRecord(EntityRecord):
    title: Any = None
    description: Any = None
    category: Any = None
    type: Any = None
    date: Any = None
    content: Any = None
    price: Any = None


class OrderRecord(EntityRecord):
    date: Any = None
    status: Any = None


EntityT = TypeVar("EntityT", bound=EntityRecord)


def next_entity_id(entries: list[dict[str, Any]]) -> int:
    """Max existing id + 1, or 1 for an empty collection."""
    ids = [e["id"] for e in entries if isinstance(e.get("id"), int) and not isinstance(e.get("id"), bool)]
    return max(ids) + 1 if ids else 1


class CollectionRepository(Protocol[EntityT]):
    def list(self, predicate: Callable[[EntityT], bool] | None = None) -> list[EntityT]:
        ...

    def append(self, partial: Mapping[str, Any]) -> EntityT:
        ...

    def remove_by_id(self, entity_id: int) -> bool:
        ...

    def count(self) -> int:
        ...


class DiskCollectionRepository(Generic[EntityT]):
    """
    A collection document `{ <name>: [entity, ...] }` kept in a document store.

    append/remove_by_id hold the per-collection lock for the whole
    load-modify-save sequence so concurrent writers never reuse an id.
    """

    name: str
    model: type[EntityT]

    def __init__(self, store: KeyValueDocumentStore):
        self._store = store

    @property
    def _lock(self):
        return GLOBAL_COLLECTION_LOCKS.lock_for(self.name)

    def _load_doc(self) -> dict[str, Any]:
        doc = self._store.load(self.name)
        if not isinstance(doc, dict):
            raise IOFailure(f"Document {self.name!r} is not a JSON object")
        return doc

    def _entries(self, doc: Mapping[str, Any]) -> list[dict[str, Any]]:
        entries = doc.get(self.name)
        if not isinstance(entries, list):
            return []
        return [e for e in entries if isinstance(e, dict)]

    def _to_record(self, raw: Mapping[str, Any]) -> EntityT:
        try:
            return self.model.model_validate(raw)
        except ValidationError as e:
            raise IOFailure(f"Malformed {self.name} entry: {e}") from e

    def stamp(self, record: dict[str, Any]) -> dict[str, Any]:
        """Assign store-controlled fields other than id."""
        return record

    def list(self, predicate: Callable[[EntityT], bool] | None = None) -> list[EntityT]:
        records = [self._to_record(e) for e in self._entries(self._load_doc())]
        if predicate is None:
            return records
        return [r for r in records if predicate(r)]

    def append(self, partial: Mapping[str, Any]) -> EntityT:
        with self._lock:
            doc = self._load_doc()
            entries = self._entries(doc)
            new_id = next_entity_id(entries)

            candidate = self.stamp({**dict(partial), "id": new_id})
            record = self.model.model_validate(candidate)

            entries.append(record.to_disk_doc())
            doc[self.name] = entries
            self._store.save(self.name, doc)
        logger.info("Appended %s id=%s", self.name, new_id)
        return record

    def remove_by_id(self, entity_id: int) -> bool:
        with self._lock:
            doc = self._load_doc()
            entries = self._entries(doc)
            before = len(entries)
            entries = [e for e in entries if e.get("id") != entity_id]
            if len(entries) == before:
                return False
            doc[self.name] = entries
            self._store.save(self.name, doc)
        logger.info("Removed %s id=%s", self.name, entity_id)
        return True

    def count(self) -> int:
        if not self._store.exists(self.name):
            return 0
        doc = self._store.load(self.name)
        if not isinstance(doc, dict):
            return 0
        entries = doc.get(self.name)
        return len(entries) if isinstance(entries, list) else 0


class DiskPostRepository(DiskCollectionRepository[PostRecord]):
    name = POSTS
    model = PostRecord

    def stamp(self, record: dict[str, Any]) -> dict[str, Any]:
        record["date"] = date.today().isoformat()
        return record

    def list_by_category(self, category: str | None = None) -> list[PostRecord]:
        if category is None:
            return self.list()
        return self.list(lambda p: p.category == category)


class DiskOrderRepository(DiskCollectionRepository[OrderRecord]):
    name = ORDERS
    model = OrderRecord

    def stamp(self, record: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        record["date"] = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        record["status"] = "new"
        return record
