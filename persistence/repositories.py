from __future__ import annotations

import asyncio
from typing import Any, Generic, Mapping, Protocol

from .collection_state import (
    DiskCollectionRepository,
    DiskOrderRepository,
    DiskPostRepository,
    EntityT,
    OrderRecord,
    PostRecord,
)
from .interfaces import KeyValueDocumentStore
from .settings_state import DiskSiteSettingsRepository


class AsyncPostRepository(Protocol):
    async def list_posts(self, *, category: str | None = None) -> list[PostRecord]: ...
    async def add_post(self, payload: Mapping[str, Any]) -> PostRecord: ...
    async def delete_post(self, post_id: int) -> bool: ...
    async def count(self) -> int: ...


class AsyncOrderRepository(Protocol):
    async def list_orders(self) -> list[OrderRecord]: ...
    async def add_order(self, payload: Mapping[str, Any]) -> OrderRecord: ...
    async def count(self) -> int: ...


class AsyncSiteSettingsRepository(Protocol):
    async def get(self) -> dict[str, Any]: ...
    async def replace(self, new_settings: Mapping[str, Any]) -> None: ...


class _AsyncDiskCollection(Generic[EntityT]):
    """
    Async wrapper around a disk-backed collection.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    _repo: DiskCollectionRepository[EntityT]

    async def count(self) -> int:
        return await asyncio.to_thread(self._repo.count)


class AsyncDiskPostRepository(_AsyncDiskCollection[PostRecord], AsyncPostRepository):
    def __init__(self, store: KeyValueDocumentStore) -> None:
        self._repo = DiskPostRepository(store)

    async def list_posts(self, *, category: str | None = None) -> list[PostRecord]:
        return await asyncio.to_thread(self._repo.list_by_category, category)

    async def add_post(self, payload: Mapping[str, Any]) -> PostRecord:
        return await asyncio.to_thread(self._repo.append, payload)

    async def delete_post(self, post_id: int) -> bool:
        return await asyncio.to_thread(self._repo.remove_by_id, post_id)


class AsyncDiskOrderRepository(_AsyncDiskCollection[OrderRecord], AsyncOrderRepository):
    """
    Orders have no delete operation; they are only ever appended and listed.
    """

    def __init__(self, store: KeyValueDocumentStore) -> None:
        self._repo = DiskOrderRepository(store)

    async def list_orders(self) -> list[OrderRecord]:
        return await asyncio.to_thread(self._repo.list)

    async def add_order(self, payload: Mapping[str, Any]) -> OrderRecord:
        return await asyncio.to_thread(self._repo.append, payload)


class AsyncDiskSiteSettingsRepository(AsyncSiteSettingsRepository):
    def __init__(self, store: KeyValueDocumentStore) -> None:
        self._repo = DiskSiteSettingsRepository(store)

    async def get(self) -> dict[str, Any]:
        return await asyncio.to_thread(self._repo.get)

    async def replace(self, new_settings: Mapping[str, Any]) -> None:
        await asyncio.to_thread(self._repo.replace, new_settings)
