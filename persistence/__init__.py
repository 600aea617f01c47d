from __future__ import annotations

from .collection_state import (
    CollectionRepository,
    DiskOrderRepository,
    DiskPostRepository,
    OrderRecord,
    PostRecord,
)
from .defaults import default_documents
from .disk_store import DiskJsonDocumentStore
from .errors import AuthFailure, IOFailure, NotFound, StoreError, ValidationFailure
from .repositories import (
    AsyncDiskOrderRepository,
    AsyncDiskPostRepository,
    AsyncDiskSiteSettingsRepository,
    AsyncOrderRepository,
    AsyncPostRepository,
    AsyncSiteSettingsRepository,
)
from .settings_state import DiskSiteSettingsRepository, SiteSettingsRepository

__all__ = [
    "CollectionRepository",
    "DiskPostRepository",
    "DiskOrderRepository",
    "PostRecord",
    "OrderRecord",
    "DiskJsonDocumentStore",
    "default_documents",
    "DiskSiteSettingsRepository",
    "SiteSettingsRepository",
    "AsyncPostRepository",
    "AsyncDiskPostRepository",
    "AsyncOrderRepository",
    "AsyncDiskOrderRepository",
    "AsyncSiteSettingsRepository",
    "AsyncDiskSiteSettingsRepository",
    "StoreError",
    "NotFound",
    "AuthFailure",
    "IOFailure",
    "ValidationFailure",
]
