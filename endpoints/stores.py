from __future__ import annotations

from persistence import (
    AsyncDiskOrderRepository,
    AsyncDiskPostRepository,
    AsyncDiskSiteSettingsRepository,
    DiskJsonDocumentStore,
    default_documents,
)
from persistence.paths import data_dir
from site_stats import StatsAggregator

# Built at import time from the current settings; tests reload this module
# after pointing DATA_DIR at a temp directory.
DOCUMENT_STORE = DiskJsonDocumentStore(data_dir(), default_documents())

POST_REPO = AsyncDiskPostRepository(DOCUMENT_STORE)
ORDER_REPO = AsyncDiskOrderRepository(DOCUMENT_STORE)
SITE_SETTINGS_REPO = AsyncDiskSiteSettingsRepository(DOCUMENT_STORE)

STATS = StatsAggregator(POST_REPO, ORDER_REPO)
