from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from .defaults import MINIMAL_SITE_SETTINGS, SITE_SETTINGS
from .errors import IOFailure, ValidationFailure
from .interfaces import KeyValueDocumentStore

logger = logging.getLogger(__name__)


class SiteSettingsRepository(Protocol):
    def get(self) -> dict[str, Any]:
        ...

    def replace(self, new_settings: Mapping[str, Any]) -> None:
        ...


class DiskSiteSettingsRepository(SiteSettingsRepository):
    """
    The singleton settings document. Replaced wholesale, never merged.

    When nothing is persisted, `get` answers with the minimal default
    (site name and description only) without writing it.
    """

    def __init__(self, store: KeyValueDocumentStore):
        self._store = store

    def get(self) -> dict[str, Any]:
        if not self._store.exists(SITE_SETTINGS):
            return dict(MINIMAL_SITE_SETTINGS)
        doc = self._store.load(SITE_SETTINGS)
        if not isinstance(doc, dict):
            raise IOFailure(f"Document {SITE_SETTINGS!r} is not a JSON object")
        return doc

    def replace(self, new_settings: Mapping[str, Any]) -> None:
        if not isinstance(new_settings, Mapping):
            raise ValidationFailure("settings must be a JSON object")
        self._store.save(SITE_SETTINGS, dict(new_settings))
        logger.info("Replaced site settings (%d keys)", len(new_settings))
