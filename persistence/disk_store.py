from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from json_store import atomic_write_json, read_json

from .errors import IOFailure, NotFound
from .interfaces import KeyValueDocumentStore
from .locks import GLOBAL_PATH_LOCKS

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores named JSON documents as `<base_dir>/<name>.json`.

    - A missing document loads as a copy of its configured default, which is
      written back so later loads see it.
    - Writes are atomic; a failed write leaves the previous file untouched.
    - Read/write/decode errors surface as IOFailure.
    """

    def __init__(self, base_dir: Path, defaults: Mapping[str, Any] | None = None):
        self._base_dir = base_dir
        self._defaults = dict(defaults or {})

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, name: str) -> Path:
        return self._base_dir / f"{name}.json"

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def initialize(self) -> list[str]:
        """Write every configured default that is not persisted yet."""
        created: list[str] = []
        for name, default in self._defaults.items():
            path = self.path_for(name)
            with GLOBAL_PATH_LOCKS.lock_for(path):
                if path.exists():
                    continue
                self._write(path, copy.deepcopy(default))
            created.append(name)
        if created:
            logger.info("Initialized default documents in %s: %s", self._base_dir, ", ".join(created))
        return created

    def load(self, name: str) -> Any:
        path = self.path_for(name)
        with GLOBAL_PATH_LOCKS.lock_for(path):
            try:
                raw = read_json(path)
            except (OSError, ValueError) as e:
                logger.error("Failed to read %s: %s", path, e)
                raise IOFailure(str(e)) from e
            if raw is not None:
                return raw
            if name not in self._defaults:
                raise NotFound(f"Document {name!r} not found")
            doc = copy.deepcopy(self._defaults[name])
            self._write(path, doc)
            return copy.deepcopy(doc)

    def save(self, name: str, doc: Any) -> None:
        path = self.path_for(name)
        with GLOBAL_PATH_LOCKS.lock_for(path):
            self._write(path, doc)

    def snapshot(self, names: Iterable[str]) -> dict[str, Any]:
        """Raw content of every persisted document among `names`, keyed by name."""
        out: dict[str, Any] = {}
        for name in names:
            path = self.path_for(name)
            with GLOBAL_PATH_LOCKS.lock_for(path):
                try:
                    raw = read_json(path)
                except (OSError, ValueError) as e:
                    logger.error("Failed to read %s: %s", path, e)
                    raise IOFailure(str(e)) from e
            if raw is not None:
                out[name] = raw
        return out

    def _write(self, path: Path, doc: Any) -> None:
        try:
            atomic_write_json(path, doc)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write %s: %s", path, e)
            raise IOFailure(str(e)) from e
