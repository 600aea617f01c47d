from __future__ import annotations

import threading
from pathlib import Path


class LockRegistry:
    """
    Hands out one stable `threading.Lock` per key.

    Two registries use it: file paths (keys are resolved so aliases of one file
    share a lock) guard single reads and writes in the disk store, and
    collection names guard whole append / remove sequences so id allocation
    stays linear per collection.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, key: str | Path) -> threading.Lock:
        norm = str(key.resolve()) if isinstance(key, Path) else key
        with self._guard:
            lock = self._locks.get(norm)
            if lock is None:
                lock = threading.Lock()
                self._locks[norm] = lock
            return lock


# Guards individual file reads/writes.
GLOBAL_PATH_LOCKS = LockRegistry()

# Guards whole load-modify-save sequences on one collection.
GLOBAL_COLLECTION_LOCKS = LockRegistry()
