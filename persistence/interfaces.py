from __future__ import annotations

from typing import Any, Protocol


class KeyValueDocumentStore(Protocol):
    """
    Minimal DB-friendly interface: JSON-like documents persisted under a name.
    """

    def exists(self, name: str) -> bool:
        """Whether a document has been persisted under `name`."""
        ...

    def load(self, name: str) -> Any:
        """Load the full document, falling back to the configured default."""
        ...

    def save(self, name: str, doc: Any) -> None:
        """Persist the full document atomically, replacing any previous content."""
        ...
