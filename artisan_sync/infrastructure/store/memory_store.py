"""Process-local document store for dry runs and tests."""

from __future__ import annotations

import copy
import logging
from typing import Any

from artisan_sync.infrastructure.store.protocol import StoredDocument

logger = logging.getLogger(__name__)


class InMemoryDocumentStore:
    """Dict-of-dicts store with the same upsert/list/delete semantics as Firestore.

    Records are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self, initial: dict[str, dict[str, dict[str, Any]]] | None = None) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = copy.deepcopy(initial or {})
        self.closed = False

    async def upsert(self, collection: str, document_id: str, record: dict[str, Any]) -> None:
        self._collections.setdefault(collection, {})[document_id] = copy.deepcopy(record)

    async def list_all(self, collection: str) -> list[StoredDocument]:
        docs = self._collections.get(collection, {})
        return [
            StoredDocument(id=doc_id, data=copy.deepcopy(data))
            for doc_id, data in docs.items()
        ]

    async def delete(self, collection: str, document_id: str) -> None:
        self._collections.get(collection, {}).pop(document_id, None)

    async def aclose(self) -> None:
        if not self.closed:
            logger.debug(
                "In-memory store discarded (%s)",
                ", ".join(f"{name}={len(docs)}" for name, docs in self._collections.items()) or "empty",
            )
        self.closed = True

    def snapshot(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Return a deep copy of every collection (for inspection in tests and dry runs)."""
        return copy.deepcopy(self._collections)
