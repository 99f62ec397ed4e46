"""Firestore-backed document store (implements DocumentStoreProtocol)."""

from __future__ import annotations

import logging
from typing import Any

from artisan_sync.infrastructure.firebase._rest_client import FirestoreRESTClient
from artisan_sync.infrastructure.store.protocol import StoredDocument

logger = logging.getLogger(__name__)


class FirestoreDocumentStore:
    """Document store over the Firestore REST client. Same contract as InMemoryDocumentStore."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        logger.debug("Using Firestore project %s", client.project_id)

    async def upsert(self, collection: str, document_id: str, record: dict[str, Any]) -> None:
        """Write the full record at document_id (PATCH without update mask)."""
        await self._client.collection(collection).document(document_id).set(record)

    async def list_all(self, collection: str) -> list[StoredDocument]:
        """Return every document in the collection across all pages."""
        return [
            StoredDocument(id=snapshot.id, data=snapshot.to_dict())
            async for snapshot in self._client.collection(collection).stream()
        ]

    async def delete(self, collection: str, document_id: str) -> None:
        await self._client.collection(collection).document(document_id).delete()

    async def aclose(self) -> None:
        await self._client.aclose()
