"""Document store factory: creates a Firestore or in-memory backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artisan_sync.infrastructure.store.protocol import DocumentStoreProtocol

if TYPE_CHECKING:
    from artisan_sync.core.config import Settings


class DocumentStoreFactory:
    """Factory for document store instances based on configuration."""

    @staticmethod
    def create_document_store(settings: "Settings | None" = None) -> DocumentStoreProtocol:
        """Create document store from settings.

        Args:
            settings: Tool settings; if None, uses get_settings().

        Returns:
            FirestoreDocumentStore or InMemoryDocumentStore.

        Raises:
            StoreNotConfiguredException: Unknown backend or unusable credentials.
        """
        from artisan_sync.core.config import get_settings
        from artisan_sync.domain.exceptions import StoreNotConfiguredException

        s = settings or get_settings()
        backend = s.store_backend.lower()

        if backend == "memory":
            from artisan_sync.infrastructure.store.memory_store import (
                InMemoryDocumentStore,
            )

            return InMemoryDocumentStore()
        if backend == "firestore":
            from artisan_sync.infrastructure.firebase.client import (
                create_firestore_client,
            )
            from artisan_sync.infrastructure.store.firestore_store import (
                FirestoreDocumentStore,
            )

            return FirestoreDocumentStore(create_firestore_client(s))
        raise StoreNotConfiguredException(
            f"unknown store backend {s.store_backend!r} (use 'firestore' or 'memory')"
        )
