"""Document store abstraction and its backends."""

from artisan_sync.infrastructure.store.factory import DocumentStoreFactory
from artisan_sync.infrastructure.store.firestore_store import FirestoreDocumentStore
from artisan_sync.infrastructure.store.memory_store import InMemoryDocumentStore
from artisan_sync.infrastructure.store.protocol import (
    DocumentStoreProtocol,
    StoredDocument,
)

__all__ = [
    "DocumentStoreFactory",
    "DocumentStoreProtocol",
    "FirestoreDocumentStore",
    "InMemoryDocumentStore",
    "StoredDocument",
]
