"""Document store protocol (DIP). Implementations: FirestoreDocumentStore, InMemoryDocumentStore."""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class StoredDocument:
    """A document read back from a collection (identifier + field data)."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


class DocumentStoreProtocol(Protocol):
    """Protocol for collection-based document stores.

    Writes are upserts with last-write-wins: there is no separate insert vs
    update path and no "already exists" error.
    """

    async def upsert(self, collection: str, document_id: str, record: dict[str, Any]) -> None:
        """Create or fully overwrite the document at document_id."""
        ...

    async def list_all(self, collection: str) -> list[StoredDocument]:
        """Return every document in the collection (order not guaranteed)."""
        ...

    async def delete(self, collection: str, document_id: str) -> None:
        """Delete the document. Missing documents are not an error."""
        ...

    async def aclose(self) -> None:
        """Release connections held by the store."""
        ...
