"""Infrastructure exceptions for document store operations.

Store errors extend ArtisanSyncException so the sync service can log
them the same way as domain errors.
"""

from artisan_sync.domain.exceptions import ArtisanSyncException


class DocumentStoreError(ArtisanSyncException):
    """A request to the document store failed (HTTP error or transport failure)."""

    def __init__(
        self,
        path: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        details: dict = {"path": path, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Document store request failed for {path}: {reason}",
            "STORE_REQUEST_ERROR",
            details,
        )
        self.status_code = status_code
