"""Domain exceptions for the artisan sync tool.

Defines exceptions for dataset and record problems. These are independent
of the document store; the CLI maps them to console output and exit codes.
"""

from typing import Any


class ArtisanSyncException(Exception):
    """Base exception for all artisan sync errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. path, record_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class DatasetLoadException(ArtisanSyncException):
    """Raised when an input dataset file is missing, unreadable, or malformed."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize with the dataset path and what went wrong.

        Args:
            path: Path of the dataset file as configured.
            reason: Short description of the failure.
        """
        super().__init__(
            f"Cannot load dataset {path}: {reason}",
            "DATASET_LOAD_ERROR",
            {"path": path, "reason": reason},
        )


class InvalidRecordException(ArtisanSyncException):
    """Raised when a record cannot be addressed in the store (no usable id)."""

    def __init__(self, collection: str, label: str) -> None:
        super().__init__(
            f"Record {label!r} in {collection} has no usable 'id'",
            "INVALID_RECORD",
            {"collection": collection, "label": label},
        )


class StoreNotConfiguredException(ArtisanSyncException):
    """Raised when the document store backend cannot be built from settings."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Document store is not configured: {reason}",
            "STORE_NOT_CONFIGURED",
            {"reason": reason},
        )
