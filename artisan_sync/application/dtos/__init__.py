"""Application DTOs: plain data passed between services and the CLI."""

from artisan_sync.application.dtos.sync import (
    ArtisanLine,
    BatchResult,
    DataSummary,
    Dataset,
    DeleteAllResult,
    FailedItem,
)

__all__ = [
    "ArtisanLine",
    "BatchResult",
    "DataSummary",
    "Dataset",
    "DeleteAllResult",
    "FailedItem",
]
