"""Domain: exceptions shared by the loader, the sync service and the CLI."""

from artisan_sync.domain.exceptions import (
    ArtisanSyncException,
    DatasetLoadException,
    InvalidRecordException,
    StoreNotConfiguredException,
)

__all__ = [
    "ArtisanSyncException",
    "DatasetLoadException",
    "InvalidRecordException",
    "StoreNotConfiguredException",
]
