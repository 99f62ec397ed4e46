"""Application services."""

from artisan_sync.application.services.dataset_loader import load_dataset
from artisan_sync.application.services.sync_service import DataSyncService

__all__ = ["DataSyncService", "load_dataset"]
