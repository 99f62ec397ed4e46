"""Command-line entry point: artisan-sync <command>.

Usage:
    artisan-sync add        # artisans, then reviews
    artisan-sync artisans   # artisans only
    artisan-sync reviews    # reviews only
    artisan-sync delete     # delete every review, then every artisan
    artisan-sync show       # list artisans, count reviews, average rating

Settings come from the environment or .env (see artisan_sync.core.config).
Both datasets are loaded before the command is looked at, so a missing or
malformed dataset stops the run even for an unknown command. Once a command
has been dispatched the exit status is always 0; failures are logged only.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from artisan_sync.application.dtos.sync import Dataset
from artisan_sync.application.services.dataset_loader import load_dataset
from artisan_sync.application.services.sync_service import DataSyncService
from artisan_sync.core.config import Settings, get_settings
from artisan_sync.domain.exceptions import ArtisanSyncException
from artisan_sync.infrastructure.store.factory import DocumentStoreFactory
from artisan_sync.infrastructure.store.protocol import DocumentStoreProtocol
from artisan_sync.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)

USAGE = """
Usage: artisan-sync <command>

  add        Add all data (artisans, then reviews)
  artisans   Add artisans only
  reviews    Add reviews only
  delete     Delete all data (reviews, then artisans)
  show       Show stored data

Datasets: ARTISANS_PATH (default artisans.json), REVIEWS_PATH (default reviews.json)
Credentials: FIREBASE_SERVICE_ACCOUNT_PATH or FIREBASE_SERVICE_ACCOUNT_KEY
"""


async def _add(service: DataSyncService) -> None:
    await service.add_all()


async def _artisans(service: DataSyncService) -> None:
    await service.add_artisans()


async def _reviews(service: DataSyncService) -> None:
    await service.add_reviews()


async def _delete(service: DataSyncService) -> None:
    await service.delete_all()


async def _show(service: DataSyncService) -> None:
    await service.show()


COMMANDS: dict[str, Callable[[DataSyncService], Awaitable[None]]] = {
    "add": _add,
    "artisans": _artisans,
    "reviews": _reviews,
    "delete": _delete,
    "show": _show,
}


def print_usage() -> None:
    print(USAGE)


async def run_command(
    command: str,
    store: DocumentStoreProtocol,
    dataset: Dataset,
    settings: Settings,
) -> None:
    """Run one known command against store, then close the store."""
    service = DataSyncService(
        store,
        dataset,
        artisans_collection=settings.artisans_collection,
        reviews_collection=settings.reviews_collection,
    )
    try:
        await COMMANDS[command](service)
    finally:
        await store.aclose()


def run(argv: Sequence[str], store: DocumentStoreProtocol | None = None) -> int:
    """Execute the tool for argv (without program name) and return the exit status.

    Args:
        argv: Process arguments; only the first one is used.
        store: Document store to use instead of the configured backend.

    Returns:
        0 after usage or any dispatched command; 1 on a startup failure
        (invalid settings, unreadable dataset, unusable credentials).
    """
    load_dotenv(Path.cwd() / ".env")
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    setup_logging(settings.debug)

    try:
        dataset = load_dataset(settings)
    except ArtisanSyncException as e:
        logger.error("%s", e.message)
        return 1

    command = argv[0] if argv else None
    if command not in COMMANDS:
        print_usage()
        return 0

    if store is None:
        try:
            store = DocumentStoreFactory.create_document_store(settings)
        except ArtisanSyncException as e:
            logger.error("%s", e.message)
            return 1

    asyncio.run(run_command(command, store, dataset, settings))
    return 0


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
