"""Sync operations between the local datasets and the document store.

Add batches are sequential, one record at a time in input order, and
continue past per-record failures. delete_all clears reviews then artisans;
each phase deletes its documents concurrently, lets every delete settle,
and then reports. Nothing raised by the store escapes these methods.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any

from artisan_sync.application.dtos.sync import (
    ArtisanLine,
    BatchResult,
    DataSummary,
    Dataset,
    DeleteAllResult,
    FailedItem,
)
from artisan_sync.domain.exceptions import (
    ArtisanSyncException,
    InvalidRecordException,
)
from artisan_sync.infrastructure.store.protocol import DocumentStoreProtocol

logger = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, ArtisanSyncException):
        return exc.message
    return f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__


def record_id(record: Any, collection: str, label: str) -> str:
    """Return the store identifier of record.

    Raises:
        InvalidRecordException: Not an object, or 'id' missing, empty, not a
            string, or not a valid Firestore document id.
    """
    doc_id = record.get("id") if isinstance(record, dict) else None
    if not isinstance(doc_id, str) or not doc_id or "/" in doc_id or doc_id in (".", ".."):
        raise InvalidRecordException(collection, label)
    return doc_id


def _artisan_label(record: Any) -> str:
    if isinstance(record, dict):
        return str(record.get("name") or record.get("id") or "<unnamed>")
    return repr(record)


def _review_label(record: Any) -> str:
    if isinstance(record, dict):
        return str(record.get("id") or "<no id>")
    return repr(record)


class DataSyncService:
    """Moves artisan and review records into, out of, and back from a document store."""

    def __init__(
        self,
        store: DocumentStoreProtocol,
        dataset: Dataset,
        *,
        artisans_collection: str = "artisans",
        reviews_collection: str = "reviews",
    ) -> None:
        self._store = store
        self._dataset = dataset
        self.artisans_collection = artisans_collection
        self.reviews_collection = reviews_collection

    async def _add_batch(
        self,
        collection: str,
        records: Sequence[Any],
        kind: str,
        label_for: Callable[[Any], str],
    ) -> BatchResult:
        logger.info("Adding %s %s to '%s'...", len(records), kind, collection)
        succeeded = 0
        failed: list[FailedItem] = []
        for record in records:
            label = label_for(record)
            try:
                doc_id = record_id(record, collection, label)
                await self._store.upsert(collection, doc_id, record)
            except ArtisanSyncException as e:
                logger.error("Failed to add %s %s: %s", kind, label, e.message)
                failed.append(FailedItem(label, e.message))
                continue
            except Exception as e:
                logger.exception("Failed to add %s %s", kind, label)
                failed.append(FailedItem(label, _describe(e)))
                continue
            succeeded += 1
            logger.info("Added %s: %s", kind, label)
        logger.info(
            "Finished adding %s: %s written, %s failed", kind, succeeded, len(failed)
        )
        return BatchResult(
            collection=collection,
            attempted=len(records),
            succeeded=succeeded,
            failed=tuple(failed),
        )

    async def add_artisans(self) -> BatchResult:
        """Upsert every artisan under its id, in input order."""
        return await self._add_batch(
            self.artisans_collection, self._dataset.artisans, "artisan", _artisan_label
        )

    async def add_reviews(self) -> BatchResult:
        """Upsert every review under its id, in input order."""
        return await self._add_batch(
            self.reviews_collection, self._dataset.reviews, "review", _review_label
        )

    async def add_all(self) -> tuple[BatchResult, BatchResult]:
        """Artisans first, then reviews; never concurrently."""
        artisans = await self.add_artisans()
        reviews = await self.add_reviews()
        return artisans, reviews

    async def _clear_collection(self, collection: str) -> BatchResult:
        try:
            docs = await self._store.list_all(collection)
        except Exception as e:
            logger.exception("Failed to list '%s' for deletion", collection)
            return BatchResult(collection=collection, error=_describe(e))

        outcomes = await asyncio.gather(
            *(self._store.delete(collection, doc.id) for doc in docs),
            return_exceptions=True,
        )
        failed = [
            FailedItem(doc.id, _describe(outcome))
            for doc, outcome in zip(docs, outcomes)
            if isinstance(outcome, BaseException)
        ]
        if failed:
            logger.error(
                "Failed to delete %s of %s documents from '%s': %s",
                len(failed),
                len(docs),
                collection,
                "; ".join(f"{item.label}: {item.reason}" for item in failed),
            )
        else:
            logger.info("Deleted all %s documents from '%s'", len(docs), collection)
        return BatchResult(
            collection=collection,
            attempted=len(docs),
            succeeded=len(docs) - len(failed),
            failed=tuple(failed),
        )

    async def delete_all(self) -> DeleteAllResult:
        """Delete every review, then every artisan. A failed phase does not stop the next."""
        logger.info("Deleting all data...")
        reviews = await self._clear_collection(self.reviews_collection)
        artisans = await self._clear_collection(self.artisans_collection)
        result = DeleteAllResult(reviews=reviews, artisans=artisans)
        if result.ok:
            logger.info("All data deleted")
        else:
            logger.warning("Delete finished with errors; some documents may remain")
        return result

    async def show(self) -> DataSummary | None:
        """Print artisans and the review count/average. Returns None if a read failed."""
        logger.info("Reading stored data...")
        try:
            artisan_docs = await self._store.list_all(self.artisans_collection)
            lines = tuple(
                ArtisanLine(
                    id=doc.id,
                    name=doc.data.get("name"),
                    craft_type=doc.data.get("craftType"),
                    rating=doc.data.get("rating"),
                )
                for doc in artisan_docs
            )
            print(f"\nArtisans: {len(lines)}")
            for line in lines:
                print(f"- {line.name} ({line.craft_type}) - rating: {line.rating}/5")

            review_docs = await self._store.list_all(self.reviews_collection)
            print(f"\nReviews: {len(review_docs)}")
            average = None
            if review_docs:
                total = sum(doc.data["rating"] for doc in review_docs)
                average = total / len(review_docs)
            summary = DataSummary(
                artisans=lines,
                review_count=len(review_docs),
                average_rating=average,
            )
            if summary.average_display is not None:
                print(f"Average rating: {summary.average_display}/5")
        except Exception:
            logger.exception("Failed to show data")
            return None
        return summary
