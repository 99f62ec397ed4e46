"""DTOs for sync operations (no dependency on the store implementation)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Dataset:
    """Input records loaded from the local JSON files. Read-only within a run."""

    artisans: tuple[dict[str, Any], ...] = ()
    reviews: tuple[dict[str, Any], ...] = ()


@dataclass(frozen=True)
class FailedItem:
    """One record or document that could not be written or deleted."""

    label: str
    reason: str


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one add batch or one delete phase.

    error is set when the batch could not run at all (e.g. enumeration
    failed before any delete was dispatched).
    """

    collection: str
    attempted: int = 0
    succeeded: int = 0
    failed: tuple[FailedItem, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.failed


@dataclass(frozen=True)
class DeleteAllResult:
    """Outcome of delete-all: reviews phase first, then artisans."""

    reviews: BatchResult
    artisans: BatchResult

    @property
    def ok(self) -> bool:
        return self.reviews.ok and self.artisans.ok


@dataclass(frozen=True)
class ArtisanLine:
    """Display fields of one stored artisan."""

    id: str
    name: Any = None
    craft_type: Any = None
    rating: Any = None


@dataclass(frozen=True)
class DataSummary:
    """What show found in the store.

    average_rating is None when there are no reviews.
    """

    artisans: tuple[ArtisanLine, ...] = field(default_factory=tuple)
    review_count: int = 0
    average_rating: float | None = None

    @property
    def artisan_count(self) -> int:
        return len(self.artisans)

    @property
    def average_display(self) -> str | None:
        """Average rounded to two decimals, e.g. '4.00'; None without reviews."""
        if self.average_rating is None:
            return None
        return f"{self.average_rating:.2f}"
