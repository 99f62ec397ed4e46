"""Load the artisans and reviews JSON datasets from the local filesystem.

Each file holds one object with a single list under a fixed key:
{"artisans": [...]} and {"reviews": [...]}. Records are passed through
verbatim; nothing beyond the envelope shape is checked here.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from artisan_sync.application.dtos.sync import Dataset
from artisan_sync.core.config import Settings, get_settings
from artisan_sync.domain.exceptions import DatasetLoadException

ARTISANS_KEY = "artisans"
REVIEWS_KEY = "reviews"


def load_collection(path: str | Path, key: str) -> tuple[dict[str, Any], ...]:
    """Read one dataset file and return the list stored under key.

    Raises:
        DatasetLoadException: File missing or unreadable, invalid JSON,
            top level not an object, key missing, or value not a list.
    """
    display = str(path)
    resolved = Path(path).expanduser()
    if not resolved.is_file():
        raise DatasetLoadException(display, "file not found")
    try:
        with resolved.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetLoadException(display, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetLoadException(display, str(e)) from e
    if not isinstance(data, dict):
        raise DatasetLoadException(display, "top-level JSON value must be an object")
    if key not in data:
        raise DatasetLoadException(display, f"missing top-level key {key!r}")
    records = data[key]
    if not isinstance(records, list):
        raise DatasetLoadException(display, f"{key!r} must be a list")
    return tuple(records)


def load_dataset(settings: Settings | None = None) -> Dataset:
    """Eagerly load both datasets configured in settings."""
    s = settings or get_settings()
    return Dataset(
        artisans=load_collection(s.artisans_path, ARTISANS_KEY),
        reviews=load_collection(s.reviews_path, REVIEWS_KEY),
    )
