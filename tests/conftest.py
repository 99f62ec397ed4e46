"""Pytest configuration and fixtures for artisan-sync.

Every test runs in an empty temporary working directory with the memory
store backend selected, so no .env file or real credentials are picked up.
"""

import json
from pathlib import Path

import pytest

from artisan_sync.application.dtos.sync import Dataset
from artisan_sync.core.config import get_settings
from artisan_sync.infrastructure.store.memory_store import InMemoryDocumentStore

_ENV_VARS = (
    "DEBUG",
    "ARTISANS_PATH",
    "REVIEWS_PATH",
    "ARTISANS_COLLECTION",
    "REVIEWS_COLLECTION",
    "STORE_BACKEND",
    "FIREBASE_SERVICE_ACCOUNT_KEY",
    "FIREBASE_SERVICE_ACCOUNT_PATH",
    "FIRESTORE_TIMEOUT_SECONDS",
    "FIRESTORE_PAGE_SIZE",
)

ARTISANS = [
    {"id": "a1", "name": "Amina", "craftType": "pottery", "rating": 4.5, "city": "Fez"},
    {"id": "a2", "name": "Karim", "craftType": "weaving", "rating": 4},
    {"id": "a3", "name": "Layla", "craftType": "carpentry", "rating": 5, "tags": ["oak"]},
]

REVIEWS = [
    {"id": "r1", "artisanId": "a1", "rating": 4, "comment": "Great"},
    {"id": "r2", "artisanId": "a2", "rating": 5},
    {"id": "r3", "artisanId": "a1", "rating": 3},
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Clean settings env, memory backend, cwd in tmp_path; settings cache reset."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("STORE_BACKEND", "memory")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def dataset() -> Dataset:
    return Dataset(artisans=tuple(ARTISANS), reviews=tuple(REVIEWS))


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def dataset_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write artisans.json and reviews.json into the working directory."""
    artisans_path = tmp_path / "artisans.json"
    reviews_path = tmp_path / "reviews.json"
    artisans_path.write_text(json.dumps({"artisans": ARTISANS}), encoding="utf-8")
    reviews_path.write_text(json.dumps({"reviews": REVIEWS}), encoding="utf-8")
    return artisans_path, reviews_path
