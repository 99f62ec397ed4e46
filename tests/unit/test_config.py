"""Settings validation and environment loading."""

import pytest
from pydantic import ValidationError

from artisan_sync.core.config import Settings, get_settings


def test_defaults_with_memory_backend() -> None:
    s = get_settings()
    assert s.store_backend == "memory"
    assert s.artisans_path == "artisans.json"
    assert s.reviews_path == "reviews.json"
    assert (s.artisans_collection, s.reviews_collection) == ("artisans", "reviews")
    assert s.firestore_timeout_seconds == 30.0


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTISANS_PATH", "data/crafters.json")
    monkeypatch.setenv("REVIEWS_COLLECTION", "ratings")
    monkeypatch.setenv("DEBUG", "true")
    s = Settings()
    assert s.artisans_path == "data/crafters.json"
    assert s.reviews_collection == "ratings"
    assert s.debug is True


def test_dotenv_file_in_working_directory_is_read(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("STORE_BACKEND")
    (tmp_path / ".env").write_text("STORE_BACKEND=memory\nREVIEWS_PATH=r.json\n", encoding="utf-8")
    s = Settings()
    assert s.store_backend == "memory"
    assert s.reviews_path == "r.json"


def test_firestore_settings_load_without_credentials() -> None:
    s = Settings(store_backend="firestore")
    assert s.firebase_service_account_key is None
    assert s.firebase_service_account_path is None


def test_firestore_accepts_key_or_path() -> None:
    assert Settings(store_backend="firestore", firebase_service_account_path="key.json")
    s = Settings(store_backend="firestore", firebase_service_account_key='{"project_id": "p"}')
    assert s.firebase_service_account_key.get_secret_value() == '{"project_id": "p"}'


def test_unknown_backend_rejected() -> None:
    with pytest.raises(ValidationError, match="store_backend must be"):
        Settings(store_backend="postgres")


def test_page_size_must_be_positive() -> None:
    with pytest.raises(ValidationError, match="FIRESTORE_PAGE_SIZE"):
        Settings(store_backend="memory", firestore_page_size=0)
