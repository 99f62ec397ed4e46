"""Tool configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The store backend name is validated at
load time; credentials are checked when the store is built and dataset
paths are resolved when the datasets are loaded.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tool settings loaded from environment and .env.

    All settings are optional with defaults. validate_backend rejects
    unknown store backends. Firestore credentials are only checked when
    the store is built, so usage works without them.
    """

    debug: bool = False

    # Input datasets: {"artisans": [...]} and {"reviews": [...]}
    artisans_path: str = "artisans.json"
    reviews_path: str = "reviews.json"

    # Remote collections
    artisans_collection: str = "artisans"
    reviews_collection: str = "reviews"

    # Store: "firestore" (REST API) or "memory" (process-local, dry run)
    store_backend: str = "firestore"

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None  # Path to JSON file
    firestore_timeout_seconds: float = 30.0
    firestore_page_size: int = 300

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backend(self) -> "Settings":
        """Validate store backend name and listing page size."""
        if self.store_backend.lower() not in ("firestore", "memory"):
            raise ValueError(
                f"store_backend must be 'firestore' or 'memory', got: {self.store_backend!r}"
            )
        if self.firestore_page_size <= 0:
            raise ValueError("FIRESTORE_PAGE_SIZE must be a positive integer")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached tool settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
