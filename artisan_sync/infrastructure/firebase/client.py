"""Firestore client construction (REST-based, no firebase-admin).

Built once per process from either FIREBASE_SERVICE_ACCOUNT_KEY (JSON string)
or FIREBASE_SERVICE_ACCOUNT_PATH (file path). The credentials file is
consumed as-is; only 'project_id' is read from it directly.
"""

import json
import logging
from pathlib import Path

from artisan_sync.core.config import Settings, get_settings
from artisan_sync.domain.exceptions import StoreNotConfiguredException
from artisan_sync.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    _get_credentials,
)

logger = logging.getLogger(__name__)


def _load_key_dict(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path."""
    key_json = settings.firebase_service_account_key.get_secret_value() if settings.firebase_service_account_key else None
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise StoreNotConfiguredException(
                "FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON"
            ) from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve() if not Path(path).is_absolute() else Path(path)
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise StoreNotConfiguredException(
                    f"service account file {path} is not valid JSON"
                ) from e
    return None


def create_firestore_client(settings: Settings | None = None) -> FirestoreRESTClient:
    """Build a Firestore REST client from service account settings.

    Args:
        settings: Tool settings; if None, uses get_settings().

    Returns:
        A client owning its own httpx connection pool (close with aclose()).

    Raises:
        StoreNotConfiguredException: No credentials, malformed JSON,
            missing 'project_id', or google-auth rejected the key.
    """
    s = settings or get_settings()
    key_dict = _load_key_dict(s)
    if not key_dict:
        raise StoreNotConfiguredException(
            "no Firebase service account credentials found "
            "(set FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH)"
        )

    project_id = key_dict.get("project_id")
    if not project_id:
        raise StoreNotConfiguredException("service account JSON missing 'project_id'")

    try:
        cred = _get_credentials(key_dict)
    except ValueError as e:
        raise StoreNotConfiguredException(f"invalid service account key: {e}") from e
    logger.debug("Firestore client created for project %s", project_id)
    return FirestoreRESTClient(
        project_id,
        cred,
        timeout=s.firestore_timeout_seconds,
        page_size=s.firestore_page_size,
    )
