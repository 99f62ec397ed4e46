"""Firestore integration over the REST API."""

from artisan_sync.infrastructure.firebase._rest_client import FirestoreRESTClient
from artisan_sync.infrastructure.firebase.client import create_firestore_client

__all__ = [
    "FirestoreRESTClient",
    "create_firestore_client",
]
