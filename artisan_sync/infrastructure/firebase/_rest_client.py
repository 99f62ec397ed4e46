"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import quote

import httpx

from artisan_sync.infrastructure.exceptions import DocumentStoreError
from artisan_sync.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_document,
)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"


def _document_url(path: str) -> str:
    """REST URL for a document or collection path (document ids percent-encoded)."""
    return f"{_BASE}/{quote(path, safe='/()')}"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    params: dict | None = None,
    access_token: str | None = None,
    not_found_ok: bool = False,
) -> dict | None:
    """Perform async HTTP request to Firestore REST API.

    404 returns None only when not_found_ok is set (deletes). Otherwise a
    404, e.g. a missing database, raises like any other non-2xx status.
    """
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method not in ("GET", "PATCH", "DELETE"):
        raise ValueError(f"Unsupported method: {method!r}")
    try:
        resp = await client.request(
            method, url, headers=headers, json=body, params=params
        )
    except httpx.HTTPError as e:
        raise DocumentStoreError(url, f"{type(e).__name__}: {e}") from e
    if resp.status_code == 404 and not_found_ok:
        return None
    if resp.status_code not in (200, 204):
        raise DocumentStoreError(
            url, _error_message(resp), status_code=resp.status_code
        )
    if method == "DELETE":
        return {}
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


def _error_message(resp: httpx.Response) -> str:
    """Extract the Firestore error message from a failed response, if any."""
    try:
        payload = resp.json()
    except ValueError:
        return f"HTTP {resp.status_code}"
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return f"HTTP {resp.status_code}: {error['message']}"
    return f"HTTP {resp.status_code}"


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    async def set(self, data: dict[str, Any]) -> None:
        """Create or overwrite the document (PATCH with full replace)."""
        await _request_async(
            self._client._http,
            _document_url(self._path),
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
        )

    async def delete(self) -> None:
        """Delete the document. Idempotent if document is already missing (404)."""
        await _request_async(
            self._client._http,
            _document_url(self._path),
            method="DELETE",
            access_token=await self._client.get_token(),
            not_found_ok=True,
        )


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(
            self._client, f"{self._path}/{document_id}"
        )

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """List every document in the collection, following nextPageToken."""
        url = _document_url(self._path)
        page_token: str | None = None
        while True:
            params: dict[str, Any] = {"pageSize": self._client.page_size}
            if page_token:
                params["pageToken"] = page_token
            out = await _request_async(
                self._client._http,
                url,
                params=params,
                access_token=await self._client.get_token(),
            )
            for doc in out.get("documents", []):
                name = doc.get("name", "")
                doc_id = name.split("/")[-1] if name else ""
                yield DocumentSnapshot(doc_id, decode_document(doc.get("fields")))
            page_token = out.get("nextPageToken")
            if not page_token:
                return


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        page_size: int = 300,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._root = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None
        self.page_size = page_size

    @property
    def project_id(self) -> str:
        return self._project_id

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._root}/{collection_id}")
