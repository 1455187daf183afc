"""Remote document store reached over a small REST API with httpx.

Wire format:
    GET    {base}/{collection}        -> [doc, ...]  or  {"documents": [doc, ...]}
    GET    {base}/{collection}/{id}   -> doc, 404 when missing
    POST   {base}/{collection}        -> {"id": "..."}
    DELETE {base}/{collection}/{id}   -> 2xx, 404 treated as already deleted
"""
from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote

import httpx

from mealboard.infra.document_store import Document, DocumentStore
from mealboard.infra.errors import DocumentNotFound, StoreError
from mealboard.utilities.config import STORE_TIMEOUT, STORE_URL

logger = logging.getLogger(__name__)


class HttpDocumentStore(DocumentStore):
    def __init__(self, base_url: str = STORE_URL, *, timeout: float = STORE_TIMEOUT,
                 client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def _request(self, method: str, path: str, *, collection: str, doc_id: str = "", **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise StoreError(f"{method} {path} failed: {e}", collection=collection, doc_id=doc_id) from e
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    @staticmethod
    def _document_path(collection: str, doc_id: str) -> Optional[str]:
        """Path of one document; None for ids that cannot name a document (empty, "." or "..")."""
        if doc_id in ("", ".", ".."):
            return None
        # reserved characters stay inside the id segment
        return f"/{collection}/{quote(doc_id, safe='')}"

    @staticmethod
    def _json(response: httpx.Response, *, collection: str, doc_id: str = ""):
        try:
            return response.json()
        except ValueError as e:
            raise StoreError(f"Invalid JSON from document store: {e}", collection=collection, doc_id=doc_id) from e

    @staticmethod
    def _raise_for_status(response: httpx.Response, *, collection: str, doc_id: str = "") -> None:
        if response.status_code >= 400:
            raise StoreError(
                f"Document store returned {response.status_code}: {response.text[:200]}",
                collection=collection, doc_id=doc_id,
            )

    async def list(self, collection: str) -> List[Document]:
        response = await self._request("GET", f"/{collection}", collection=collection)
        self._raise_for_status(response, collection=collection)
        payload = self._json(response, collection=collection)
        if isinstance(payload, dict):
            payload = payload.get("documents", [])
        if not isinstance(payload, list):
            raise StoreError("Expected a list of documents", collection=collection)
        return [doc for doc in payload if isinstance(doc, dict) and doc.get("id")]

    async def get(self, collection: str, doc_id: str) -> Document:
        path = self._document_path(collection, doc_id)
        if path is None:
            raise DocumentNotFound(collection, doc_id)
        response = await self._request("GET", path, collection=collection, doc_id=doc_id)
        if response.status_code == 404:
            raise DocumentNotFound(collection, doc_id)
        self._raise_for_status(response, collection=collection, doc_id=doc_id)
        doc = self._json(response, collection=collection, doc_id=doc_id)
        if not isinstance(doc, dict):
            raise StoreError("Expected a document object", collection=collection, doc_id=doc_id)
        doc.setdefault("id", doc_id)
        return doc

    async def create(self, collection: str, data: Document) -> str:
        body = {k: v for k, v in data.items() if k != "id"}
        response = await self._request("POST", f"/{collection}", collection=collection, json=body)
        self._raise_for_status(response, collection=collection)
        payload = self._json(response, collection=collection)
        doc_id = payload.get("id") if isinstance(payload, dict) else None
        if not doc_id:
            raise StoreError("Document store did not return an id", collection=collection)
        return str(doc_id)

    async def delete(self, collection: str, doc_id: str) -> None:
        path = self._document_path(collection, doc_id)
        if path is None:
            return
        response = await self._request("DELETE", path, collection=collection, doc_id=doc_id)
        if response.status_code == 404:
            logger.debug("%s/%s already deleted", collection, doc_id)
            return
        self._raise_for_status(response, collection=collection, doc_id=doc_id)

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ['HttpDocumentStore']
