"""Generic async document store interface and the in-memory backend.

The application only ever needs four operations against a collection:
list everything, get one by id, create with a generated id, delete by id.
Filtering and searching happen in application code after a bulk fetch.
"""
from __future__ import annotations

import copy
import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

from mealboard.infra.errors import DocumentNotFound

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


def new_document_id() -> str:
    return uuid.uuid4().hex[:20]


def _strip_id(data: Document) -> Document:
    return {k: v for k, v in data.items() if k != "id"}


class DocumentStore:
    """Base class for document store backends."""

    async def list(self, collection: str) -> List[Document]:
        raise NotImplementedError

    async def get(self, collection: str, doc_id: str) -> Document:
        raise NotImplementedError

    async def create(self, collection: str, data: Document) -> str:
        raise NotImplementedError

    async def delete(self, collection: str, doc_id: str) -> None:
        raise NotImplementedError

    async def close(self) -> None:
        return None


class InMemoryDocumentStore(DocumentStore):
    """Process-local store, insertion ordered. Used by tests and STORE_BACKEND=memory."""

    def __init__(self, seed: Optional[Dict[str, Iterable[Document]]] = None):
        self._collections: Dict[str, Dict[str, Document]] = {}
        for name, docs in (seed or {}).items():
            bucket = self._collections.setdefault(name, {})
            for doc in docs:
                doc_id = str(doc.get("id") or new_document_id())
                bucket[doc_id] = _strip_id(copy.deepcopy(doc))

    async def list(self, collection: str) -> List[Document]:
        bucket = self._collections.get(collection, {})
        return [{"id": doc_id, **copy.deepcopy(doc)} for doc_id, doc in bucket.items()]

    async def get(self, collection: str, doc_id: str) -> Document:
        bucket = self._collections.get(collection, {})
        if doc_id not in bucket:
            raise DocumentNotFound(collection, doc_id)
        return {"id": doc_id, **copy.deepcopy(bucket[doc_id])}

    async def create(self, collection: str, data: Document) -> str:
        doc_id = new_document_id()
        self._collections.setdefault(collection, {})[doc_id] = _strip_id(copy.deepcopy(data))
        logger.debug("Created %s/%s", collection, doc_id)
        return doc_id

    async def delete(self, collection: str, doc_id: str) -> None:
        # deleting a missing document is a no-op, like the remote store
        self._collections.get(collection, {}).pop(doc_id, None)
        logger.debug("Deleted %s/%s", collection, doc_id)


__all__ = ['Document', 'DocumentStore', 'InMemoryDocumentStore', 'new_document_id']
