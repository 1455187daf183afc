"""File-backed document store: one JSON array per collection under DATA_DIR."""
from __future__ import annotations

import asyncio
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List

from mealboard.infra.document_store import Document, DocumentStore, new_document_id
from mealboard.infra.errors import DocumentNotFound, StoreError
from mealboard.infra.paths import DATA_DIR, collection_file

logger = logging.getLogger(__name__)


def _read_collection(path: Path) -> List[Document]:
    if not path.exists():
        return []
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path.name} must hold a JSON array")
    return [doc for doc in data if isinstance(doc, dict)]


def _atomic_write(path: Path, docs: List[Document]) -> None:
    os.makedirs(path.parent, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(docs, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


class JsonFileDocumentStore(DocumentStore):
    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = Path(data_dir)
        self._write_lock = asyncio.Lock()

    async def _load(self, collection: str) -> List[Document]:
        path = collection_file(collection, self.data_dir)
        try:
            return await asyncio.to_thread(_read_collection, path)
        except (OSError, ValueError) as e:
            raise StoreError(f"Failed to read {path.name}: {e}", collection=collection) from e

    async def _save(self, collection: str, docs: List[Document]) -> None:
        path = collection_file(collection, self.data_dir)
        try:
            await asyncio.to_thread(_atomic_write, path, docs)
        except OSError as e:
            raise StoreError(f"Failed to write {path.name}: {e}", collection=collection) from e

    async def list(self, collection: str) -> List[Document]:
        docs = await self._load(collection)
        return [doc for doc in docs if doc.get("id")]

    async def get(self, collection: str, doc_id: str) -> Document:
        for doc in await self._load(collection):
            if str(doc.get("id")) == doc_id:
                return doc
        raise DocumentNotFound(collection, doc_id)

    async def create(self, collection: str, data: Document) -> str:
        doc_id = new_document_id()
        async with self._write_lock:
            docs = await self._load(collection)
            docs.append({"id": doc_id, **{k: v for k, v in data.items() if k != "id"}})
            await self._save(collection, docs)
        logger.debug("Created %s/%s in %s", collection, doc_id, self.data_dir)
        return doc_id

    async def delete(self, collection: str, doc_id: str) -> None:
        async with self._write_lock:
            docs = await self._load(collection)
            remaining = [doc for doc in docs if str(doc.get("id")) != doc_id]
            if len(remaining) != len(docs):
                await self._save(collection, remaining)
        logger.debug("Deleted %s/%s in %s", collection, doc_id, self.data_dir)


__all__ = ['JsonFileDocumentStore']
