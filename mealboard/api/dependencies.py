"""Store selection and the repository dependency shared by pages and API routes."""
import logging
from typing import Optional

from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.document_store import DocumentStore, InMemoryDocumentStore
from mealboard.infra.http_store import HttpDocumentStore
from mealboard.infra.json_store import JsonFileDocumentStore
from mealboard.utilities.config import DATA_DIR, STORE_BACKEND, STORE_TIMEOUT, STORE_URL

logger = logging.getLogger(__name__)

_repository: Optional[MealRepository] = None


def build_store(backend: str = STORE_BACKEND) -> DocumentStore:
    if backend == "http":
        logger.info("Using remote document store at %s", STORE_URL)
        return HttpDocumentStore(STORE_URL, timeout=STORE_TIMEOUT)
    if backend == "memory":
        logger.info("Using in-memory document store")
        return InMemoryDocumentStore()
    if backend != "json":
        raise ValueError(f"Unknown STORE_BACKEND {backend!r} (expected json, http or memory)")
    logger.info("Using JSON document store in %s", DATA_DIR)
    return JsonFileDocumentStore(DATA_DIR)


def get_repository() -> MealRepository:
    """FastAPI dependency; tests replace it through app.dependency_overrides."""
    global _repository
    if _repository is None:
        _repository = MealRepository(build_store())
    return _repository


async def close_repository() -> None:
    global _repository
    if _repository is not None:
        await _repository.close()
        _repository = None
