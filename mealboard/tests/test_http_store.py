"""
Tests for the REST document store, served by an httpx.MockTransport.
"""

import json
from urllib.parse import unquote

import httpx
import pytest

from mealboard.infra.errors import DocumentNotFound, StoreError
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.http_store import HttpDocumentStore
from mealboard.logic.calendar.view import CalendarView

BASE_URL = "http://store.test/v1"


class FakeRemote:
    """Minimal in-process stand-in for the remote collection API.

    Routes on the raw request path the way a web server does: dot segments are
    resolved first, then each segment is percent-decoded.
    """

    def __init__(self):
        self.collections = {
            "menus": {"m-1": {"name": "Italian Night"}},
            "recipes": {"r-1": {"name": "Spaghetti Carbonara"}},
            "calendar": {},
        }
        self.requests = []
        self.next_id = 1

    def __call__(self, request: httpx.Request) -> httpx.Response:
        raw = request.url.raw_path.decode().split("?")[0]
        self.requests.append((request.method, raw))
        segments = []
        for segment in raw.removeprefix("/v1/").split("/"):
            if segment == "..":
                segments = segments[:-1]
            elif segment not in ("", "."):
                segments.append(unquote(segment))
        if not segments or len(segments) > 2:
            return httpx.Response(404, json={"detail": "not found"})
        bucket = self.collections.setdefault(segments[0], {})
        if len(segments) == 1 and request.method == "GET":
            return httpx.Response(200, json={"documents": [{"id": k, **v} for k, v in bucket.items()]})
        if len(segments) == 1 and request.method == "POST":
            doc_id = f"doc-{self.next_id}"
            self.next_id += 1
            bucket[doc_id] = json.loads(request.content)
            return httpx.Response(201, json={"id": doc_id})
        doc_id = segments[1]
        if doc_id not in bucket:
            return httpx.Response(404, json={"detail": "not found"})
        if request.method == "DELETE":
            del bucket[doc_id]
            return httpx.Response(204)
        return httpx.Response(200, json=bucket[doc_id])


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def remote():
    return FakeRemote()


@pytest.fixture
def store(remote):
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(remote))
    return HttpDocumentStore(BASE_URL, client=client)


def failing_store(handler):
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return HttpDocumentStore(BASE_URL, client=client)


# -----------------------------------------------------------------------------
# Tests
# -----------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_list_accepts_wrapped_documents(store, remote):
    docs = await store.list("menus")
    assert docs == [{"id": "m-1", "name": "Italian Night"}]
    assert remote.requests == [("GET", "/v1/menus")]


@pytest.mark.asyncio
async def test_list_accepts_bare_array():
    store = failing_store(lambda request: httpx.Response(200, json=[{"id": "a"}, {"name": "no id"}]))
    assert await store.list("menus") == [{"id": "a"}]


@pytest.mark.asyncio
async def test_get_and_not_found(store):
    doc = await store.get("menus", "m-1")
    assert doc["id"] == "m-1"
    with pytest.raises(DocumentNotFound):
        await store.get("menus", "m-404")


@pytest.mark.asyncio
async def test_create_then_delete(store, remote):
    doc_id = await store.create("calendar", {"id": "ignored", "date": "2024-03-10", "menuId": "m-1"})
    assert doc_id == "doc-1"
    assert remote.collections["calendar"][doc_id] == {"date": "2024-03-10", "menuId": "m-1"}

    await store.delete("calendar", doc_id)
    # a second delete hits 404 and is treated as done
    await store.delete("calendar", doc_id)
    assert remote.collections["calendar"] == {}


@pytest.mark.asyncio
async def test_server_error_raises_store_error():
    store = failing_store(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(StoreError) as exc:
        await store.list("menus")
    assert exc.value.collection == "menus"


@pytest.mark.asyncio
async def test_transport_error_raises_store_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    store = failing_store(handler)
    with pytest.raises(StoreError):
        await store.get("menus", "m-1")


@pytest.mark.asyncio
async def test_create_without_id_raises_store_error():
    store = failing_store(lambda request: httpx.Response(201, json={}))
    with pytest.raises(StoreError):
        await store.create("calendar", {"date": "2024-03-10", "menuId": "m-1"})


@pytest.mark.asyncio
async def test_close_closes_client(store):
    await store.close()
    assert store._client.is_closed


@pytest.mark.asyncio
async def test_ids_cannot_leave_their_collection(store, remote):
    with pytest.raises(DocumentNotFound):
        await store.get("menus", "../recipes/r-1")
    with pytest.raises(DocumentNotFound):
        await store.get("menus", "..")
    await store.delete("menus", "../recipes/r-1")
    assert remote.collections["recipes"] == {"r-1": {"name": "Spaghetti Carbonara"}}
    assert all(not path.startswith("/v1/recipes") for _, path in remote.requests)


@pytest.mark.asyncio
async def test_reserved_characters_stay_in_the_id(store, remote):
    remote.collections["menus"]["a?b#c"] = {"name": "Odd id"}
    doc = await store.get("menus", "a?b#c")
    assert doc["name"] == "Odd id"
    assert remote.requests[-1] == ("GET", "/v1/menus/a%3Fb%23c")


@pytest.mark.asyncio
async def test_calendar_cannot_reference_a_recipe(store, remote):
    view = CalendarView(MealRepository(store), pivot="2024-03-10")
    entry = await view.add_entry("2024-03-10", "../recipes/r-1")
    assert entry is None
    assert view.entries == []
    assert all(not path.startswith("/v1/recipes") for _, path in remote.requests)
