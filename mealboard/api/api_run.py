from contextlib import asynccontextmanager
from datetime import date as _date
from typing import Optional
from urllib.parse import urlencode
import logging

from fastapi import FastAPI, Request, Query, Form, Depends, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from mealboard.api.dependencies import close_repository, get_repository
from mealboard.api.routes import calendar as calendar_routes
from mealboard.api.routes import inventory as inventory_routes
from mealboard.api.routes import menus as menu_routes
from mealboard.api.routes.calendar import parse_pivot
from mealboard.events.event_helpers import publish_store_failure
from mealboard.events.web_observers import start as start_event_observers, get_events as get_web_events
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.errors import StoreError
from mealboard.logic.calendar.dates import format_date_key
from mealboard.logic.calendar.view import CalendarView
from mealboard.logic.diary.history import build_diary
from mealboard.logic.menus.details import MenuDetailsView
from mealboard.logic.menus.picker import AddMenuPicker
from mealboard.logic.menus.search import filter_menus, filter_recipes, recipe_categories
from mealboard.logic.shopping.list_builder import build_shopping_list
from mealboard.utilities.config import STATIC_DIR, TEMPLATES_DIR

logger = logging.getLogger("mealboard_app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    start_event_observers()
    logger.info("Diagnostic observers started")
    yield
    await close_repository()


app = FastAPI(title="Meal Board", lifespan=lifespan)

app.include_router(menu_routes.router)
app.include_router(calendar_routes.router)
app.include_router(inventory_routes.router)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _calendar_url(pivot: Optional[str] = None, **params) -> str:
    query = {k: v for k, v in {"pivot": pivot, **params}.items() if v}
    return "/calendar" + ("?" + urlencode(query) if query else "")


# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
@app.get("/menu", response_class=HTMLResponse)
async def menu_page(request: Request, q: str = Query(default=""), repo: MealRepository = Depends(get_repository)):
    menus, failed = [], False
    try:
        menus = await repo.list_menus()
    except StoreError as e:
        logger.error("Error fetching menus: %s", e)
        publish_store_failure("list_menus", e)
        failed = True
    return templates.TemplateResponse(
        request,
        "menus.html",
        {"menus": filter_menus(menus, q), "search_term": q, "total": len(menus), "load_failed": failed},
    )


@app.get("/calendar", response_class=HTMLResponse)
async def calendar_page(
    request: Request,
    pivot: Optional[str] = Query(default=None),
    add: Optional[str] = Query(default=None, description="Open the menu picker for this day"),
    q: str = Query(default=""),
    selected: str = Query(default=""),
    repo: MealRepository = Depends(get_repository),
):
    view = CalendarView(repo, pivot=parse_pivot(pivot))
    loaded = await view.load()

    picker = None
    add_day = parse_pivot(add)
    if add_day is not None:
        picker = await AddMenuPicker(repo, add_day).open()
        picker.search(q)
        picker.select(selected)

    return templates.TemplateResponse(
        request,
        "calendar.html",
        {
            "view": view,
            "cells": view.day_cells(),
            "pivot": format_date_key(view.current_week),
            "load_failed": not loaded,
            "picker": picker,
            "calendar_url": _calendar_url,
        },
    )


@app.post("/calendar/entries")
async def add_calendar_entry(date: str = Form(...), menu_id: str = Form(""),
                             repo: MealRepository = Depends(get_repository)):
    day = parse_pivot(date)
    if day is None:
        raise HTTPException(status_code=400, detail="Invalid date (expected YYYY-MM-DD)")
    view = CalendarView(repo, pivot=day)
    if menu_id:
        await view.add_entry(day, menu_id)
    return RedirectResponse(url=_calendar_url(format_date_key(day)), status_code=303)


@app.post("/calendar/entries/{entry_id}/delete")
async def delete_calendar_entry(entry_id: str, pivot: str = Form(""),
                                repo: MealRepository = Depends(get_repository)):
    await CalendarView(repo).delete_entry(entry_id)
    return RedirectResponse(url=_calendar_url(pivot or None), status_code=303)


@app.get("/menus/{menu_id}", response_class=HTMLResponse)
async def menu_details_page(request: Request, menu_id: str, repo: MealRepository = Depends(get_repository)):
    details = await MenuDetailsView(repo, menu_id).load()
    return templates.TemplateResponse(
        request, "menu_detail.html", {"details": details, "menu": details.menu}, status_code=details.status_code,
    )


@app.get("/recipes", response_class=HTMLResponse)
async def recipes_page(request: Request, q: str = Query(default=""), category: str = Query(default=""),
                       repo: MealRepository = Depends(get_repository)):
    recipes, failed = [], False
    try:
        recipes = await repo.list_recipes()
    except StoreError as e:
        logger.error("Error fetching recipes: %s", e)
        publish_store_failure("list_recipes", e)
        failed = True
    return templates.TemplateResponse(
        request,
        "recipes.html",
        {
            "recipes": filter_recipes(recipes, q, category),
            "categories": recipe_categories(recipes),
            "search_term": q,
            "selected_category": category,
            "load_failed": failed,
        },
    )


@app.get("/inventory", response_class=HTMLResponse)
async def inventory_page(request: Request, repo: MealRepository = Depends(get_repository)):
    items, failed = [], False
    try:
        items = (await repo.list_inventory()).get_items()
    except StoreError as e:
        logger.error("Error fetching inventory: %s", e)
        publish_store_failure("list_inventory", e)
        failed = True
    return templates.TemplateResponse(request, "inventory.html", {"items": items, "load_failed": failed})


@app.get("/shopping", response_class=HTMLResponse)
async def shopping_page(request: Request, pivot: Optional[str] = Query(default=None),
                        repo: MealRepository = Depends(get_repository)):
    view = CalendarView(repo, pivot=parse_pivot(pivot))
    failed = not await view.load()
    items = []
    try:
        items = build_shopping_list(view.week_entries(), await repo.list_inventory())
    except StoreError as e:
        logger.error("Error fetching inventory: %s", e)
        publish_store_failure("list_inventory", e)
        failed = True
    return templates.TemplateResponse(
        request,
        "shopping.html",
        {"view": view, "items": items, "total_items": len(items), "load_failed": failed},
    )


@app.get("/diary", response_class=HTMLResponse)
async def diary_page(request: Request, repo: MealRepository = Depends(get_repository)):
    view = CalendarView(repo)
    failed = not await view.load()
    days = build_diary(view.entries, _date.today())
    return templates.TemplateResponse(request, "diary.html", {"days": days, "load_failed": failed})


# -------------------- API: health + diagnostics --------------------
@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.get('/api/diagnostics')
def api_diagnostics(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value"),
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Page size"),
):
    """
    Recent diagnostic events (dangling menu references, swallowed store failures, entry changes).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from the response.
        3. Poll /api/diagnostics?since=<next_cursor>.
    """
    return get_web_events(since, limit)
