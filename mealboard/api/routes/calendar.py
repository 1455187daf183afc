from datetime import date as _date
from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from mealboard.api.dependencies import get_repository
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.errors import DocumentNotFound, StoreError
from mealboard.infra.pdf_utils import generate_pdf_for_week
from mealboard.logic.calendar.dates import format_date_key, normalize_date
from mealboard.logic.calendar.view import CalendarView
from mealboard.logic.shopping.list_builder import build_shopping_list
from mealboard.utilities.validators import CalendarEntryInput

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def parse_pivot(pivot: Optional[str]) -> Optional[_date]:
    """Pivot date from a query string; 400 when it is not an ISO date."""
    if not pivot:
        return None
    try:
        return normalize_date(pivot)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date (expected YYYY-MM-DD)")


async def load_view(repo: MealRepository, pivot: Optional[str]) -> CalendarView:
    view = CalendarView(repo, pivot=parse_pivot(pivot))
    if not await view.load():
        raise HTTPException(status_code=502, detail="Calendar could not be loaded")
    return view


@router.get("/calendar")
async def api_calendar_week(pivot: Optional[str] = Query(default=None, description="Any day of the week (YYYY-MM-DD)"),
                            repo: MealRepository = Depends(get_repository)):
    view = await load_view(repo, pivot)
    return view.to_dict()


@router.post("/calendar", status_code=201)
async def api_add_calendar_entry(payload: CalendarEntryInput, repo: MealRepository = Depends(get_repository)):
    """Assign a menu to a day; the created entry is returned with its menu embedded."""
    try:
        await repo.get_menu(payload.menu_id)
    except DocumentNotFound:
        raise HTTPException(status_code=404, detail="Menu not found")
    except StoreError as e:
        logger.error("Error fetching menu %s: %s", payload.menu_id, e)
        raise HTTPException(status_code=502, detail="Document store unavailable")

    view = CalendarView(repo, pivot=payload.day)
    entry = await view.add_entry(payload.day, payload.menu_id)
    if entry is None:
        raise HTTPException(status_code=502, detail="Calendar entry was not added")
    return entry.to_dict()


@router.delete("/calendar/{entry_id}")
async def api_delete_calendar_entry(entry_id: str, repo: MealRepository = Depends(get_repository)):
    view = CalendarView(repo)
    if not await view.delete_entry(entry_id):
        raise HTTPException(status_code=502, detail="Calendar entry was not deleted")
    return {"success": True, "id": entry_id}


@router.get("/calendar/export_pdf")
async def api_export_pdf(pivot: Optional[str] = Query(default=None), repo: MealRepository = Depends(get_repository)):
    view = await load_view(repo, pivot)
    pdf_bytes = generate_pdf_for_week(view)
    filename = f"meal_calendar_{format_date_key(view.current_week)}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/shopping-list")
async def api_shopping_list(pivot: Optional[str] = Query(default=None), repo: MealRepository = Depends(get_repository)):
    view = await load_view(repo, pivot)
    try:
        inventory = await repo.list_inventory()
    except StoreError as e:
        logger.error("Error fetching inventory: %s", e)
        raise HTTPException(status_code=502, detail="Document store unavailable")
    items = build_shopping_list(view.week_entries(), inventory)
    return {"week_start": format_date_key(view.current_week), "count": len(items), "items": items}
