from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from mealboard.api.dependencies import get_repository
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.errors import DocumentNotFound, StoreError
from mealboard.logic.menus.search import filter_menus, filter_recipes

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.get("/menus")
async def api_menus(q: str = Query(default=""), repo: MealRepository = Depends(get_repository)):
    """All menus, optionally filtered by name, description or recipe name."""
    try:
        menus = await repo.list_menus()
    except StoreError as e:
        logger.error("Error fetching menus: %s", e)
        raise HTTPException(status_code=502, detail="Document store unavailable")
    matched = filter_menus(menus, q)
    return {"count": len(matched), "total": len(menus), "menus": [m.to_dict() for m in matched]}


@router.get("/menus/{menu_id}")
async def api_menu(menu_id: str, repo: MealRepository = Depends(get_repository)):
    try:
        menu = await repo.get_menu(menu_id)
    except DocumentNotFound:
        logger.error("Menu not found: %s", menu_id)
        raise HTTPException(status_code=404, detail="Menu not found")
    except StoreError as e:
        logger.error("Error fetching menu %s: %s", menu_id, e)
        raise HTTPException(status_code=502, detail="Document store unavailable")
    return menu.to_dict()


@router.get("/recipes")
async def api_recipes(q: str = Query(default=""), category: str = Query(default=""),
                      repo: MealRepository = Depends(get_repository)):
    try:
        recipes = await repo.list_recipes()
    except StoreError as e:
        logger.error("Error fetching recipes: %s", e)
        raise HTTPException(status_code=502, detail="Document store unavailable")
    matched = filter_recipes(recipes, q, category)
    return {"count": len(matched), "total": len(recipes), "recipes": [r.to_dict() for r in matched]}
