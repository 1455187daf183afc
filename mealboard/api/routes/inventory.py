from fastapi import APIRouter, Depends, HTTPException
import logging

from mealboard.api.dependencies import get_repository
from mealboard.infra.Meal_Repository import MealRepository
from mealboard.infra.errors import StoreError
from mealboard.utilities.validators import InventoryItemInput

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.get('/inventory')
async def api_inventory(repo: MealRepository = Depends(get_repository)):
    try:
        inventory = await repo.list_inventory()
    except StoreError as e:
        logger.error("Error fetching inventory: %s", e)
        raise HTTPException(status_code=502, detail="Document store unavailable")
    items = inventory.get_items()
    return {"count": len(items), "items": [i.to_dict() for i in items]}


@router.post('/inventory', status_code=201)
async def api_add_inventory_item(payload: InventoryItemInput, repo: MealRepository = Depends(get_repository)):
    try:
        item = await repo.add_inventory_item(payload.name, payload.quantity, payload.unit)
    except StoreError as e:
        logger.error("Error saving inventory item %s: %s", payload.name, e)
        raise HTTPException(status_code=502, detail="Document store unavailable")
    return item.to_dict()


@router.delete('/inventory/{item_id}')
async def api_delete_inventory_item(item_id: str, repo: MealRepository = Depends(get_repository)):
    try:
        await repo.delete_inventory_item(item_id)
    except StoreError as e:
        logger.error("Error deleting inventory item %s: %s", item_id, e)
        raise HTTPException(status_code=502, detail="Document store unavailable")
    return {"success": True, "id": item_id}
