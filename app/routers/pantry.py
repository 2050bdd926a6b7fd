# app/routers/pantry.py
from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException

from app.core.errors import InputValidationError, PersistenceError
from app.models.pantry import (
    ExpiringIngredient,
    Ingredient,
    IngredientCreate,
    IngredientListResponse,
    IngredientUpdate,
)
from app.routers.deps import get_kitchen
from app.services import inventory
from app.services.session import KitchenSession

router = APIRouter(prefix="/pantry", tags=["pantry"])


@router.get("/items", response_model=IngredientListResponse)
def list_items(search: str = "", refresh: bool = True, kitchen: KitchenSession = Depends(get_kitchen)):
    try:
        items = kitchen.fetch_ingredients() if refresh else kitchen.ingredients
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    return IngredientListResponse(items=inventory.filter_ingredients(items, search, kitchen.language))


@router.post("/items", response_model=Ingredient, status_code=201)
def add_item(payload: IngredientCreate, kitchen: KitchenSession = Depends(get_kitchen)) -> Ingredient:
    """
    Example payload:
      {"name": "Tomatoes", "quantity": 4, "unit": "pieces", "category": "vegetables", "expiry_date": "2026-12-01"}
    name_en / name_id are filled from the translation table when omitted.
    """
    try:
        return kitchen.add_ingredient(payload)
    except (InputValidationError, PersistenceError) as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)


@router.patch("/items/{ingredient_id}", response_model=Ingredient)
def update_item(
    ingredient_id: str,
    payload: IngredientUpdate,
    kitchen: KitchenSession = Depends(get_kitchen),
) -> Ingredient:
    try:
        updated = kitchen.update_ingredient(ingredient_id, payload)
    except (InputValidationError, PersistenceError) as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    if updated is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return updated


@router.delete("/items/{ingredient_id}")
def delete_item(ingredient_id: str, kitchen: KitchenSession = Depends(get_kitchen)) -> dict[str, Any]:
    try:
        deleted = kitchen.delete_ingredient(ingredient_id)
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    if not deleted:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"ok": True, "deleted": True, "id": ingredient_id}


@router.get("/expiring", response_model=List[ExpiringIngredient])
def expiring(kitchen: KitchenSession = Depends(get_kitchen)) -> List[ExpiringIngredient]:
    return inventory.expiring_soon(kitchen.ingredients)
