# app/routers/recipes.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.errors import PersistenceError
from app.models.recipe import GeneratedRecipe, Recipe, RecipeListResponse
from app.routers.deps import get_kitchen
from app.services import inventory
from app.services.session import KitchenSession

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("", response_model=RecipeListResponse)
def recipe_list(
    search: str = "",
    difficulty: Optional[List[str]] = Query(default=None),
    cuisine: Optional[List[str]] = Query(default=None),
    kitchen: KitchenSession = Depends(get_kitchen),
) -> RecipeListResponse:
    try:
        recipes = kitchen.fetch_recipes()
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    return RecipeListResponse(items=inventory.filter_recipes(recipes, search, difficulty, cuisine))


@router.post("", response_model=Recipe, status_code=201)
def recipe_save(recipe: GeneratedRecipe, kitchen: KitchenSession = Depends(get_kitchen)) -> Recipe:
    try:
        return kitchen.save_generated_recipe(recipe)
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)


@router.get("/{recipe_id}", response_model=Recipe)
def recipe_get(recipe_id: str, kitchen: KitchenSession = Depends(get_kitchen)) -> Recipe:
    try:
        r = kitchen.get_recipe(recipe_id)
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    if not r:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return r
