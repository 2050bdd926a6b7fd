# app/services/inventory.py
from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from app.models.pantry import ExpiringIngredient, Ingredient
from app.models.recipe import Recipe

EXPIRING_DAYS = 3
WARNING_DAYS = 7
LOW_STOCK_QTY = 2


def days_until(expiry: Optional[date], today: Optional[date] = None) -> Optional[int]:
    if expiry is None:
        return None
    return (expiry - (today or date.today())).days


def expiry_status(expiry: Optional[date], today: Optional[date] = None) -> str:
    days = days_until(expiry, today)
    if days is None:
        return "none"
    if days < 0:
        return "expired"
    if days <= EXPIRING_DAYS:
        return "expiring"
    if days <= WARNING_DAYS:
        return "warning"
    return "fresh"


def localized_name(ingredient: Ingredient, language: str) -> str:
    if language == "id":
        return ingredient.name_id or ingredient.name
    return ingredient.name_en or ingredient.name


def expiring_soon(ingredients: Iterable[Ingredient], today: Optional[date] = None) -> List[ExpiringIngredient]:
    out = []
    for ing in ingredients:
        days = days_until(ing.expiry_date, today)
        if days is not None and 0 <= days <= EXPIRING_DAYS:
            out.append(ExpiringIngredient(ingredient=ing, status="expiring", days_left=days))
    return sorted(out, key=lambda e: e.days_left)


def low_stock(ingredients: Iterable[Ingredient]) -> List[Ingredient]:
    return [i for i in ingredients if i.quantity < LOW_STOCK_QTY]


def filter_ingredients(ingredients: Iterable[Ingredient], search: str = "", language: str = "en") -> List[Ingredient]:
    term = (search or "").strip().lower()
    if not term:
        return list(ingredients)
    return [i for i in ingredients if term in localized_name(i, language).lower()]


def filter_recipes(
    recipes: Iterable[Recipe],
    search: str = "",
    difficulties: Optional[List[str]] = None,
    cuisines: Optional[List[str]] = None,
) -> List[Recipe]:
    term = (search or "").strip().lower()
    out = []
    for r in recipes:
        if term and term not in r.title.lower() and term not in (r.description or "").lower():
            continue
        if difficulties and r.difficulty not in difficulties:
            continue
        if cuisines and r.cuisine not in cuisines:
            continue
        out.append(r)
    return out


def dashboard_summary(
    ingredients: List[Ingredient],
    recipes: List[Recipe],
    today: Optional[date] = None,
) -> Dict[str, Any]:
    return {
        "total_ingredients": len(ingredients),
        "total_recipes": len(recipes),
        "expiring_soon": [e.model_dump(mode="json") for e in expiring_soon(ingredients, today)],
        "low_stock": [i.model_dump(mode="json") for i in low_stock(ingredients)],
        "recent_recipes": [r.model_dump(mode="json") for r in recipes[:4]],
        "popular_ingredients": [i.model_dump(mode="json") for i in ingredients[:5]],
    }
