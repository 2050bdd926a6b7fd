# app/models/pantry.py
from __future__ import annotations

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field


class Ingredient(BaseModel):
    id: str
    name: str
    name_en: str
    name_id: str
    quantity: float = Field(ge=0)
    unit: str = ""
    category: str = "other"
    expiry_date: Optional[date] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class IngredientCreate(BaseModel):
    # name/quantity stay optional here so the session can reject them with a localized message
    name: Optional[str] = None
    quantity: Optional[float] = None
    unit: str = ""
    category: str = "other"
    expiry_date: Optional[date] = None
    name_en: Optional[str] = None
    name_id: Optional[str] = None


class IngredientUpdate(BaseModel):
    name: Optional[str] = None
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = None
    category: Optional[str] = None
    expiry_date: Optional[date] = None


class IngredientListResponse(BaseModel):
    items: List[Ingredient]


class ExpiringIngredient(BaseModel):
    ingredient: Ingredient
    status: str
    days_left: Optional[int] = None
