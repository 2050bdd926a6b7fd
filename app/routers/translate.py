# app/routers/translate.py
from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter

from app.services.translations import translate_category, translate_ingredient, translate_unit

router = APIRouter(prefix="/translate", tags=["translate"])

_LOOKUPS = {
    "ingredient": translate_ingredient,
    "category": translate_category,
    "unit": translate_unit,
}


@router.get("")
def translate(
    value: str,
    target: Literal["en", "id"],
    kind: Literal["ingredient", "category", "unit"] = "ingredient",
) -> dict[str, Any]:
    return {"value": value, "kind": kind, "target": target, "translation": _LOOKUPS[kind](value, target)}
