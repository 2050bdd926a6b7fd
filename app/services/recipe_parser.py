# app/services/recipe_parser.py
from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Dict, List

from app.core.text import extract_json, extract_json_array, strip_code_fences
from app.models.recipe import GeneratedRecipe

log = logging.getLogger("chef_ai.parser")

DEFAULT_TITLE = "Generated Recipe"
DEFAULT_DESCRIPTION = "A delicious recipe created just for you"
DEFAULT_PREP_TIME = 15
DEFAULT_COOK_TIME = 30
DEFAULT_SERVINGS = 4
DEFAULT_DIFFICULTY = "medium"
DEFAULT_CUISINE = "fusion"
DEFAULT_TAGS = ("ai-generated", "creative")

MAX_FALLBACK_INGREDIENTS = 10
MAX_FALLBACK_INSTRUCTIONS = 8

_UNIT_MARKERS = ("cup", "tbsp", "tsp")
_NUMBERED_RE = re.compile(r"^\d+\.")
_HEADING_RE = re.compile(r"^#+\s*")


def _as_text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    out: List[str] = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, (dict, list)):
            out.append(json.dumps(item, ensure_ascii=False))
        else:
            out.append(str(item))
    return out


def _as_int(value: Any, default: int, *, minimum: int = 0) -> int:
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number) or number < minimum:
        return default
    return int(number)


def _from_mapping(data: Dict[str, Any]) -> GeneratedRecipe:
    tags = data.get("tags")
    return GeneratedRecipe(
        title=_as_text(data.get("title"), DEFAULT_TITLE),
        description=_as_text(data.get("description"), DEFAULT_DESCRIPTION),
        ingredients=_as_str_list(data.get("ingredients")),
        instructions=_as_str_list(data.get("instructions")),
        prep_time=_as_int(data.get("prepTime"), DEFAULT_PREP_TIME),
        cook_time=_as_int(data.get("cookTime"), DEFAULT_COOK_TIME),
        servings=_as_int(data.get("servings"), DEFAULT_SERVINGS, minimum=1),
        difficulty=_as_text(data.get("difficulty"), DEFAULT_DIFFICULTY),
        cuisine=_as_text(data.get("cuisine"), DEFAULT_CUISINE),
        tags=_as_str_list(tags) if isinstance(tags, list) else list(DEFAULT_TAGS),
        tips=_as_str_list(data.get("tips")),
        story=data.get("story") if isinstance(data.get("story"), str) else "",
    )


def fallback_parse_recipe(raw: str) -> GeneratedRecipe:
    lines = [line.strip() for line in (raw or "").splitlines() if line.strip()]

    title = _HEADING_RE.sub("", lines[0]).strip() if lines else ""
    ingredients = [ln for ln in lines if any(u in ln.lower() for u in _UNIT_MARKERS)]
    instructions = [ln for ln in lines if _NUMBERED_RE.match(ln) or "step" in ln.lower()]

    return GeneratedRecipe(
        title=title or DEFAULT_TITLE,
        description=DEFAULT_DESCRIPTION,
        ingredients=ingredients[:MAX_FALLBACK_INGREDIENTS],
        instructions=instructions[:MAX_FALLBACK_INSTRUCTIONS],
        prep_time=DEFAULT_PREP_TIME,
        cook_time=DEFAULT_COOK_TIME,
        servings=DEFAULT_SERVINGS,
        difficulty=DEFAULT_DIFFICULTY,
        cuisine=DEFAULT_CUISINE,
        tags=list(DEFAULT_TAGS),
        tips=[],
        story="",
    )


def parse_recipe_response(raw: str) -> GeneratedRecipe:
    """
    Turn raw model text into a GeneratedRecipe. Never raises:
    a strict JSON pass first, then line scraping over the plain text.
    """
    try:
        data = json.loads(extract_json(raw))
        if isinstance(data, dict):
            log.debug("recipe parsed from json")
            return _from_mapping(data)
        log.warning("recipe json was not an object, using fallback parsing")
    except Exception as e:
        log.warning("recipe json parse failed, using fallback parsing", extra={"error": str(e)})

    return fallback_parse_recipe(raw)


def parse_string_list(raw: str, limit: int = 5) -> List[str]:
    """JSON array of strings if the model sent one, otherwise the first non-empty lines."""
    try:
        data = json.loads(extract_json_array(raw))
        if isinstance(data, list):
            items = [s.strip() for s in _as_str_list(data) if s.strip()]
            if items:
                return items
    except ValueError:
        pass

    lines = [line.strip() for line in strip_code_fences(raw).splitlines() if line.strip()]
    return lines[:limit]
