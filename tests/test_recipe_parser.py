from __future__ import annotations

import json

from app.services.recipe_parser import parse_recipe_response, parse_string_list

FULL = {
    "title": "Sambal Tempeh Tacos",
    "description": "Crispy tempeh in warm tortillas",
    "ingredients": ["200 g tempeh", "4 tortillas", "2 tbsp sambal"],
    "instructions": ["Slice tempeh", "Fry until golden", "Toss with sambal", "Fill tortillas"],
    "prepTime": 10,
    "cookTime": 20,
    "servings": 2,
    "difficulty": "easy",
    "cuisine": "fusion",
    "tags": ["spicy", "vegan"],
    "tips": ["Steam the tempeh first"],
    "story": "Born on a Jakarta night market stall.",
}


def test_complete_json_round_trips():
    raw = "Here you go!\n```json\n" + json.dumps(FULL, indent=2) + "\n```\nEnjoy."
    recipe = parse_recipe_response(raw)

    assert recipe.model_dump(by_alias=True) == FULL


def test_missing_fields_get_defaults():
    recipe = parse_recipe_response('{"title": "Plain Rice"}')

    assert recipe.title == "Plain Rice"
    assert recipe.description == "A delicious recipe created just for you"
    assert recipe.ingredients == []
    assert recipe.instructions == []
    assert (recipe.prep_time, recipe.cook_time, recipe.servings) == (15, 30, 4)
    assert recipe.difficulty == "medium"
    assert recipe.cuisine == "fusion"
    assert recipe.tags == ["ai-generated", "creative"]
    assert recipe.tips == []
    assert recipe.story == ""


def test_malformed_numbers_fall_back():
    recipe = parse_recipe_response('{"prepTime": "about 20", "cookTime": "45", "servings": 0}')

    assert recipe.prep_time == 15
    assert recipe.cook_time == 45
    assert recipe.servings == 4


def test_non_list_arrays_get_defaults():
    recipe = parse_recipe_response('{"ingredients": "rice", "instructions": null, "tags": "x"}')

    assert recipe.ingredients == []
    assert recipe.instructions == []
    assert recipe.tags == ["ai-generated", "creative"]


def test_structured_list_items_become_json_text():
    raw = json.dumps({"ingredients": [{"item": "nasi", "qty": "1 cup"}, 2, None, "salt"], "tips": [["a", "b"]]})

    recipe = parse_recipe_response(raw)

    assert recipe.ingredients == ['{"item": "nasi", "qty": "1 cup"}', "2", "salt"]
    assert recipe.tips == ['["a", "b"]']


def test_empty_string_never_raises():
    recipe = parse_recipe_response("")

    assert recipe.title == "Generated Recipe"
    assert (recipe.prep_time, recipe.cook_time, recipe.servings) == (15, 30, 4)


def test_prose_uses_fallback_scraping():
    raw = "\n".join([
        "## Garlic Butter Noodles",
        "",
        "You will need:",
        "2 cups egg noodles",
        "1 tbsp butter",
        "1 tsp garlic",
        "1. Boil the noodles",
        "2. Melt the butter",
        "Final step: toss and serve",
    ])
    recipe = parse_recipe_response(raw)

    assert recipe.title == "Garlic Butter Noodles"
    assert recipe.ingredients == ["2 cups egg noodles", "1 tbsp butter", "1 tsp garlic"]
    assert recipe.instructions == ["1. Boil the noodles", "2. Melt the butter", "Final step: toss and serve"]
    assert recipe.tags == ["ai-generated", "creative"]
    assert (recipe.prep_time, recipe.cook_time, recipe.servings) == (15, 30, 4)


def test_broken_json_uses_fallback():
    recipe = parse_recipe_response('{"title": "Oops", "ingredients": [}')

    assert recipe.title == '{"title": "Oops", "ingredients": [}'
    assert recipe.servings == 4


def test_fallback_caps_lists():
    raw = "Big Batch\n" + "\n".join(f"{n} cup water" for n in range(1, 16))
    raw += "\n" + "\n".join(f"{n}. stir" for n in range(1, 13))
    recipe = parse_recipe_response(raw)

    assert len(recipe.ingredients) == 10
    assert len(recipe.instructions) == 8


def test_string_list_from_json_array():
    assert parse_string_list('```json\n["Use cold butter", "Rest the dough"]\n```') == [
        "Use cold butter",
        "Rest the dough",
    ]


def test_string_list_falls_back_to_lines():
    raw = "Shallots\n\nLeeks\nChives\nSpring onion\nRed onion\nWhite onion"
    assert parse_string_list(raw) == ["Shallots", "Leeks", "Chives", "Spring onion", "Red onion"]
