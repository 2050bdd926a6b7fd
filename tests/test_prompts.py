from __future__ import annotations

from app.models.recipe import RecipeRequest
from app.services.prompts import build_recipe_prompt, question_prompt, system_prompt

FIELDS = (
    "title", "description", "ingredients", "instructions", "prepTime", "cookTime",
    "servings", "difficulty", "cuisine", "tags", "tips", "story",
)


def test_minimal_request_has_no_stray_requirement_lines():
    prompt = build_recipe_prompt(RecipeRequest(ingredients=["rice", "egg"]))

    assert prompt.startswith("Create a unique and creative recipe using these ingredients: rice, egg.")
    assert "- Difficulty: medium" in prompt
    for label in ("Maximum cooking time", "Cuisine style", "Preferences", "Dietary restrictions", "Mood/Style"):
        assert label not in prompt
    assert all(line.strip() not in ("-", "- ") for line in prompt.splitlines())


def test_all_optional_lines_present_when_given():
    req = RecipeRequest(
        ingredients=["chicken"],
        preferences=["quick", "healthy"],
        dietaryRestrictions=["gluten-free"],
        cookingTime=30,
        difficulty="easy",
        cuisine="Thai",
        mood="cozy rainy evening",
    )
    prompt = build_recipe_prompt(req)

    assert "- Difficulty: easy" in prompt
    assert "- Maximum cooking time: 30 minutes" in prompt
    assert "- Cuisine style: Thai" in prompt
    assert "- Preferences: quick, healthy" in prompt
    assert "- Dietary restrictions: gluten-free" in prompt
    assert "- Mood/Style: cozy rainy evening" in prompt


def test_json_example_lists_every_field():
    prompt = build_recipe_prompt(RecipeRequest(ingredients=["tofu"]))
    for field in FIELDS:
        assert f'"{field}":' in prompt
    assert '"prepTime": 15' in prompt
    assert "IMPORTANT: Provide ALL content in natural English." in prompt


def test_indonesian_prompt_is_localized():
    prompt = build_recipe_prompt(RecipeRequest(ingredients=["tempe"], cookingTime=20, language="id"))

    assert prompt.startswith("Buat resep unik dan kreatif menggunakan bahan-bahan ini: tempe.")
    assert "Persyaratan:" in prompt
    assert "- Tingkat kesulitan: medium" in prompt
    assert "- Waktu memasak maksimum: 20 menit" in prompt
    assert '"title": "Nama Resep"' in prompt
    assert "PENTING:" in prompt
    assert "Create a unique" not in prompt


def test_system_prompts_follow_language():
    assert system_prompt("recipe", "en").startswith("You are a professional chef AI assistant")
    assert system_prompt("recipe", "id").startswith("Anda adalah asisten AI chef profesional")


def test_question_prompt_context_is_optional():
    assert "Context:" not in question_prompt("Why rest steak?", None, "en")
    assert "Context: grilling" in question_prompt("Why rest steak?", "grilling", "en")
    assert "Konteks: bakar" in question_prompt("Kenapa?", "bakar", "id")
