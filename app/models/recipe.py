# app/models/recipe.py
from __future__ import annotations

from typing import Any, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

Language = Literal["en", "id"]
Difficulty = Literal["easy", "medium", "hard"]


class RecipeRequest(BaseModel):
    ingredients: List[str]
    preferences: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list, alias="dietaryRestrictions")
    cooking_time: Optional[int] = Field(default=None, gt=0, alias="cookingTime")
    difficulty: Difficulty = "medium"
    cuisine: Optional[str] = None
    mood: Optional[str] = None
    language: Language = "en"

    model_config = {"populate_by_name": True}

    @field_validator("ingredients")
    @classmethod
    def _non_blank_ingredients(cls, v: List[str]) -> List[str]:
        names = [s.strip() for s in v if s and s.strip()]
        if not names:
            raise ValueError("at least one ingredient is required")
        return names


class GeneratedRecipe(BaseModel):
    title: str
    description: str
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    prep_time: int = Field(default=15, ge=0, alias="prepTime")
    cook_time: int = Field(default=30, ge=0, alias="cookTime")
    servings: int = Field(default=4, gt=0)
    difficulty: str = "medium"
    cuisine: str = "fusion"
    tags: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    story: str = ""

    model_config = {"populate_by_name": True}


class Recipe(BaseModel):
    id: str
    title: str
    description: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    prep_time: int = 0
    cook_time: int = 0
    servings: int = 1
    difficulty: str = "medium"
    cuisine: str = ""
    tags: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    story: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class RecipeListResponse(BaseModel):
    items: List[Recipe]


class QuestionRequest(BaseModel):
    question: str
    context: Optional[str] = None
    language: Language = "en"


class TipsRequest(BaseModel):
    recipe: str
    language: Language = "en"


class SubstitutionRequest(BaseModel):
    ingredient: str
    language: Language = "en"


class DetectLanguageRequest(BaseModel):
    text: str


class TextListResponse(BaseModel):
    items: List[str]


class AnswerResponse(BaseModel):
    answer: str


class DetectLanguageResponse(BaseModel):
    language: Language


def recipe_row(recipe: GeneratedRecipe) -> dict[str, Any]:
    """Column values for a `recipes` row built from a generated recipe."""
    return {
        "title": recipe.title,
        "description": recipe.description,
        "ingredients": list(recipe.ingredients),
        "instructions": list(recipe.instructions),
        "prep_time": recipe.prep_time,
        "cook_time": recipe.cook_time,
        "servings": recipe.servings,
        "difficulty": recipe.difficulty,
        "cuisine": recipe.cuisine,
        "tags": list(recipe.tags),
        "tips": list(recipe.tips),
        "story": recipe.story,
    }
