from __future__ import annotations

from typing import Any, List

import pytest

from app.models.chat import User
from app.models.recipe import GeneratedRecipe, RecipeRequest
from app.services.records import RecordStore
from app.services.session import KitchenSession, SnapshotStore


class FakeChef:
    """Stands in for ChefService; records what the assistant asked for."""

    def __init__(self, answer: str = "Boil it for 7 minutes.", recipe: GeneratedRecipe | None = None):
        self.answer = answer
        self.recipe = recipe or GeneratedRecipe(
            title="Garlic Tomato Rice",
            description="Quick weeknight rice",
            ingredients=["2 tomatoes", "3 cloves garlic"],
            instructions=["Chop", "Fry", "Serve"],
        )
        self.recipe_requests: List[RecipeRequest] = []
        self.questions: List[tuple] = []
        self.raise_on_recipe: Exception | None = None
        self.raise_on_answer: Exception | None = None

    async def generate_recipe(self, request: RecipeRequest) -> GeneratedRecipe:
        self.recipe_requests.append(request)
        if self.raise_on_recipe:
            raise self.raise_on_recipe
        return self.recipe

    async def answer_question(self, question: str, context: Any = None, language: str = "en") -> str:
        self.questions.append((question, context, language))
        if self.raise_on_answer:
            raise self.raise_on_answer
        return self.answer

    async def get_tips(self, recipe: str, language: str = "en") -> List[str]:
        return ["Salt early", "Rest the meat"]

    async def suggest_substitutions(self, ingredient: str, language: str = "en") -> List[str]:
        return ["shallot"]

    async def test_connection(self) -> dict:
        return {"proxy": True, "service": True}


@pytest.fixture
def store(tmp_path) -> RecordStore:
    return RecordStore(tmp_path / "kitchen.sqlite3")


@pytest.fixture
def snapshots(tmp_path) -> SnapshotStore:
    return SnapshotStore(tmp_path / "snapshots.json")


@pytest.fixture
def kitchen(store: RecordStore, snapshots: SnapshotStore) -> KitchenSession:
    session = KitchenSession(User(id="user-1", email="cook@example.com"), store, snapshots)
    session.initialize()
    return session


@pytest.fixture
def fake_chef() -> FakeChef:
    return FakeChef()
