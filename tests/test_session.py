from __future__ import annotations

from datetime import date

import pytest

from app.core.errors import InputValidationError
from app.models.chat import User
from app.models.pantry import IngredientCreate, IngredientUpdate
from app.models.recipe import GeneratedRecipe
from app.services.session import KitchenSession, SessionRegistry, SnapshotStore


def test_add_ingredient_fills_translations(kitchen: KitchenSession):
    item = kitchen.add_ingredient(IngredientCreate(name=" Tomatoes ", quantity=4, unit="pieces", category="vegetables"))

    assert item.name == "Tomatoes"
    assert item.name_en == "tomatoes"
    assert item.name_id == "tomat"
    assert kitchen.ingredients[0].id == item.id


def test_add_ingredient_keeps_explicit_translations(kitchen: KitchenSession):
    item = kitchen.add_ingredient(IngredientCreate(name="Kecap", quantity=1, name_en="sweet soy sauce", name_id="kecap manis"))

    assert item.name_en == "sweet soy sauce"
    assert item.name_id == "kecap manis"


@pytest.mark.parametrize("payload", [{"quantity": 2}, {"name": "   ", "quantity": 2}, {"name": "rice"}])
def test_add_ingredient_requires_name_and_quantity(kitchen: KitchenSession, payload):
    with pytest.raises(InputValidationError) as exc:
        kitchen.add_ingredient(IngredientCreate(**payload))

    assert str(exc.value) == "Please fill in all required fields"
    assert kitchen.fetch_ingredients() == []


def test_validation_message_follows_session_language(kitchen: KitchenSession):
    kitchen.set_language("id")

    with pytest.raises(InputValidationError) as exc:
        kitchen.add_ingredient(IngredientCreate(quantity=1))

    assert str(exc.value) == "Harap isi semua kolom yang diperlukan"


def test_update_name_recomputes_translations(kitchen: KitchenSession):
    item = kitchen.add_ingredient(IngredientCreate(name="Tomatoes", quantity=4))

    updated = kitchen.update_ingredient(item.id, IngredientUpdate(name="Garlic", quantity=3))

    assert updated is not None
    assert updated.name == "Garlic"
    assert updated.name_en == "garlic"
    assert updated.name_id == "bawang putih"
    assert updated.quantity == 3
    assert kitchen.ingredients[0].name == "Garlic"


def test_update_can_clear_expiry_and_rejects_blank_name(kitchen: KitchenSession):
    item = kitchen.add_ingredient(IngredientCreate(name="Milk", quantity=1, expiry_date=date(2026, 10, 20)))

    cleared = kitchen.update_ingredient(item.id, IngredientUpdate(expiry_date=None))
    assert cleared is not None and cleared.expiry_date is None

    with pytest.raises(InputValidationError):
        kitchen.update_ingredient(item.id, IngredientUpdate(name=""))


def test_update_and_delete_unknown_id(kitchen: KitchenSession):
    assert kitchen.update_ingredient("missing", IngredientUpdate(quantity=1)) is None
    assert kitchen.delete_ingredient("missing") is False


def test_fetch_backfills_missing_translations(kitchen: KitchenSession):
    kitchen.store.insert(
        "ingredients",
        {"user_id": "user-1", "name": "chicken", "name_en": "", "name_id": "", "quantity": 1, "unit": "kg", "category": "meat"},
    )

    items = kitchen.fetch_ingredients()

    assert items[0].name_en == "chicken"
    assert items[0].name_id == "ayam"


def test_ingredients_come_back_newest_first(kitchen: KitchenSession):
    kitchen.add_ingredient(IngredientCreate(name="rice", quantity=1))
    kitchen.add_ingredient(IngredientCreate(name="egg", quantity=6))

    assert [i.name for i in kitchen.fetch_ingredients()] == ["egg", "rice"]


def test_users_do_not_see_each_other(kitchen: KitchenSession, store, snapshots):
    kitchen.add_ingredient(IngredientCreate(name="rice", quantity=1))
    kitchen.add_chat_message("user", "hello")

    other = KitchenSession(User(id="user-2"), store, snapshots)
    other.initialize()

    assert other.ingredients == []
    assert other.chat_messages == []
    assert other.delete_ingredient(kitchen.ingredients[0].id) is False
    assert len(kitchen.fetch_ingredients()) == 1


def test_first_message_mints_a_session_id(kitchen: KitchenSession):
    assert kitchen.current_session_id is None

    first = kitchen.add_chat_message("user", "hi")
    second = kitchen.add_chat_message("ai", "hello", {"note": 1})

    assert first.session_id == second.session_id == kitchen.current_session_id
    assert second.metadata == {"note": 1}


def test_clear_history_resets_session(kitchen: KitchenSession):
    old = kitchen.add_chat_message("user", "hi").session_id

    assert kitchen.clear_chat_history() == 1
    assert kitchen.chat_messages == []
    assert kitchen.current_session_id is None

    assert kitchen.add_chat_message("user", "again").session_id != old


def test_new_session_then_history_resumes_latest(kitchen: KitchenSession, store, snapshots):
    kitchen.add_chat_message("user", "first session")
    kitchen.start_new_chat_session()
    latest = kitchen.add_chat_message("user", "second session").session_id

    reloaded = KitchenSession(kitchen.user, store, snapshots)
    reloaded.initialize()

    assert [m.content for m in reloaded.chat_messages] == ["first session", "second session"]
    assert reloaded.current_session_id == latest


def test_recipe_metadata_marks_message_type(kitchen: KitchenSession):
    msg = kitchen.add_chat_message("recipe", "here you go", {"recipe": {"title": "Soup"}, "language": "en"})

    assert msg.type == "recipe"
    assert kitchen.fetch_chat_history()[0].metadata["recipe"]["title"] == "Soup"


def test_saved_recipes_newest_first(kitchen: KitchenSession):
    kitchen.save_generated_recipe(GeneratedRecipe(title="Nasi Goreng", description="Fried rice", ingredients=["rice"], instructions=["fry"]))
    saved = kitchen.save_generated_recipe(GeneratedRecipe(title="Soto Ayam", description="Chicken soup", tags=["soup"]))

    recipes = kitchen.fetch_recipes()

    assert [r.title for r in recipes] == ["Soto Ayam", "Nasi Goreng"]
    assert recipes[0].tags == ["soup"]
    assert recipes[1].ingredients == ["rice"]
    assert kitchen.get_recipe(saved.id).title == "Soto Ayam"
    assert kitchen.get_recipe("missing") is None


def test_snapshot_survives_restart(kitchen: KitchenSession, store, snapshots):
    kitchen.set_language("id")
    kitchen.set_active_view("recipes")

    restored = KitchenSession(kitchen.user, store, snapshots)
    restored.initialize()

    assert restored.language == "id"
    assert restored.active_view == "recipes"
    assert restored.snapshot().model_dump(by_alias=True)["activeView"] == "recipes"


def test_registry_reuses_sessions(tmp_path):
    registry = SessionRegistry(tmp_path / "k.sqlite3", tmp_path / "s.json")
    user = User(id="abc")

    first = registry.get(user)
    assert registry.get(user) is first

    registry.drop("abc")
    assert registry.get(user) is not first


def test_corrupt_snapshot_file_does_not_block_sessions(store, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    snapshots = SnapshotStore(path)

    session = KitchenSession(User(id="user-3"), store, snapshots)
    session.initialize()

    assert session.language == "en"
    assert session.active_view == "dashboard"

    session.set_language("id")
    assert snapshots.load("user-3").language == "id"
