from __future__ import annotations

from datetime import date

import pytest

from app.core.errors import PersistenceError
from app.services.records import RecordStore


def test_insert_stamps_id_and_timestamps(store: RecordStore):
    row = store.insert(
        "ingredients",
        {"user_id": "u", "name": "rice", "quantity": 2, "unit": "kg", "expiry_date": date(2026, 11, 1)},
    )

    assert row["id"]
    assert row["created_at"] == row["updated_at"]
    assert row["expiry_date"] == "2026-11-01"


def test_json_columns_round_trip(store: RecordStore):
    row = store.insert("chat_history", {"user_id": "u", "session_id": "s", "message_type": "ai", "content": "hi", "metadata": None})

    assert row["metadata"] == {}

    recipe = store.insert("recipes", {"user_id": "u", "title": "Soup", "tags": ["warm", "pedas"]})
    assert recipe["tags"] == ["warm", "pedas"]
    assert recipe["ingredients"] == []


def test_filters_scope_rows(store: RecordStore):
    store.insert("ingredients", {"user_id": "a", "name": "rice", "quantity": 1})
    store.insert("ingredients", {"user_id": "b", "name": "egg", "quantity": 1})

    assert [r["name"] for r in store.select("ingredients", eq={"user_id": "a"})] == ["rice"]
    assert store.select("ingredients", eq={"user_id": "a"}, limit=0) == []


def test_update_missing_row_returns_none(store: RecordStore):
    assert store.update("ingredients", {"quantity": 3}, eq={"id": "nope", "user_id": "a"}) is None


def test_unknown_table_or_column_rejected(store: RecordStore):
    with pytest.raises(PersistenceError):
        store.select("users", eq={"id": "x"})
    with pytest.raises(PersistenceError):
        store.insert("ingredients", {"user_id": "a", "name": "rice", "quantity": 1, "colour": "white"})


def test_delete_requires_a_filter(store: RecordStore):
    store.insert("ingredients", {"user_id": "a", "name": "rice", "quantity": 1})

    with pytest.raises(PersistenceError):
        store.delete("ingredients", eq={})
    assert store.delete("ingredients", eq={"user_id": "a"}) == 1


def test_sqlite_errors_become_persistence_errors(store: RecordStore):
    # name is NOT NULL
    with pytest.raises(PersistenceError):
        store.insert("ingredients", {"user_id": "a", "name": None, "quantity": 1})
