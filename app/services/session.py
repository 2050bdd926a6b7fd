# app/services/session.py
from __future__ import annotations

import logging
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.core.config import KITCHEN_DB, SNAPSHOT_PATH
from app.core.errors import InputValidationError
from app.models.chat import ChatMessage, SessionSnapshot, SessionState, User
from app.models.pantry import Ingredient, IngredientCreate, IngredientUpdate
from app.models.recipe import GeneratedRecipe, Recipe, recipe_row
from app.services import common
from app.services.records import RecordStore
from app.services.translations import bilingual_names, translate_ingredient

log = logging.getLogger("chef_ai.session")

FILL_REQUIRED = {
    "en": "Please fill in all required fields",
    "id": "Harap isi semua kolom yang diperlukan",
}


def to_chat_message(row: Dict[str, Any]) -> ChatMessage:
    metadata = row.get("metadata") or {}
    msg_type = "recipe" if metadata.get("recipe") else row.get("message_type", "ai")
    return ChatMessage(
        id=row["id"],
        session_id=row["session_id"],
        type=msg_type,
        content=row.get("content") or "",
        metadata=metadata,
        timestamp=row.get("created_at"),
    )


def with_translations(row: Dict[str, Any]) -> Dict[str, Any]:
    if row.get("name_en") and row.get("name_id"):
        return row
    name = row.get("name") or ""
    return {
        **row,
        "name_en": row.get("name_en") or translate_ingredient(name, "en"),
        "name_id": row.get("name_id") or translate_ingredient(name, "id"),
    }


class SnapshotStore:
    """Per-user {user, activeView, language} kept across restarts."""

    def __init__(self, path: Path = SNAPSHOT_PATH):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Any]:
        try:
            snapshots = common.load_snapshots(self.path)
        except ValueError as e:
            log.warning("snapshot file unreadable, starting empty", extra={"error": str(e)})
            return {}
        return snapshots if isinstance(snapshots, dict) else {}

    def load(self, user_id: str) -> Optional[SessionSnapshot]:
        raw = self._read().get(user_id)
        if not raw:
            return None
        try:
            return SessionSnapshot.model_validate(raw)
        except ValueError:
            log.warning("discarding invalid session snapshot", extra={"user_id": user_id})
            return None

    def save(self, user_id: str, snapshot: SessionSnapshot) -> None:
        with self._lock:
            snapshots = self._read()
            snapshots[user_id] = snapshot.model_dump(mode="json", by_alias=True)
            common.save_snapshots(snapshots, self.path)


class KitchenSession:
    """
    State for one signed-in user: pantry, saved recipes, chat transcript and
    the active chat session id. Writes go straight to the record store and
    are mirrored into memory only after they succeed.
    """

    def __init__(self, user: User, store: RecordStore, snapshots: Optional[SnapshotStore] = None):
        self.user = user
        self.store = store
        self.snapshots = snapshots

        self.ingredients: List[Ingredient] = []
        self.recipes: List[Recipe] = []
        self.chat_messages: List[ChatMessage] = []
        self.current_session_id: Optional[str] = None
        self.current_recipe: Optional[Recipe] = None
        self.active_view = "dashboard"
        self.language = "en"
        self.is_generating = False

    # --- snapshot ---

    def restore(self) -> None:
        if not self.snapshots:
            return
        snap = self.snapshots.load(self.user.id)
        if snap:
            self.active_view = snap.active_view
            self.language = snap.language

    def persist(self) -> None:
        if self.snapshots:
            self.snapshots.save(self.user.id, self.snapshot())

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(user=self.user, active_view=self.active_view, language=self.language)

    def state(self) -> SessionState:
        return SessionState(
            user=self.user,
            active_view=self.active_view,
            language=self.language,
            current_session_id=self.current_session_id,
            is_generating=self.is_generating,
        )

    def set_language(self, language: str) -> None:
        self.language = language
        self.persist()

    def set_active_view(self, view: str) -> None:
        self.active_view = view
        self.persist()

    def initialize(self) -> None:
        self.restore()
        self.fetch_ingredients()
        self.fetch_recipes()
        self.fetch_chat_history()
        if not self.chat_messages:
            self.start_new_chat_session()

    # --- ingredients ---

    def fetch_ingredients(self) -> List[Ingredient]:
        rows = self.store.select("ingredients", eq={"user_id": self.user.id}, ascending=False)
        self.ingredients = [Ingredient(**with_translations(r)) for r in rows]
        return self.ingredients

    def add_ingredient(self, data: IngredientCreate) -> Ingredient:
        name = (data.name or "").strip()
        if not name or data.quantity is None or data.quantity < 0:
            raise InputValidationError(FILL_REQUIRED.get(self.language, FILL_REQUIRED["en"]))

        names = bilingual_names(name)
        row = {
            "user_id": self.user.id,
            "name": name,
            "name_en": data.name_en or names["name_en"],
            "name_id": data.name_id or names["name_id"],
            "quantity": float(data.quantity),
            "unit": data.unit or "",
            "category": data.category or "other",
            "expiry_date": data.expiry_date,
        }
        log.info("adding ingredient", extra={"user_id": self.user.id, "ingredient": name})

        created = Ingredient(**self.store.insert("ingredients", row))
        self.ingredients = [created] + self.ingredients
        return created

    def update_ingredient(self, ingredient_id: str, updates: IngredientUpdate) -> Optional[Ingredient]:
        values = {
            k: v
            for k, v in updates.model_dump(exclude_unset=True).items()
            if v is not None or k == "expiry_date"
        }
        if "name" in updates.model_fields_set:
            values.setdefault("name", None)
            name = (values["name"] or "").strip()
            if not name:
                raise InputValidationError(FILL_REQUIRED.get(self.language, FILL_REQUIRED["en"]))
            values["name"] = name
            values.update(bilingual_names(name))
        values["updated_at"] = common.now_iso()

        row = self.store.update("ingredients", values, eq={"id": ingredient_id, "user_id": self.user.id})
        if row is None:
            return None

        updated = Ingredient(**with_translations(row))
        self.ingredients = [updated if i.id == ingredient_id else i for i in self.ingredients]
        return updated

    def delete_ingredient(self, ingredient_id: str) -> bool:
        count = self.store.delete("ingredients", eq={"id": ingredient_id, "user_id": self.user.id})
        self.ingredients = [i for i in self.ingredients if i.id != ingredient_id]
        return count > 0

    # --- recipes ---

    def fetch_recipes(self) -> List[Recipe]:
        rows = self.store.select("recipes", eq={"user_id": self.user.id}, ascending=False)
        self.recipes = [Recipe(**r) for r in rows]
        return self.recipes

    def add_recipe(self, values: Dict[str, Any]) -> Recipe:
        row = self.store.insert("recipes", {**values, "user_id": self.user.id})
        created = Recipe(**row)
        self.recipes = [created] + self.recipes
        return created

    def save_generated_recipe(self, recipe: GeneratedRecipe) -> Recipe:
        return self.add_recipe(recipe_row(recipe))

    def get_recipe(self, recipe_id: str) -> Optional[Recipe]:
        rows = self.store.select("recipes", eq={"id": recipe_id, "user_id": self.user.id})
        self.current_recipe = Recipe(**rows[0]) if rows else None
        return self.current_recipe

    # --- chat ---

    def fetch_chat_history(self) -> List[ChatMessage]:
        rows = self.store.select("chat_history", eq={"user_id": self.user.id}, ascending=True)
        self.chat_messages = [to_chat_message(r) for r in rows]
        # rows are oldest first, so the last one belongs to the newest session
        self.current_session_id = rows[-1]["session_id"] if rows else None
        return self.chat_messages

    def add_chat_message(self, message_type: str, content: str, metadata: Optional[Dict[str, Any]] = None) -> ChatMessage:
        session_id = self.current_session_id or str(uuid.uuid4())
        if not self.current_session_id:
            log.info("starting chat session", extra={"user_id": self.user.id, "session_id": session_id})
            self.current_session_id = session_id

        row = self.store.insert(
            "chat_history",
            {
                "user_id": self.user.id,
                "session_id": session_id,
                "message_type": message_type,
                "content": content,
                "metadata": metadata or {},
                "tokens_used": 0,
                "response_time_ms": 0,
            },
        )
        msg = to_chat_message(row)
        self.chat_messages = self.chat_messages + [msg]
        return msg

    def start_new_chat_session(self) -> None:
        self.current_session_id = None

    def clear_chat_history(self) -> int:
        count = self.store.delete("chat_history", eq={"user_id": self.user.id})
        self.chat_messages = []
        self.current_session_id = None
        log.info("chat history cleared", extra={"user_id": self.user.id, "deleted": count})
        return count


class SessionRegistry:
    """Process-wide map of user id -> KitchenSession."""

    def __init__(self, db_path: Path = KITCHEN_DB, snapshot_path: Path = SNAPSHOT_PATH):
        self.db_path = db_path
        self.snapshot_path = snapshot_path
        self._store: Optional[RecordStore] = None
        self._snapshots: Optional[SnapshotStore] = None
        self._sessions: Dict[str, KitchenSession] = {}
        self._lock = threading.Lock()

    def get(self, user: User) -> KitchenSession:
        with self._lock:
            session = self._sessions.get(user.id)
            if session is not None:
                return session

            if self._store is None:
                self._store = RecordStore(self.db_path)
                self._snapshots = SnapshotStore(self.snapshot_path)

            session = KitchenSession(user, self._store, self._snapshots)
            session.initialize()
            self._sessions[user.id] = session
            return session

    def drop(self, user_id: str) -> None:
        with self._lock:
            self._sessions.pop(user_id, None)

    def active_count(self) -> int:
        return len(self._sessions)


sessions = SessionRegistry()
