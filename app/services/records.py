# app/services/records.py
from __future__ import annotations

import json
import logging
import sqlite3
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from app.core.config import KITCHEN_DB
from app.core.errors import PersistenceError
from app.services import common

log = logging.getLogger("chef_ai.records")

# table -> (columns, json-encoded columns)
TABLES: Dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "ingredients": (
        frozenset({
            "id", "user_id", "name", "name_en", "name_id", "quantity", "unit",
            "category", "expiry_date", "created_at", "updated_at",
        }),
        frozenset(),
    ),
    "recipes": (
        frozenset({
            "id", "user_id", "title", "description", "ingredients", "instructions",
            "prep_time", "cook_time", "servings", "difficulty", "cuisine", "tags",
            "tips", "story", "created_at", "updated_at",
        }),
        frozenset({"ingredients", "instructions", "tags", "tips"}),
    ),
    "chat_history": (
        frozenset({
            "id", "user_id", "session_id", "message_type", "content", "metadata",
            "tokens_used", "response_time_ms", "created_at",
        }),
        frozenset({"metadata"}),
    ),
}


def _check(table: str, columns) -> frozenset[str]:
    if table not in TABLES:
        raise PersistenceError(f"Unknown table: {table}")
    known, json_cols = TABLES[table]
    unknown = [c for c in columns if c not in known]
    if unknown:
        raise PersistenceError(f"Unknown column(s) for {table}: {', '.join(sorted(unknown))}")
    return json_cols


class RecordStore:
    """
    Row store with per-user ownership: every query is filtered by equality
    on the given columns (always including user_id at the call sites).
    """

    def __init__(self, db_path: Path = KITCHEN_DB):
        self.db_path = Path(db_path)
        common.init_db(self.db_path)

    def _encode(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        json_cols = _check(table, row.keys())
        out = {}
        for k, v in row.items():
            if k in json_cols:
                v = json.dumps(v if v is not None else ({} if k == "metadata" else []), ensure_ascii=False)
            elif hasattr(v, "isoformat"):
                v = v.isoformat()
            out[k] = v
        return out

    def _decode(self, table: str, row: sqlite3.Row) -> Dict[str, Any]:
        json_cols = TABLES[table][1]
        out = dict(row)
        for k in json_cols:
            if k in out and isinstance(out[k], str):
                try:
                    out[k] = json.loads(out[k])
                except ValueError:
                    log.warning("undecodable json column", extra={"table": table, "column": k})
                    out[k] = {} if k == "metadata" else []
        return out

    def _run(self, action: str, table: str, sql: str, params: tuple) -> Tuple[List[sqlite3.Row], int]:
        try:
            conn = common.kitchen_db(self.db_path)
            try:
                cur = conn.execute(sql, params)
                rows = cur.fetchall()
                conn.commit()
                return rows, cur.rowcount
            finally:
                conn.close()
        except sqlite3.Error as e:
            log.error("record store error", extra={"action": action, "table": table, "error": str(e)})
            raise PersistenceError(f"Failed to {action} {table}: {e}") from e

    def select(
        self,
        table: str,
        *,
        eq: Dict[str, Any],
        order_by: str = "created_at",
        ascending: bool = True,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        _check(table, list(eq.keys()) + [order_by])
        where = " AND ".join(f"{k} = ?" for k in eq) or "1 = 1"
        direction = "ASC" if ascending else "DESC"
        sql = f"SELECT * FROM {table} WHERE {where} ORDER BY {order_by} {direction}, rowid {direction}"
        params = tuple(eq.values())
        if limit is not None:
            sql += " LIMIT ?"
            params += (int(limit),)

        rows, _ = self._run("select", table, sql, params)
        return [self._decode(table, r) for r in rows]

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        now = common.now_iso()
        record = {"id": str(uuid.uuid4()), "created_at": now, **row}
        if "updated_at" in TABLES.get(table, (frozenset(), frozenset()))[0]:
            record.setdefault("updated_at", now)

        encoded = self._encode(table, record)
        cols = ", ".join(encoded)
        marks = ", ".join("?" for _ in encoded)
        self._run("insert", table, f"INSERT INTO {table} ({cols}) VALUES ({marks})", tuple(encoded.values()))

        found = self.select(table, eq={"id": record["id"]})
        if not found:
            raise PersistenceError(f"Inserted {table} row not found")
        return found[0]

    def update(self, table: str, values: Dict[str, Any], *, eq: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if not values:
            found = self.select(table, eq=eq)
            return found[0] if found else None

        _check(table, eq.keys())
        encoded = self._encode(table, values)
        assignments = ", ".join(f"{k} = ?" for k in encoded)
        where = " AND ".join(f"{k} = ?" for k in eq)
        _, count = self._run(
            "update",
            table,
            f"UPDATE {table} SET {assignments} WHERE {where}",
            tuple(encoded.values()) + tuple(eq.values()),
        )
        if count == 0:
            return None
        found = self.select(table, eq=eq)
        return found[0] if found else None

    def delete(self, table: str, *, eq: Dict[str, Any]) -> int:
        if not eq:
            raise PersistenceError("Refusing to delete without a filter")
        _check(table, eq.keys())
        where = " AND ".join(f"{k} = ?" for k in eq)
        _, count = self._run("delete", table, f"DELETE FROM {table} WHERE {where}", tuple(eq.values()))
        return count
