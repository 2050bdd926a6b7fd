# app/services/health.py
from __future__ import annotations

import json
import sqlite3
import time
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import httpx

from app.core import config

KITCHEN_TABLES = ("ingredients", "recipes", "chat_history")


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check_result(status: str, latency_ms: int, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status, "latency_ms": latency_ms}
    if error:
        out["error"] = error
    return out


def check_store(db_path: Path = config.KITCHEN_DB) -> Dict[str, Any]:
    """The record store is reachable and carries every kitchen table."""
    start = time.perf_counter()
    if not Path(db_path).exists():
        return _check_result("fail", _ms_since(start), f"{db_path} does not exist")
    try:
        conn = sqlite3.connect(f"file:{db_path}?mode=ro", uri=True, timeout=2)
        try:
            rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table';").fetchall()
        finally:
            conn.close()
    except sqlite3.Error as e:
        return _check_result("fail", _ms_since(start), str(e))

    missing = sorted(set(KITCHEN_TABLES) - {r[0] for r in rows})
    if missing:
        return _check_result("fail", _ms_since(start), "missing tables: " + ", ".join(missing))
    return _check_result("ok", _ms_since(start))


def check_snapshots(path: Path = config.SNAPSHOT_PATH) -> Dict[str, Any]:
    start = time.perf_counter()
    if not Path(path).exists():
        # written on first preference change
        return _check_result("ok", _ms_since(start))
    try:
        with open(str(path), "r", encoding="utf-8") as f:
            json.load(f)
    except (OSError, ValueError) as e:
        return _check_result("degraded", _ms_since(start), str(e))
    return _check_result("ok", _ms_since(start))


async def check_upstream(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    start = time.perf_counter()
    key = api_key if api_key is not None else config.LUNOS_API_KEY
    if not key:
        # pantry and history still work, generation does not
        return _check_result("degraded", _ms_since(start), "LUNOS_API_KEY is not set")
    try:
        async with httpx.AsyncClient(timeout=2.0, transport=transport) as client:
            r = await client.get(
                f"{(base_url or config.LUNOS_BASE_URL).rstrip('/')}/models",
                headers={"Authorization": f"Bearer {key}"},
            )
            r.raise_for_status()
        return _check_result("ok", _ms_since(start))
    except httpx.HTTPError as e:
        return _check_result("degraded", _ms_since(start), str(e))


def summarize(checks: Dict[str, Dict[str, Any]]) -> Tuple[str, int]:
    """Store failure means not ready; anything else short of ok is degraded."""
    if checks["store"]["status"] != "ok":
        return "fail", 503
    if any(c["status"] != "ok" for c in checks.values()):
        return "degraded", 200
    return "ok", 200


async def readiness() -> Tuple[Dict[str, Any], int]:
    checks = {
        "store": check_store(),
        "snapshots": check_snapshots(),
        "upstream": await check_upstream(),
    }
    overall, http_status = summarize(checks)
    return {"status": overall, "checks": checks, **version_payload()}, http_status


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
        "model": config.LUNOS_MODEL,
    }
