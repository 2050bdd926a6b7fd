# app/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Response

from app.services.health import readiness, version_payload
from app.services.session import sessions

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only, no store or upstream round trips
    return {"status": "ok", "active_sessions": sessions.active_count(), **version_payload()}


@router.get("/health/ready")
async def ready(response: Response):
    payload, http_status = await readiness()
    response.status_code = http_status
    return payload


@router.get("/version")
def version():
    return version_payload()
