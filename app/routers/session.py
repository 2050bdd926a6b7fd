# app/routers/session.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from app.models.chat import SessionState, SessionUpdate, User
from app.routers.deps import current_user, get_kitchen, get_registry
from app.services import inventory
from app.services.session import KitchenSession, SessionRegistry

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=SessionState)
def get_state(kitchen: KitchenSession = Depends(get_kitchen)) -> SessionState:
    return kitchen.state()


@router.patch("", response_model=SessionState)
def update_state(payload: SessionUpdate, kitchen: KitchenSession = Depends(get_kitchen)) -> SessionState:
    if payload.language:
        kitchen.set_language(payload.language)
    if payload.active_view:
        kitchen.set_active_view(payload.active_view)
    return kitchen.state()


@router.get("/dashboard")
def dashboard(kitchen: KitchenSession = Depends(get_kitchen)) -> dict[str, Any]:
    return inventory.dashboard_summary(kitchen.ingredients, kitchen.recipes)


@router.post("/sign-out")
def sign_out(
    user: User = Depends(current_user),
    registry: SessionRegistry = Depends(get_registry),
) -> dict[str, Any]:
    # stored rows stay; only the in-memory session is released
    registry.drop(user.id)
    return {"ok": True}
