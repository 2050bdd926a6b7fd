# app/routers/deps.py
from __future__ import annotations

from fastapi import Depends, Header, HTTPException

from app.core.errors import PersistenceError
from app.models.chat import User
from app.services.generation import ChefService, chef
from app.services.session import KitchenSession, SessionRegistry, sessions


def current_user(
    x_user_id: str | None = Header(default=None),
    x_user_email: str = Header(default=""),
) -> User:
    # identity comes from the auth layer in front of this service
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return User(id=x_user_id.strip(), email=x_user_email.strip())


def get_registry() -> SessionRegistry:
    return sessions


def get_kitchen(user: User = Depends(current_user), registry: SessionRegistry = Depends(get_registry)) -> KitchenSession:
    try:
        return registry.get(user)
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)


def get_chef() -> ChefService:
    return chef
