# app/routers/assistant.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from app.core.errors import InputValidationError, PersistenceError
from app.models.chat import (
    AssistantMessageRequest,
    AssistantReply,
    ChatHistoryResponse,
    ConnectionTestResponse,
)
from app.models.recipe import GeneratedRecipe, Recipe
from app.routers.deps import get_chef, get_kitchen
from app.services.assistant import handle_message
from app.services.generation import ChefService
from app.services.session import KitchenSession

router = APIRouter(prefix="/assistant", tags=["assistant"])


@router.get("/history", response_model=ChatHistoryResponse)
def history(kitchen: KitchenSession = Depends(get_kitchen)) -> ChatHistoryResponse:
    try:
        messages = kitchen.fetch_chat_history()
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    return ChatHistoryResponse(session_id=kitchen.current_session_id, messages=messages)


@router.delete("/history")
def clear_history(kitchen: KitchenSession = Depends(get_kitchen)) -> dict[str, Any]:
    try:
        deleted = kitchen.clear_chat_history()
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    return {"ok": True, "deleted": deleted}


@router.post("/session/new")
def new_session(kitchen: KitchenSession = Depends(get_kitchen)) -> dict[str, Any]:
    kitchen.start_new_chat_session()
    return {"ok": True, "session_id": kitchen.current_session_id}


@router.post("/message", response_model=AssistantReply)
async def message(
    req: AssistantMessageRequest,
    kitchen: KitchenSession = Depends(get_kitchen),
    chef: ChefService = Depends(get_chef),
) -> AssistantReply:
    try:
        return await handle_message(kitchen, chef, req.text, req.selected_ingredients)
    except (InputValidationError, PersistenceError) as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)


@router.post("/save-recipe", response_model=Recipe, status_code=201)
def save_recipe(recipe: GeneratedRecipe, kitchen: KitchenSession = Depends(get_kitchen)) -> Recipe:
    try:
        return kitchen.save_generated_recipe(recipe)
    except PersistenceError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)


@router.post("/test-connection", response_model=ConnectionTestResponse)
async def test_connection(chef: ChefService = Depends(get_chef)) -> ConnectionTestResponse:
    return ConnectionTestResponse(**await chef.test_connection())
