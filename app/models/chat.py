# app/models/chat.py
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from app.models.recipe import GeneratedRecipe, Language

MessageType = Literal["user", "ai", "recipe", "system"]
ActiveView = Literal["dashboard", "inventory", "recipes", "ai-chat"]


class ChatMessage(BaseModel):
    id: str
    session_id: str
    type: MessageType
    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
    timestamp: Optional[str] = None


class ChatHistoryResponse(BaseModel):
    session_id: Optional[str] = None
    messages: List[ChatMessage]


class AssistantMessageRequest(BaseModel):
    text: str = ""
    selected_ingredients: List[str] = Field(default_factory=list, alias="selectedIngredients")

    model_config = {"populate_by_name": True}


class AssistantReply(BaseModel):
    language: Language
    messages: List[ChatMessage]
    recipe: Optional[GeneratedRecipe] = None
    error: Optional[str] = None


class ConnectionTestResponse(BaseModel):
    proxy: bool
    service: bool


class User(BaseModel):
    id: str
    email: str = ""


class SessionSnapshot(BaseModel):
    user: Optional[User] = None
    active_view: ActiveView = Field(default="dashboard", alias="activeView")
    language: Language = "en"

    model_config = {"populate_by_name": True}


class SessionUpdate(BaseModel):
    active_view: Optional[ActiveView] = Field(default=None, alias="activeView")
    language: Optional[Language] = None

    model_config = {"populate_by_name": True}


class SessionState(SessionSnapshot):
    current_session_id: Optional[str] = Field(default=None, alias="currentSessionId")
    is_generating: bool = Field(default=False, alias="isGenerating")
