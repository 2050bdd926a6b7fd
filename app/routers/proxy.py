# app/routers/proxy.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from app.core.errors import ProxyError
from app.services.proxy import forward_chat

router = APIRouter(prefix="/api", tags=["proxy"])


@router.post("/chat")
async def chat(payload: Any = Body(default=None)):
    """
    Example payload:
      {
        "messages": [{"role": "user", "content": "Say hello in one word."}],
        "temperature": 0.7,
        "max_tokens": 8192
      }
    """
    if not isinstance(payload, dict):
        return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object"})
    try:
        data = await forward_chat(payload)
    except ProxyError as e:
        return JSONResponse(status_code=e.status_code, content=e.envelope())
    return JSONResponse(status_code=200, content=data)
