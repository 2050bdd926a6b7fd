# app/services/proxy.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from app.core import config
from app.core.errors import ProxyError

log = logging.getLogger("chef_ai.proxy")

DEFAULT_TEMPERATURE = 0.7


def _validate(payload: Dict[str, Any]) -> Dict[str, Any]:
    messages = payload.get("messages")
    if not isinstance(messages, list) or not messages:
        raise ProxyError(400, 'Parameter "messages" must be a non-empty array')

    temperature = payload.get("temperature", DEFAULT_TEMPERATURE)
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
        raise ProxyError(400, 'Parameter "temperature" must be a number')

    max_tokens = payload.get("max_tokens", config.MAX_TOKENS)
    if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens <= 0:
        raise ProxyError(400, 'Parameter "max_tokens" must be a positive integer')

    return {
        "model": config.LUNOS_MODEL,
        "messages": messages,
        "temperature": float(temperature),
        "max_tokens": max_tokens,
    }


async def forward_chat(
    payload: Dict[str, Any],
    *,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """
    Forward a chat-completion request upstream with the server-side bearer key.
    Returns the upstream envelope verbatim; raises ProxyError otherwise.
    """
    upstream_payload = _validate(payload)

    key = api_key if api_key is not None else config.LUNOS_API_KEY
    if not key:
        log.error("chat completion api key missing")
        raise ProxyError(500, "Chat completion API key is not configured")

    url = f"{(base_url or config.LUNOS_BASE_URL).rstrip('/')}/chat/completions"
    log.info(
        "forwarding chat completion",
        extra={"model": upstream_payload["model"], "message_count": len(upstream_payload["messages"])},
    )

    try:
        async with httpx.AsyncClient(timeout=config.CHAT_TIMEOUT_S, transport=transport) as client:
            r = await client.post(url, json=upstream_payload, headers={"Authorization": f"Bearer {key}"})
    except httpx.RequestError as e:
        log.error("chat completion api unreachable", extra={"error": str(e)})
        raise ProxyError(500, "Error while calling the chat completion API", str(e)) from e

    if not r.is_success:
        body = r.text
        log.error("chat completion api error", extra={"status_code": r.status_code, "body": body[:200]})
        raise ProxyError(
            r.status_code,
            f"Chat completion API returned status {r.status_code}",
            body[:200] or None,
        )

    try:
        return r.json()
    except ValueError as e:
        raise ProxyError(502, "Chat completion API returned a non-JSON body", r.text[:200] or None) from e
