# app/clients/chat_proxy.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core import config
from app.core.errors import (
    ConnectivityError,
    EmptyResponseError,
    InvalidRequestError,
    RateLimitedError,
    ServiceMisconfiguredError,
    ServiceUnavailableError,
    UpstreamError,
)

log = logging.getLogger("chef_ai.chat_proxy")

_STATUS_ERRORS = {
    400: (InvalidRequestError, "Invalid request. Please check your input and try again."),
    401: (ServiceMisconfiguredError, "Service authentication error. Please contact support."),
    429: (RateLimitedError, "Too many requests. Please wait a moment and try again."),
    500: (ServiceUnavailableError, "Service temporarily unavailable. Please try again later."),
}


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or "Unknown error"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return "Unknown error"


def raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return

    detail = _error_detail(response)
    log.warning("chat proxy error", extra={"status_code": response.status_code, "error": detail})

    mapped = _STATUS_ERRORS.get(response.status_code)
    if mapped:
        exc_type, message = mapped
        raise exc_type(message)
    raise UpstreamError(f"Service error: {response.status_code} - {detail}", response.status_code)


def extract_content(data: Any) -> str:
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        raise EmptyResponseError("No response generated. Please try with different input.")

    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message")
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content:
        raise EmptyResponseError("Empty response from AI. Please try again.")
    return content


class ChatProxyClient:
    """Posts chat-completion message arrays to the proxy and returns the reply text."""

    def __init__(
        self,
        proxy_url: str = config.CHAT_PROXY_URL,
        max_tokens: int = config.MAX_TOKENS,
        timeout_s: float = config.CHAT_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.proxy_url = proxy_url
        self.max_tokens = max_tokens
        self.timeout_s = timeout_s
        self.transport = transport

    async def post(self, payload: Dict[str, Any]) -> httpx.Response:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                return await client.post(self.proxy_url, json=payload)
        except httpx.RequestError as e:
            log.error("chat proxy unreachable", extra={"error": str(e)})
            raise ConnectivityError(
                "Failed to connect to AI service. Please check your internet connection and try again."
            ) from e

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: float = config.ADVICE_TEMPERATURE,
        max_tokens: Optional[int] = None,
    ) -> str:
        payload: Dict[str, Any] = {
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens or self.max_tokens,
        }

        r = await self.post(payload)
        raise_for_status(r)

        try:
            data = r.json()
        except ValueError as e:
            raise EmptyResponseError("Empty response from AI. Please try again.") from e

        return extract_content(data)

    async def ping(self) -> bool:
        """Minimal round trip through the proxy. Never raises."""
        payload = {
            "messages": [{"role": "user", "content": "Say hello in one word."}],
            "max_tokens": 50,
        }
        try:
            r = await self.post(payload)
            if not r.is_success:
                log.warning("chat proxy ping failed", extra={"status_code": r.status_code})
                return False
            extract_content(r.json())
            return True
        except Exception as e:
            log.warning("chat proxy ping failed", extra={"error": str(e)})
            return False


chat_proxy = ChatProxyClient()
